"""Errors raised when a URI or one of its components fails to parse."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """The reason a URI could not be constructed; the value is its message."""

    INVALID_URI_CHAR = "invalid uri character"
    INVALID_SCHEME = "invalid scheme"
    INVALID_AUTHORITY = "invalid authority"
    INVALID_PORT = "invalid port"
    INVALID_FORMAT = "invalid format"
    SCHEME_MISSING = "scheme missing"
    AUTHORITY_MISSING = "authority missing"
    PATH_AND_QUERY_MISSING = "path missing"
    TOO_LONG = "uri too long"
    EMPTY = "empty string"
    SCHEME_TOO_LONG = "scheme too long"

    @property
    def message(self) -> str:
        return self.value


class InvalidUri(ValueError):
    """Raised when text cannot be parsed as a URI or URI component."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.message


class InvalidUriParts(InvalidUri):
    """Raised when a set of URI parts does not form a valid URI."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind)