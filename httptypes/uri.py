"""URIs as they appear in HTTP request targets, and a builder for them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .authority import Authority, authority_end
from .errors import ErrorKind, InvalidUri, InvalidUriParts
from .path import PathAndQuery
from .port import Port
from .scheme import Scheme, detect_scheme

# One less than the largest 16-bit value, which is reserved.
MAX_LEN = 0xFFFF - 1

_Source = Union[str, bytes, bytearray, memoryview]

_EMPTY_PATH = PathAndQuery()


def _to_bytes(src: _Source) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def _is_empty_path(path_and_query: PathAndQuery) -> bool:
    return path_and_query == _EMPTY_PATH


@dataclass
class Parts:
    """The separate components of a URI, any of which may be absent."""

    scheme: Optional[Scheme] = None
    authority: Optional[Authority] = None
    path_and_query: Optional[PathAndQuery] = None


class Uri:
    """A URI in origin, absolute, authority or asterisk form.

    ``Uri()`` with no arguments is the URI ``/``.
    """

    __slots__ = ("_scheme", "_authority", "_path_and_query")

    def __init__(self) -> None:
        self._scheme: Optional[Scheme] = None
        self._authority = Authority()
        self._path_and_query = PathAndQuery("/")

    @classmethod
    def _new(
        cls,
        scheme: Optional[Scheme],
        authority: Authority,
        path_and_query: PathAndQuery,
    ) -> "Uri":
        uri = cls.__new__(cls)
        uri._scheme = scheme
        uri._authority = authority
        uri._path_and_query = path_and_query
        return uri

    @classmethod
    def parse(cls, src: Union[_Source, Authority, PathAndQuery]) -> "Uri":
        """Parse text or bytes as a URI.

        An :class:`Authority` or :class:`PathAndQuery` is turned into a URI
        holding only that component.
        """
        if isinstance(src, Authority):
            return cls._new(None, src, PathAndQuery())
        if isinstance(src, PathAndQuery):
            return cls._new(None, Authority(), src)

        raw = _to_bytes(src)
        if len(raw) > MAX_LEN:
            raise InvalidUri(ErrorKind.TOO_LONG)
        if not raw:
            raise InvalidUri(ErrorKind.EMPTY)
        if len(raw) == 1:
            if raw == b"/":
                return cls._new(None, Authority(), PathAndQuery("/"))
            if raw == b"*":
                return cls._new(None, Authority(), PathAndQuery("*"))
            return cls._new(None, Authority.parse(raw), PathAndQuery())
        if raw[:1] == b"/":
            return cls._new(None, Authority(), PathAndQuery.parse(raw))
        return cls._parse_full(raw)

    @classmethod
    def _parse_full(cls, raw: bytes) -> "Uri":
        detected = detect_scheme(raw)
        scheme: Optional[Scheme] = None
        if detected is not None:
            scheme, consumed = detected
            raw = raw[consumed:]

        end = authority_end(raw)

        if scheme is None:
            if end != len(raw):
                raise InvalidUri(ErrorKind.INVALID_FORMAT)
            return cls._new(None, Authority(raw.decode("ascii")), PathAndQuery())

        # An absolute URI needs an authority.
        if end == 0:
            raise InvalidUri(ErrorKind.INVALID_FORMAT)

        authority = Authority(raw[:end].decode("ascii"))
        return cls._new(scheme, authority, PathAndQuery.parse(raw[end:]))

    @classmethod
    def from_parts(cls, parts: Parts) -> "Uri":
        """Assemble a URI from its parts, checking they form a valid URI."""
        if parts.scheme is not None:
            if parts.authority is None:
                raise InvalidUriParts(ErrorKind.AUTHORITY_MISSING)
            if parts.path_and_query is None:
                raise InvalidUriParts(ErrorKind.PATH_AND_QUERY_MISSING)
        elif parts.authority is not None and parts.path_and_query is not None:
            raise InvalidUriParts(ErrorKind.SCHEME_MISSING)

        return cls._new(
            parts.scheme,
            parts.authority if parts.authority is not None else Authority(),
            parts.path_and_query if parts.path_and_query is not None else PathAndQuery(),
        )

    @classmethod
    def builder(cls) -> "Builder":
        """Return a new :class:`Builder`."""
        return Builder()

    def into_parts(self) -> Parts:
        """Split this URI into its present parts."""
        return Parts(
            scheme=self._scheme,
            authority=self.authority(),
            path_and_query=self._path_and_query if self._has_path() else None,
        )

    def path_and_query(self) -> Optional[PathAndQuery]:
        """Return the path and query, or ``None`` for authority-form URIs."""
        if self._scheme is not None or not self._authority.as_str():
            return self._path_and_query
        return None

    def path(self) -> str:
        """Return the path; empty for authority-form URIs."""
        if self._has_path():
            return self._path_and_query.path()
        return ""

    def scheme(self) -> Optional[Scheme]:
        """Return the scheme, if any."""
        return self._scheme

    def scheme_str(self) -> Optional[str]:
        """Return the scheme as text, if any."""
        return None if self._scheme is None else self._scheme.as_str()

    def authority(self) -> Optional[Authority]:
        """Return the authority, if any."""
        if not self._authority.as_str():
            return None
        return self._authority

    def host(self) -> Optional[str]:
        """Return the host of the authority, if any."""
        authority = self.authority()
        return None if authority is None else authority.host()

    def port(self) -> Optional[Port]:
        """Return the port of the authority, if any."""
        authority = self.authority()
        return None if authority is None else authority.port()

    def port_u16(self) -> Optional[int]:
        """Return the port number, if any."""
        port = self.port()
        return None if port is None else port.as_u16()

    def query(self) -> Optional[str]:
        """Return the query string after the ``?``, if any."""
        return self._path_and_query.query()

    def _has_path(self) -> bool:
        return not _is_empty_path(self._path_and_query) or self._scheme is not None

    def _matches_text(self, text: str) -> bool:
        other = text.encode("utf-8")
        absolute = False

        if self._scheme is not None:
            scheme = self._scheme.as_str().encode("ascii")
            absolute = True
            if len(other) < len(scheme) + 3:
                return False
            if other[: len(scheme)].lower() != scheme.lower():
                return False
            other = other[len(scheme) :]
            if other[:3] != b"://":
                return False
            other = other[3:]

        authority = self.authority()
        if authority is not None:
            data = authority.as_str().encode("ascii")
            absolute = True
            if len(other) < len(data):
                return False
            if other[: len(data)].lower() != data.lower():
                return False
            other = other[len(data) :]

        path = self.path().encode("utf-8")
        if not other.startswith(path):
            # An absolute URI may omit a bare "/" path.
            if not (absolute and path == b"/"):
                return False
        else:
            other = other[len(path) :]

        query = self.query()
        if query is not None:
            if not other:
                return query == ""
            if other[:1] != b"?":
                return False
            other = other[1:]
            encoded = query.encode("utf-8")
            if not other.startswith(encoded):
                return False
            other = other[len(encoded) :]

        return not other or other[:1] == b"#"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Uri):
            return (
                self.scheme() == other.scheme()
                and self.authority() == other.authority()
                and self.path() == other.path()
                and self.query() == other.query()
            )
        if isinstance(other, str):
            return self._matches_text(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._scheme, self.authority(), self.path(), self.query()))

    def __str__(self) -> str:
        pieces = []
        if self._scheme is not None:
            pieces.append(f"{self._scheme}://")
        authority = self.authority()
        if authority is not None:
            pieces.append(str(authority))
        pieces.append(self.path())
        query = self.query()
        if query is not None:
            pieces.append(f"?{query}")
        return "".join(pieces)

    def __repr__(self) -> str:
        return f"Uri({str(self)!r})"


class Builder:
    """Builds a :class:`Uri` step by step.

    Errors from the individual steps are held back and raised by
    :meth:`build`.
    """

    __slots__ = ("_parts", "_error")

    def __init__(self) -> None:
        self._parts = Parts()
        self._error: Optional[InvalidUri] = None

    @classmethod
    def from_uri(cls, uri: Uri) -> "Builder":
        """Start a builder from the parts of an existing URI."""
        builder = cls()
        builder._parts = uri.into_parts()
        return builder

    def scheme(self, scheme: Union[Scheme, _Source]) -> "Builder":
        """Set the scheme."""
        if self._error is None:
            try:
                self._parts.scheme = scheme if isinstance(scheme, Scheme) else Scheme.parse(scheme)
            except InvalidUri as exc:
                self._error = exc
        return self

    def authority(self, auth: Union[Authority, _Source]) -> "Builder":
        """Set the authority."""
        if self._error is None:
            try:
                self._parts.authority = auth if isinstance(auth, Authority) else Authority.parse(auth)
            except InvalidUri as exc:
                self._error = exc
        return self

    def path_and_query(self, p_and_q: Union[PathAndQuery, _Source]) -> "Builder":
        """Set the path and query."""
        if self._error is None:
            try:
                self._parts.path_and_query = (
                    p_and_q if isinstance(p_and_q, PathAndQuery) else PathAndQuery.parse(p_and_q)
                )
            except InvalidUri as exc:
                self._error = exc
        return self

    def build(self) -> Uri:
        """Construct the URI, raising any error met while building."""
        if self._error is not None:
            raise self._error
        return Uri.from_parts(self._parts)