"""The port component of a URI."""

from __future__ import annotations

import re

from .errors import ErrorKind, InvalidUri

_PORT_RE = re.compile(r"\+?[0-9]+")
_MAX_PORT = 0xFFFF


class Port:
    """A port number together with the text it was parsed from."""

    __slots__ = ("_port", "_text")

    def __init__(self, port: int, text: str) -> None:
        self._port = port
        self._text = text

    @classmethod
    def parse(cls, text: str) -> "Port":
        """Parse text holding a 16-bit unsigned decimal number."""
        if _PORT_RE.fullmatch(text) is None:
            raise InvalidUri(ErrorKind.INVALID_PORT)
        value = int(text)
        if value > _MAX_PORT:
            raise InvalidUri(ErrorKind.INVALID_PORT)
        return cls(value, text)

    def as_u16(self) -> int:
        """Return the port number."""
        return self._port

    def as_str(self) -> str:
        """Return the port as the text it was parsed from."""
        return self._text

    def __int__(self) -> int:
        return self._port

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Port):
            return self._port == other._port
        if isinstance(other, int) and not isinstance(other, bool):
            return self._port == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._port)

    def __str__(self) -> str:
        return str(self._port)

    def __repr__(self) -> str:
        return f"Port({self._port})"