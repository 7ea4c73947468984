"""The authority component of a URI."""

from __future__ import annotations

from typing import Optional, Union

from .errors import ErrorKind, InvalidUri
from .port import Port

# Bytes that may appear in a URI. '%' is absent on purpose: the authority
# scanner treats it separately.
_URI_CHARS = frozenset(
    b"!#$&'()*+,-./0123456789:;=?@"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ[]_"
    b"abcdefghijklmnopqrstuvwxyz~"
)

# e.g. [FEDC:BA98:7654:3210:FEDC:BA98:7654:3210]:80
_MAX_COLONS = 8

_Source = Union[str, bytes, bytearray, memoryview]


def _to_bytes(src: _Source) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def _ascii_lower(text: str) -> bytes:
    return text.encode("utf-8").lower()


def authority_end(data: _Source) -> int:
    """Return the length of the authority at the start of ``data``.

    The authority ends at the first ``/``, ``?`` or ``#``, or at the end of
    the input. The result may be zero. Raises :class:`InvalidUri` if the
    authority is malformed.
    """
    raw = _to_bytes(data)
    colon_count = 0
    start_bracket = False
    end_bracket = False
    has_percent = False
    end = len(raw)
    at_sign_pos: Optional[int] = None

    for i, byte in enumerate(raw):
        if byte in b"/?#":
            end = i
            break
        if byte == ord(":"):
            if colon_count >= _MAX_COLONS:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            colon_count += 1
        elif byte == ord("["):
            if has_percent or start_bracket:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            start_bracket = True
        elif byte == ord("]"):
            if not start_bracket or end_bracket:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            end_bracket = True
            # The colons and percents so far belonged to an IPv6 literal.
            colon_count = 0
            has_percent = False
        elif byte == ord("@"):
            at_sign_pos = i
            # Colons and percents so far belonged to the userinfo.
            colon_count = 0
            has_percent = False
        elif byte == ord("%"):
            # Allowed in userinfo and IPv6 zone identifiers; rejected at the
            # end if it turns out to belong to the host.
            has_percent = True
        elif byte not in _URI_CHARS:
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)

    if start_bracket != end_bracket:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if colon_count > 1:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if end > 0 and at_sign_pos == end - 1:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if has_percent:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    return end


class Authority:
    """The authority of a URI: optional userinfo, a host and optional port.

    Equality, ordering and hashing ignore ASCII case.
    """

    __slots__ = ("_data",)

    def __init__(self, data: str = "") -> None:
        self._data = data

    @classmethod
    def parse(cls, src: _Source) -> "Authority":
        """Parse a complete, non-empty authority."""
        raw = _to_bytes(src)
        if not raw:
            raise InvalidUri(ErrorKind.EMPTY)
        if authority_end(raw) != len(raw):
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
        return cls(raw.decode("ascii"))

    def host(self) -> str:
        """Return the host, including brackets for an IPv6 literal."""
        host_port = self._data.rsplit("@", 1)[-1]
        if host_port.startswith("["):
            return host_port[: host_port.index("]") + 1]
        return host_port.split(":", 1)[0]

    def port(self) -> Optional[Port]:
        """Return the port, or ``None`` if there is no valid one."""
        i = self._data.rfind(":")
        if i < 0:
            return None
        try:
            return Port.parse(self._data[i + 1 :])
        except InvalidUri:
            return None

    def port_u16(self) -> Optional[int]:
        """Return the port number, or ``None`` if there is no valid port."""
        port = self.port()
        return None if port is None else port.as_u16()

    def as_str(self) -> str:
        """Return the authority as text."""
        return self._data

    def _key(self, other: object) -> Optional[bytes]:
        if isinstance(other, Authority):
            return _ascii_lower(other._data)
        if isinstance(other, str):
            return _ascii_lower(other)
        return None

    def __eq__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return _ascii_lower(self._data) == key

    def __lt__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return _ascii_lower(self._data) < key

    def __le__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return _ascii_lower(self._data) <= key

    def __gt__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return _ascii_lower(self._data) > key

    def __ge__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return _ascii_lower(self._data) >= key

    def __hash__(self) -> int:
        return hash(_ascii_lower(self._data))

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return f"Authority({self._data!r})"