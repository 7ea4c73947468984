"""The scheme component of a URI."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple, Union

from .errors import ErrorKind, InvalidUri

MAX_SCHEME_LEN = 64

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." ), plus ':' and '~'
# which the detector treats specially or tolerates.
_SCHEME_CHARS = frozenset(
    b"+-.0123456789:"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz~"
)

_Source = Union[str, bytes, bytearray, memoryview]


def _to_bytes(src: _Source) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


class Scheme:
    """The scheme of a URI, such as ``http`` or ``https``.

    The two standard schemes compare equal only to themselves; any other
    scheme compares case-insensitively with other non-standard schemes.
    Comparison with a plain string is always case-insensitive.
    """

    __slots__ = ("_value", "_standard")

    HTTP: ClassVar["Scheme"]
    HTTPS: ClassVar["Scheme"]

    def __init__(self, value: str, standard: bool = False) -> None:
        self._value = value
        self._standard = standard

    @classmethod
    def parse(cls, src: _Source) -> "Scheme":
        """Parse a complete scheme (without ``://``)."""
        data = _to_bytes(src)
        if data == b"http":
            return cls.HTTP
        if data == b"https":
            return cls.HTTPS
        if len(data) > MAX_SCHEME_LEN:
            raise InvalidUri(ErrorKind.SCHEME_TOO_LONG)
        for byte in data:
            if byte == ord(":") or byte not in _SCHEME_CHARS:
                raise InvalidUri(ErrorKind.INVALID_SCHEME)
        return cls(data.decode("ascii"))

    def as_str(self) -> str:
        """Return the scheme as text."""
        return self._value

    @property
    def is_standard(self) -> bool:
        """Whether this is one of the built-in ``http``/``https`` schemes."""
        return self._standard

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Scheme):
            if self._standard or other._standard:
                return self._standard and other._standard and self._value == other._value
            return self._value.lower() == other._value.lower()
        if isinstance(other, str):
            return self._value.lower() == other.lower()
        return NotImplemented

    def __hash__(self) -> int:
        if self._standard:
            return hash(("standard", self._value))
        return hash(("other", self._value.lower()))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return repr(self._value)


Scheme.HTTP = Scheme("http", standard=True)
Scheme.HTTPS = Scheme("https", standard=True)


def detect_scheme(data: _Source) -> Optional[Tuple[Scheme, int]]:
    """Detect a ``scheme://`` prefix at the start of ``data``.

    Returns the scheme and the number of bytes it occupies including the
    ``://`` separator, or ``None`` if there is no scheme prefix.
    """
    raw = _to_bytes(data)

    if len(raw) >= 7 and raw[:7].lower() == b"http://":
        return Scheme.HTTP, 7
    if len(raw) >= 8 and raw[:8].lower() == b"https://":
        return Scheme.HTTPS, 8

    if len(raw) > 3:
        for i, byte in enumerate(raw):
            if byte == ord(":"):
                if len(raw) < i + 3 or raw[i + 1 : i + 3] != b"//":
                    break
                if i > MAX_SCHEME_LEN:
                    raise InvalidUri(ErrorKind.SCHEME_TOO_LONG)
                return Scheme(raw[:i].decode("ascii")), i + 3
            if byte not in _SCHEME_CHARS:
                break

    return None