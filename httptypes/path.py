"""The path-and-query component of a URI."""

from __future__ import annotations

from typing import Optional, Union

from .errors import ErrorKind, InvalidUri

_Source = Union[str, bytes, bytearray, memoryview]


def _byte_set(*spans: tuple[int, int]) -> frozenset[int]:
    return frozenset(b for low, high in spans for b in range(low, high + 1))


# Bytes that need no percent-encoding in a path, plus '"', '{' and '}',
# which some clients send unencoded (JSON embedded in the path).
_PATH_BYTES = _byte_set(
    (0x21, 0x21),
    (0x24, 0x3B),
    (0x3D, 0x3D),
    (0x40, 0x5F),
    (0x61, 0x7A),
    (0x7C, 0x7C),
    (0x7E, 0x7E),
) | frozenset(b'"{}')

# Bytes allowed in a query: 0x21 / 0x24 - 0x3B / 0x3D / 0x3F - 0x7E
_QUERY_BYTES = _byte_set((0x21, 0x21), (0x24, 0x3B), (0x3D, 0x3D), (0x3F, 0x7E))

_QUESTION = ord("?")
_HASH = ord("#")


def _to_bytes(src: _Source) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def _scan(raw: bytes) -> tuple[int, Optional[int]]:
    """Validate ``raw`` and return where it ends and where the ``?`` is."""
    query: Optional[int] = None
    in_query = False
    for i, byte in enumerate(raw):
        if byte == _HASH:
            return i, query
        if in_query:
            if byte in _QUERY_BYTES or byte >= 0x7F:
                continue
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
        if byte == _QUESTION:
            query = i
            in_query = True
        elif byte not in _PATH_BYTES and byte < 0x7F:
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
    return len(raw), query


class PathAndQuery:
    """The path of a URI and its optional query string.

    Any fragment (from ``#`` onwards) is dropped when parsing.
    """

    __slots__ = ("_data", "_query")

    def __init__(self, data: str = "", query: Optional[int] = None) -> None:
        self._data = data
        self._query = query

    @classmethod
    def parse(cls, src: _Source) -> "PathAndQuery":
        """Parse a path with an optional ``?query`` and ``#fragment``."""
        raw = _to_bytes(src)
        end, query = _scan(raw)
        try:
            data = raw[:end].decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR) from None
        if query is not None:
            # Translate the byte offset of '?' into a character offset.
            query = len(raw[:query].decode("utf-8"))
        return cls(data, query)

    def path(self) -> str:
        """Return the path; an empty path is reported as ``/``."""
        path = self._data if self._query is None else self._data[: self._query]
        return path or "/"

    def query(self) -> Optional[str]:
        """Return the query string after the ``?``, or ``None``."""
        if self._query is None:
            return None
        return self._data[self._query + 1 :]

    def as_str(self) -> str:
        """Return the path and query as text; empty is reported as ``/``."""
        return self._data or "/"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathAndQuery):
            return self._data == other._data
        if isinstance(other, str):
            return self.as_str() == other
        return NotImplemented

    def _other_str(self, other: object) -> Optional[str]:
        if isinstance(other, PathAndQuery):
            return other.as_str()
        if isinstance(other, str):
            return other
        return None

    def __lt__(self, other: object) -> bool:
        text = self._other_str(other)
        if text is None:
            return NotImplemented
        return self.as_str() < text

    def __le__(self, other: object) -> bool:
        text = self._other_str(other)
        if text is None:
            return NotImplemented
        return self.as_str() <= text

    def __gt__(self, other: object) -> bool:
        text = self._other_str(other)
        if text is None:
            return NotImplemented
        return self.as_str() > text

    def __ge__(self, other: object) -> bool:
        text = self._other_str(other)
        if text is None:
            return NotImplemented
        return self.as_str() >= text

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        if not self._data:
            return "/"
        if self._data[0] in "/*":
            return self._data
        return "/" + self._data

    def __repr__(self) -> str:
        return f"PathAndQuery({str(self)!r})"