"""NUL-terminated string helpers and a length-carrying string view."""

from __future__ import annotations

from functools import total_ordering

_NUL = "\0"


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL, or the whole length."""
    idx = s.find(_NUL)
    return len(s) if idx < 0 else idx


def _terminated(s: str) -> str:
    return s[: strlen(s)]


def strcmp(lhs: str, rhs: str) -> int:
    """Compare two NUL-terminated strings.

    Returns the difference between the first pair of differing characters,
    with the terminating NUL counting as code point zero.
    """
    a, b = _terminated(lhs), _terminated(rhs)
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) < len(b):
        return -ord(b[len(a)])
    if len(a) > len(b):
        return ord(a[len(b)])
    return 0


def strcmp_ordering(lhs: str, rhs: str) -> int:
    """Three-way comparison of two NUL-terminated strings: -1, 0 or 1."""
    result = strcmp(lhs, rhs)
    return (result > 0) - (result < 0)


def strdup(s: str, length: int | None = None) -> str:
    """Copy a string: up to the first NUL, or exactly ``length`` characters."""
    if length is None:
        return _terminated(s)
    if length < 0:
        raise ValueError("length must not be negative")
    return s[:length]


@total_ordering
class CString:
    """A string view with an explicit length and an optional missing value."""

    __slots__ = ("_text", "_length")

    def __init__(self, text: str | None = None, length: int | None = None) -> None:
        if text is None:
            if length:
                raise ValueError("an empty CString cannot have a length")
            self._text: str | None = None
            self._length = 0
            return
        if length is None:
            length = strlen(text)
        if not 0 <= length <= len(text):
            raise ValueError(f"length {length} out of range for a string of {len(text)}")
        self._text = text
        self._length = length

    def size(self) -> int:
        return self._length

    def length(self) -> int:
        return self._length

    def view(self) -> str:
        """The characters the view covers."""
        if self._text is None:
            return ""
        return self._text[: self._length]

    def substr(self, offset: int) -> CString:
        """A new view with the first ``offset`` characters dropped."""
        if not 0 <= offset <= self._length:
            raise ValueError(f"offset {offset} out of range for length {self._length}")
        if self._text is None:
            return CString()
        return CString(self._text[offset:], self._length - offset)

    def remove_prefix(self, count: int) -> None:
        """Drop the first ``count`` characters from this view."""
        if not 0 <= count <= self._length:
            raise ValueError(f"count {count} out of range for length {self._length}")
        if self._text is None:
            return
        self._text = self._text[count:]
        self._length -= count

    def __str__(self) -> str:
        return self.view()

    def __repr__(self) -> str:
        if self._text is None:
            return "CString()"
        return f"CString({self.view()!r})"

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._text is not None

    @staticmethod
    def _other_view(other: object) -> str | None:
        if isinstance(other, CString):
            return other.view()
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        view = self._other_view(other)
        if view is None:
            return NotImplemented
        return self.view() == view

    def __lt__(self, other: object) -> bool:
        view = self._other_view(other)
        if view is None:
            return NotImplemented
        return self.view() < view

    def __hash__(self) -> int:
        return hash(self.view())


def c_str(text: str) -> CString:
    """Make a CString covering the whole of ``text``, NULs included."""
    return CString(text, len(text))