"""String helpers with C-string semantics.

Strings are Python ``str`` objects. They are read as C strings would
be: a NUL character (``"\\0"``) ends the text, and anything after it is
ignored. Functions that would hand back a pointer into a string return
an index into it instead, or None where no position exists.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "strjoin",
    "substr",
]

NUL = "\0"

CharLike = Union[int, str]


def _cstr(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    end = s.find(NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the text that fits (at most ``size - 1`` characters) and the
    full length of ``src``, so truncation shows as a total at or above
    ``size``.
    """
    _check_size(size)
    text = _cstr(src)
    copied = text[: size - 1] if size else ""
    return copied, len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation
    would need. When ``size`` does not exceed the length of ``dest``,
    ``dest`` is left unchanged and ``size + len(src)`` is returned.
    """
    _check_size(size)
    head = _cstr(dest)
    tail = _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL gives the index of the terminator, the length.
    """
    text = _cstr(s)
    target = _char(c)
    if target == NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL gives the index of the terminator, the length.
    """
    text = _cstr(s)
    target = _char(c)
    if target == NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, size: int) -> int:
    """Compare at most ``size`` characters.

    Returns the difference of the code points of the first unequal pair,
    with the end of a string counting as zero, or 0 when they match.
    """
    _check_size(size)
    a, b = _cstr(s1), _cstr(s2)
    for i in range(size):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb:
            return ca - cb
        if ca == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0. Returns the index of the
    match, or None.
    """
    _check_size(length)
    needle = _cstr(little)
    if not needle:
        return 0
    if length == 0:
        return None
    haystack = _cstr(big)[:length]
    index = haystack.find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of the C string ``s``."""
    return _cstr(s)


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _cstr(s1) + _cstr(s2)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    _check_size(length)
    text = _cstr(s)
    if start > len(text):
        return ""
    return text[start : start + length]