"""String transformations: splitting, trimming and per-character mapping.

Input strings are read as C strings: a NUL character ends the text.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

__all__ = ["split", "strtrim", "strmapi", "striteri"]

NUL = "\0"

CharLike = Union[int, str]


def _cstr(s: str) -> str:
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


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    separator = _char(sep)
    return [piece for piece in _cstr(s).split(separator) if piece]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return _cstr(s).strip(_cstr(charset))


def strmapi(s: str, func: Callable[[int, str], CharLike]) -> str:
    """Return a new string made of ``func(index, char)`` for each character.

    A mapped NUL character ends the result, as it would end a C string.
    """
    mapped = "".join(_char(func(index, ch)) for index, ch in enumerate(_cstr(s)))
    return _cstr(mapped)


def striteri(
    s: MutableSequence,
    func: Callable[[int, object], Optional[object]],
) -> None:
    """Call ``func(index, char)`` on each element of ``s`` up to the first NUL.

    ``s`` is a mutable sequence of characters (a list of one-character
    strings or a bytearray). When ``func`` returns something other than
    None, that value replaces the element in place.
    """
    for index, ch in enumerate(s):
        if ch == NUL or ch == 0:
            break
        result = func(index, ch)
        if result is not None:
            s[index] = result