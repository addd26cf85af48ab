"""String operations with C-library semantics, expressed over Python strings.

Positions are returned as indices rather than pointers. A search for the
terminating NUL character (``"\\0"``) finds the end of the string, that is
``len(text)``, just as the C functions return a pointer to the terminator.
Functions that write into a fixed-size destination return the resulting
text together with the length they would have needed.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

_NUL = "\0"


def _char(char: int | str) -> str:
    """Normalise a character given as a code or a one-character string."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    return chr(char)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Return the number of characters in *text*."""
    return len(text)


def strchr(text: str, char: int | str) -> int | None:
    """Return the index of the first *char* in *text*, or None.

    Searching for NUL gives ``len(text)``.
    """
    target = _char(char)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: int | str) -> int | None:
    """Return the index of the last *char* in *text*, or None.

    Searching for NUL gives ``len(text)``.
    """
    target = _char(char)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def _compare(first: str, second: str) -> int:
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    if len(first) == len(second):
        return 0
    # The shorter string meets its terminator first.
    if len(first) < len(second):
        return -ord(second[len(first)])
    return ord(first[len(second)])


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the difference of the first unequal codes, or 0."""
    return _compare(first, second)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters of two strings."""
    _check_size("n", n)
    return _compare(first[:n], second[:n])


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* lying wholly within the first *length* characters of *haystack*.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_size("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a destination of *size* characters, terminator included.

    Returns the destination's new text and ``len(src)``. With a size of 0
    the destination is left as it was.
    """
    _check_size("size", size)
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a destination of *size* characters.

    Returns the destination's new text and the length the full
    concatenation would need.
    """
    _check_size("size", size)
    if size == 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strdup(text: str) -> str:
    """Return a copy of *text*."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from index *start*.

    A start at or past the end gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    if not isinstance(text, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: int | str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    if not callable(func):
        raise TypeError("func must be callable")
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buffer: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Replace each item of *buffer* in place with ``func(index, item)``."""
    if not callable(func):
        raise TypeError("func must be callable")
    for index, item in enumerate(buffer):
        buffer[index] = func(index, item)