"""Writing characters, strings and numbers to streams, and printf-style formatting."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from wolfmaze.chars import itoa

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for an unknown or incomplete conversion in a format string."""


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> int:
    """Write a single character to *stream* (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write *text* to *stream*; None writes nothing."""
    if text is None:
        return 0
    return _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write *text* followed by a newline; None writes nothing."""
    if text is None:
        return 0
    return _target(stream).write(text + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal form of a 32-bit signed integer."""
    return _target(stream).write(itoa(n))


def format_hex(n: int, upper: bool = False) -> str:
    """Return *n* in hexadecimal without prefix, in upper case if asked."""
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    return format(n, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """Return an address as ``0x``-prefixed hex, or ``(nil)`` for a null one."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address & _ULONG_MASK)


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def _convert(spec: str, arg: Any) -> str:
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise FormatError(f"%c needs a single character, got {arg!r}")
            return arg
        return chr(int(arg) & 0xFF)
    if spec in ("d", "i"):
        return str(_signed32(int(arg)))
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "u":
        return str(int(arg) & _UINT_MASK)
    if spec in ("x", "X"):
        return format_hex(int(arg) & _UINT_MASK, upper=spec == "X")
    if spec == "p":
        return format_pointer(None if arg is None else int(arg))
    raise FormatError(f"unknown conversion %{spec}")


def cformat(fmt: str, *args: Any) -> str:
    """Format *fmt* with the conversions c, d, i, s, u, x, X, p and %%."""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        if spec not in "cdisuxXp":
            raise FormatError(f"unknown conversion %{spec}")
        try:
            arg = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        pieces.append(_convert(spec, arg))
    return "".join(pieces)


def cprintf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format like :func:`cformat`, write to *stream* and return the characters written."""
    text = cformat(fmt, *args)
    _target(stream).write(text)
    return len(text)