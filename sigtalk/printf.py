"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT32_MASK = 0xFFFFFFFF
_SIZE_T_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {type(value).__name__}")
    return value


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _convert_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _convert_signed(value: Any) -> str:
    unsigned = _require_int(value, "d") & _UINT32_MASK
    return str(unsigned - (1 << 32) if unsigned >= 1 << 31 else unsigned)


def _convert_unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT32_MASK)


def _convert_hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & _UINT32_MASK, "x")


def _convert_hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _UINT32_MASK, "X")


def _convert_pointer(value: Any) -> str:
    return "0x" + format(_require_int(value, "p") & _SIZE_T_MASK, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _convert_char,
    "s": _convert_string,
    "d": _convert_signed,
    "i": _convert_signed,
    "u": _convert_unsigned,
    "x": _convert_hex_lower,
    "X": _convert_hex_upper,
    "p": _convert_pointer,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions filled in from *args*.

    Unknown conversion characters produce no output and consume no argument.
    A lone '%' at the end of the format is dropped.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_arg(remaining, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    out = stream if stream is not None else sys.stdout
    out.write(text)
    out.flush()
    return len(text)