"""Formatted output following the field rules of the shell's own printf.

Supported conversions are ``c s p d i u x X %`` with the flags ``- 0 + space #``,
a field width and a precision. Padding follows the shell's implementation
exactly, including its handling of ``#`` together with zero padding.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .strings import atoi

SPECIFIERS = "cspdiuxX%"
NULL_STRING = "(null)"

_DIGITS = re.compile(r"[0-9]*")
_UINT_MODULUS = 1 << 32
_POINTER_MODULUS = 1 << 64


@dataclass
class FormatSpec:
    """The flags, width, precision and conversion of one directive."""

    left_align: bool = False
    zero_pad: bool = False
    plus: bool = False
    space: bool = False
    alternate: bool = False
    has_precision: bool = False
    width: int = 0
    precision: int = -1
    specifier: str = ""

    @property
    def has_width(self) -> bool:
        """Whether an explicit field width was given."""
        return self.width > 0


def _skip_digits(fmt: str, pos: int) -> int:
    return _DIGITS.match(fmt, pos).end()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_spec(fmt: str, pos: int) -> Tuple[FormatSpec, int]:
    """Parse the directive that starts at ``pos`` (just after the ``%``).

    Returns the parsed spec and the index of its conversion character, or
    ``len(fmt)`` when the text ends before one. Characters that are neither
    flags, widths nor conversions are skipped; a period followed by anything
    other than a digit or a conversion is ignored together with that
    following character.
    """
    spec = FormatSpec()
    end = len(fmt)
    while pos < end and fmt[pos] not in SPECIFIERS:
        ch = fmt[pos]
        if ch == "-":
            spec.left_align = True
            spec.zero_pad = False
        elif ch == "0":
            if not spec.left_align:
                spec.zero_pad = True
        elif "1" <= ch <= "9":
            spec.width = atoi(fmt[pos:])
            pos = _skip_digits(fmt, pos)
            continue
        elif ch == " ":
            spec.space = True
        elif ch == "+":
            spec.plus = True
        elif ch == "#":
            spec.alternate = True
        elif ch == ".":
            pos += 1
            if pos >= end or _is_digit(fmt[pos]) or fmt[pos] in SPECIFIERS:
                spec.has_precision = True
                spec.precision = atoi(fmt[pos:]) if pos < end else 0
                pos = _skip_digits(fmt, pos)
                continue
        pos += 1
    if pos < end:
        spec.specifier = fmt[pos]
    return spec, pos


def hex_address(value: int) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits."""
    return "0x" + format(value % _POINTER_MODULUS, "x")


def _padding(spec: FormatSpec, count: int) -> str:
    """Return ``count`` fill characters (none when ``count`` is not positive)."""
    fill = "0" if spec.zero_pad else " "
    return fill * max(count, 0)


def _render_char(spec: FormatSpec, ch: str) -> str:
    padding = _padding(spec, spec.width - 1) if spec.has_width else ""
    return ch + padding if spec.left_align else padding + ch


def _render_string(spec: FormatSpec, text: Optional[str]) -> str:
    if text is None:
        text = NULL_STRING
    if spec.precision != -1 and spec.precision < len(text):
        text = text[:spec.precision]
    padding = _padding(spec, spec.width - len(text))
    return text + padding if spec.left_align else padding + text


def _render_integer(spec: FormatSpec, value: int, digits: str, prefix: str = "") -> str:
    out: List[str] = []
    negative = value < 0
    left = spec.left_align
    width = spec.width - len(prefix)
    precision = spec.precision
    zero_fill = spec.zero_pad and not spec.has_precision and not (value == 0 and precision == 0)
    fill = "0" if zero_fill else " "
    if negative:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    print_len = len(digits) + int(negative or spec.plus)

    def gap(sign_char: str) -> None:
        nonlocal width
        if left:
            limit = print_len
        else:
            limit = max(precision + int(sign_char == "+") + int(negative), print_len)
        if width > 0 and value == 0 and precision == 0:
            out.append(fill)
        offset = int(sign_char == " ")
        while width - offset > limit:
            out.append(fill)
            width -= 1
        width -= 1

    def body(sign_char: str) -> None:
        nonlocal width, precision
        out.append(prefix)
        target = print_len - int(sign_char == "+")
        if precision + negative > target:
            precision -= 1
            while precision + negative >= target:
                out.append("0")
                width -= 1
                precision -= 1
            if value == 0:
                precision += 1
        if not (value == 0 and precision == 0):
            out.append(digits)

    if not left:
        if fill == "0" and sign:
            out.append(sign)
            sign = ""
        gap(sign)
        out.append(sign)
    else:
        out.append(sign)
    body(sign)
    if left:
        gap(sign)
    return "".join(out)


def _require_int(spec: FormatSpec, arg: Any) -> int:
    if not isinstance(arg, int):
        raise TypeError(f"%{spec.specifier} requires an integer, got {type(arg).__name__}")
    return arg


def _signed(spec: FormatSpec, arg: Any) -> str:
    value = _require_int(spec, arg)
    half = _UINT_MODULUS >> 1
    value = (value + half) % _UINT_MODULUS - half
    return _render_integer(spec, value, str(abs(value)))


def _unsigned(spec: FormatSpec, arg: Any) -> str:
    value = _require_int(spec, arg) % _UINT_MODULUS
    return _render_integer(spec, value, str(value))


def _hexadecimal(spec: FormatSpec, arg: Any) -> str:
    value = _require_int(spec, arg) % _UINT_MODULUS
    upper = spec.specifier == "X"
    digits = format(value, "X" if upper else "x")
    prefix = ("0X" if upper else "0x") if spec.alternate and value else ""
    return _render_integer(spec, value, digits, prefix)


def _character(spec: FormatSpec, arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c requires a single character")
        return _render_char(spec, arg)
    return _render_char(spec, chr(_require_int(spec, arg) & 0xFF))


def _string(spec: FormatSpec, arg: Any) -> str:
    if arg is not None and not isinstance(arg, str):
        raise TypeError(f"%s requires a string, got {type(arg).__name__}")
    return _render_string(spec, arg)


def _pointer(spec: FormatSpec, arg: Any) -> str:
    if arg is None:
        return _render_string(spec, "0x0")
    return _render_string(spec, hex_address(_require_int(spec, arg)))


_CONVERSIONS: Dict[str, Callable[[FormatSpec, Any], str]] = {
    "c": _character,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hexadecimal,
    "X": _hexadecimal,
}


def _render(spec: FormatSpec, values: Iterator[Any]) -> str:
    if spec.specifier == "%":
        return _render_char(spec, "%")
    try:
        arg = next(values)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec.specifier}") from None
    return _CONVERSIONS[spec.specifier](spec, arg)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    pieces: List[str] = []
    values = iter(args)
    pos = 0
    end = len(fmt)
    while True:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1)
        if pos >= end:
            break
        pieces.append(_render(spec, values))
        pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)