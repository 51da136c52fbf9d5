"""String helpers with the exact semantics the shell relies on."""

from __future__ import annotations

import re
from itertools import islice, zip_longest
from typing import Optional, Tuple

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_INT_BITS = 32

_NUMBER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _to_c_int(value: int) -> int:
    """Wrap a value into the range of a signed 32-bit integer."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Parsing stops at the first non-digit; text with no digits yields 0.
    Values beyond the 64-bit range saturate and the result is then
    narrowed to a signed 32-bit integer.
    """
    match = _NUMBER_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    magnitude = int(digits) if digits else 0
    if sign == "-":
        value = _LONG_MIN if magnitude > -_LONG_MIN else -magnitude
    else:
        value = _LONG_MAX if magnitude > _LONG_MAX else magnitude
    return _to_c_int(value)


def itoa(number: int) -> str:
    """Render an integer in decimal."""
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove characters of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or -1.
    """
    _require_non_negative("length", length)
    if not needle:
        return 0
    return haystack[:length].find(needle)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code-point difference."""
    _require_non_negative("n", n)
    for a, b in islice(zip_longest(s1, s2, fillvalue="\0"), n):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code-point difference at the first mismatch."""
    for a, b in zip_longest(s1, s2, fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots (one kept for the terminator).

    Returns the copied text and the full length of ``src``.
    """
    _require_non_negative("size", size)
    return src[:max(size - 1, 0)], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation
    would have had, or ``size + len(src)`` when ``dest`` already fills
    the buffer.
    """
    _require_non_negative("size", size)
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings, treating a missing one as absent."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strndup(text: str, length: int) -> str:
    """Return at most the first ``length`` characters of ``text``."""
    _require_non_negative("length", length)
    return text[:length]