"""Small string and character helpers used throughout the shell."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def _code(char: str | int) -> int:
    if isinstance(char, int):
        return char
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def _same_kind(original: str | int, code: int) -> str | int:
    return code if isinstance(original, int) else chr(code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. Two signs in a row yield 0. The result wraps to a
    signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        if rest[1:2] in ("+", "-"):
            return 0
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    number = int("".join(digits)) if digits else 0
    return _wrap_int(-number if negative else number)


def itoa(number: int) -> str:
    """Render a signed 32-bit integer as decimal text."""
    return str(_wrap_int(number))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if len(sep) > 1:
        raise ValueError("separator must be a single character")
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if charset is None or not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the match, or None when there is none.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return the code difference."""
    left, right = first[:count], second[:count]
    width = max(len(left), len(right))
    for a, b in zip(left.ljust(width, "\0"), right.ljust(width, "\0")):
        if a != b:
            return ord(a) - ord(b)
    return 0


def is_alpha(char: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(char) <= 126


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        return _same_kind(char, code - 32)
    return char


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(char, code + 32)
    return char