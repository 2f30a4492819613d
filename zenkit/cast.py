"""Conversions between numbers, hex digits and byte buffers."""

from __future__ import annotations

import re

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
)


def to_number(text, kind=int):
    """Parse the leading number of text, skipping whitespace; 0 if there is none."""
    pattern = _FLOAT_RE if kind is float else _INT_RE
    match = pattern.match(text)
    if match is None:
        return kind(0)
    return kind(match.group(1))


def value_to_hex_digit(value, upper_case=False) -> str:
    """The hex digit of the low four bits of value."""
    digits = _UPPER_DIGITS if upper_case else _LOWER_DIGITS
    return digits[int(value) & 0xF]


def hex_digit_to_value(ch) -> int:
    """Value of a hex digit character, or -1 if it is not one."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    return -1


def is_hex_char(ch) -> bool:
    return hex_digit_to_value(ch) >= 0


def value_to_hex_number(value) -> str:
    """Lower-case hex form of a non-negative integer, without prefix."""
    value = int(value)
    if value < 0:
        raise ValueError("value must not be negative")
    return format(value, "x")


def hex_number_to_value(text) -> int:
    """Value of the leading hex digits of text; parsing stops at the first other character."""
    value = 0
    for ch in text:
        digit = hex_digit_to_value(ch)
        if digit < 0:
            break
        value = (value << 4) + digit
    return value


def buffer_to_hex_string(data) -> str:
    """Two lower-case hex digits per byte."""
    return bytes(data).hex()


def hex_string_to_buffer(text) -> bytes:
    """Bytes from pairs of hex digits; a trailing odd digit is ignored.

    An invalid digit counts as -1, so it yields the byte of (high << 4 | low) & 0xff.
    """
    out = bytearray()
    for i in range(1, len(text), 2):
        high = hex_digit_to_value(text[i - 1])
        low = hex_digit_to_value(text[i])
        out.append(((high << 4) | low) & 0xFF)
    return bytes(out)