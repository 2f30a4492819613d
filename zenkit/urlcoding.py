"""Form-style URL encoding: letters, digits and -_.* kept, space as '+', others as %xx."""

from __future__ import annotations

from .cast import hex_digit_to_value, is_hex_char, value_to_hex_digit

_SAFE = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.*"
)


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def url_encode(data) -> str:
    """Encode bytes (or UTF-8 text)."""
    parts = []
    for byte in _as_bytes(data):
        if byte in _SAFE:
            parts.append(chr(byte))
        elif byte == 0x20:
            parts.append("+")
        else:
            parts.append("%" + value_to_hex_digit(byte >> 4) + value_to_hex_digit(byte & 0xF))
    return "".join(parts)


def url_decode(data) -> bytes:
    """Decode without validation; an unfinished escape at the end is dropped."""
    out = bytearray()
    state = 0
    value = 0
    for byte in _as_bytes(data):
        if state == 0:
            if byte == ord("%"):
                state = 1
            elif byte == ord("+"):
                out.append(0x20)
            else:
                out.append(byte)
        elif state == 1:
            value = hex_digit_to_value(chr(byte)) << 4
            state = 2
        else:
            value += hex_digit_to_value(chr(byte))
            out.append(value & 0xFF)
            state = 0
    return bytes(out)


def url_check_coding(coded) -> bool:
    """Whether every '%' is followed by two hex digits."""
    state = 0
    for ch in coded:
        if state == 0:
            if ch == "%":
                state = 1
        elif not is_hex_char(ch):
            return False
        else:
            state = 2 if state == 1 else 0
    return state == 0