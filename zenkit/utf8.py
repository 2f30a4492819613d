"""UTF-8 conversion that also handles the old five-byte forms."""

from __future__ import annotations


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogatepass")
    return bytes(data)


def utf8_to_unicode(data) -> str:
    """Decode UTF-8 bytes leniently; decoding stops at a truncated sequence.

    Continuation bits are not checked. A decoded value above U+10FFFF raises ValueError.
    """
    raw = _as_bytes(data)
    n = len(raw)
    chars = []
    i = 0
    while i < n:
        c = raw[i]
        if c & 0x80 == 0:
            value = c
            i += 1
        elif c & 0xE0 == 0xC0:
            if i + 2 > n:
                break
            value = ((c & 0x3F) << 6) | (raw[i + 1] & 0x3F)
            i += 2
        elif c & 0xF0 == 0xE0:
            if i + 3 > n:
                break
            value = ((c & 0x1F) << 12) | ((raw[i + 1] & 0x3F) << 6) | (raw[i + 2] & 0x3F)
            i += 3
        elif c & 0xF8 == 0xF0:
            if i + 4 > n:
                break
            value = (
                ((c & 0x0F) << 18)
                | ((raw[i + 1] & 0x3F) << 12)
                | ((raw[i + 2] & 0x3F) << 6)
                | (raw[i + 3] & 0x3F)
            )
            i += 4
        else:
            if i + 4 > n:
                break
            last = raw[i + 4] if i + 4 < n else 0
            value = (
                ((c & 0x07) << 24)
                | ((raw[i + 1] & 0x3F) << 18)
                | ((raw[i + 2] & 0x3F) << 12)
                | ((raw[i + 3] & 0x3F) << 6)
                | (last & 0x3F)
            )
            i += 4
        if value > 0x10FFFF:
            raise ValueError(f"decoded value {value:#x} is not a Unicode code point")
        chars.append(chr(value))
    return "".join(chars)


def unicode_to_utf8(text) -> bytes:
    """Encode text (or an iterable of code points) to UTF-8, up to five bytes each."""
    out = bytearray()
    for item in text:
        i = ord(item) if isinstance(item, str) else int(item)
        if i < 0x80:
            out.append(i)
        elif i < 0x800:
            out += bytes((0xC0 | (i >> 6), 0x80 | (i & 0x3F)))
        elif i < 0x10000:
            out += bytes((0xE0 | (i >> 12), 0x80 | ((i >> 6) & 0x3F), 0x80 | (i & 0x3F)))
        elif i < 0x200000:
            out += bytes((
                0xF0 | (i >> 18),
                0x80 | ((i >> 12) & 0x3F),
                0x80 | ((i >> 6) & 0x3F),
                0x80 | (i & 0x3F),
            ))
        else:
            out += bytes((
                (0xF8 | (i >> 24)) & 0xFF,
                0x80 | ((i >> 18) & 0x3F),
                0x80 | ((i >> 12) & 0x3F),
                0x80 | ((i >> 6) & 0x3F),
                0x80 | (i & 0x3F),
            ))
    return bytes(out)