"""Base64 encoding with the standard alphabet and lenient decoding."""

from __future__ import annotations

import base64

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DEMAP = [-1] * 256
for _index, _char in enumerate(_ALPHABET):
    _DEMAP[ord(_char)] = _index
del _index, _char


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode(data) -> str:
    """Base64 text of data, padded with '='."""
    return base64.b64encode(_as_bytes(data)).decode("ascii")


def decode(data) -> bytes:
    """Decode base64 without validation.

    Characters outside the alphabet count as all-one bits, and characters past
    the last full group of four are ignored.
    """
    raw = _as_bytes(data)
    groups = len(raw) >> 2
    size = groups * 3
    if not size:
        return b""
    if raw[-1] == ord("="):
        size -= 2 if raw[-2] == ord("=") else 1
    out = bytearray()
    for g in range(groups):
        v0, v1, v2, v3 = (_DEMAP[b] & 0xFF for b in raw[g * 4:g * 4 + 4])
        out.append(((v0 << 2) | (v1 >> 4)) & 0xFF)
        out.append(((v1 << 4) | (v2 >> 2)) & 0xFF)
        out.append(((v2 << 6) | v3) & 0xFF)
    return bytes(out[:size])


def check(coded) -> bool:
    """Whether coded looks like valid base64: groups of four and proper padding."""
    raw = _as_bytes(coded)
    size = len(raw)
    if size == 0:
        return True
    if size & 0x3:
        return False
    if any(_DEMAP[b] == -1 for b in raw[:size - 2]):
        return False
    c1, c2 = raw[-1], raw[-2]
    pad = ord("=")
    return (
        (c1 == pad and c2 == pad)
        or (c1 == pad and _DEMAP[c2] != -1)
        or (_DEMAP[c1] != -1 and _DEMAP[c2] != -1)
    )


def demap(ch) -> int:
    """Six-bit value of an alphabet character, or -1."""
    code = ord(ch) if isinstance(ch, str) else int(ch)
    if not 0 <= code < 256:
        return -1
    return _DEMAP[code]


def map_value(v64) -> str:
    """Alphabet character of the low six bits of v64."""
    return _ALPHABET[int(v64) & 0x3F]