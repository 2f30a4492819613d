"""Deterministic 32-bit pseudo-random generators."""

from __future__ import annotations

_M32 = 0xFFFFFFFF


class LFSRGenerator:
    """Combined linear feedback shift register generator."""

    MAX_VALUE = _M32

    def __init__(self, seed=0):
        self.reset(seed)

    def reset(self, seed) -> None:
        seed &= _M32
        self._z1 = seed | 0x2
        self._z2 = (((seed >> 4) ^ (seed << 8)) & _M32) | 0x8
        self._z3 = (((seed >> 6) ^ (seed << 5)) & _M32) | 0x10
        self._z4 = (((seed >> 8) ^ (seed << 2)) & _M32) | 0x80

    def __call__(self) -> int:
        z1, z2, z3, z4 = self._z1, self._z2, self._z3, self._z4
        tbit = (((z1 << 6) & _M32) ^ z1) >> 13
        z1 = (((z1 & 0xFFFFFFFE) << 18) & _M32) ^ tbit
        tbit = (((z2 << 2) & _M32) ^ z2) >> 27
        z2 = (((z2 & 0xFFFFFFF8) << 2) & _M32) ^ tbit
        tbit = (((z3 << 13) & _M32) ^ z3) >> 21
        z3 = (((z3 & 0xFFFFFFF0) << 7) & _M32) ^ tbit
        tbit = (((z4 << 3) & _M32) ^ z4) >> 12
        z4 = (((z4 & 0xFFFFFF80) << 13) & _M32) ^ tbit
        self._z1, self._z2, self._z3, self._z4 = z1, z2, z3, z4
        return z1 ^ z2 ^ z3 ^ z4


class WellGenerator:
    """WELL512 generator."""

    MAX_VALUE = _M32
    _LEN = 16

    def __init__(self, seed=0):
        self.reset(seed)

    def reset(self, seed) -> None:
        seed &= _M32
        self._index = 0
        self._states = [seed] + [
            ((seed >> i) ^ ((((seed + i) & _M32) << i) & _M32)) for i in range(1, self._LEN)
        ]

    def __call__(self) -> int:
        s = self._states
        idx = self._index
        a = s[idx]
        c = s[(idx + 13) & 15]
        b = a ^ c ^ ((a << 16) & _M32) ^ ((c << 15) & _M32)
        c = s[(idx + 9) & 15]
        c ^= c >> 11
        a = s[idx] = b ^ c
        d = a ^ ((a << 5) & 0xDA442D24)
        idx = (idx + 15) & 15
        a = s[idx]
        s[idx] = (a ^ b ^ d ^ (a << 2) ^ (b << 18) ^ (c << 28)) & _M32
        self._index = idx
        return s[idx]


class RandomNG:
    """Front end over a raw generator with bounded and float draws."""

    def __init__(self, seed=0, generator=LFSRGenerator, max_value=None):
        if isinstance(generator, type):
            self._func = generator(seed)
        else:
            self._func = generator
        self.max_value = max_value if max_value is not None else self._func.MAX_VALUE

    def reset(self, seed) -> None:
        self._func.reset(seed)

    def next(self, max_value=None) -> int:
        """Next raw value, or a value in [0, max_value) when a bound is given."""
        if max_value is None:
            return self._func()
        if max_value < 2:
            return 0
        return self._func() % max_value

    def nextf(self) -> float:
        """Next value scaled into [0, 1]."""
        return self._func() / self.max_value

    def __call__(self) -> int:
        return self.next()