"""Small numeric helpers and constants."""

from __future__ import annotations

F_EPSILON = 1.192092896e-07
F_PI = 3.1415926535897932384626433832795
F_2PI = 6.283185307179586476925286766559
F_PI2 = 1.5707963267948966192313216916398
F_PI4 = 0.78539816339744830961566084581988
F_SQRT_2 = 1.4142135623730950488016887242097
F_SQRT_3 = 1.7320508075688772935274463415059
F_SQRT_5 = 2.2360679774997896964091736687313


def square(value):
    return value * value


def cube(value):
    return value * value * value


def is_fuzzy_zero(num, var=F_EPSILON) -> bool:
    return -var < num < var


def is_fuzzy_equal(num0, num1, var=F_EPSILON) -> bool:
    return is_fuzzy_zero(num0 - num1, var)


def lerp(start, end, v):
    return start + (end - start) * v


def _trunc_mod(n: int, m: int) -> int:
    r = abs(n) % abs(m)
    return -r if n < 0 else r


def get_gcd(n, m) -> int:
    """Greatest common divisor by Euclid; 1 if either argument is zero."""
    if m == 0 or n == 0:
        return 1
    while m:
        n, m = m, _trunc_mod(n, m)
    return n


def get_min_power_two(v, bits=32) -> int:
    """Smallest power of two not below v, in an unsigned integer of the given width."""
    if bits not in (16, 32, 64):
        raise ValueError(f"unsupported width: {bits}")
    mask = (1 << bits) - 1
    v &= mask
    if v == 0:
        return 0
    v -= 1
    shift = 1
    while shift < bits:
        v |= v >> shift
        shift <<= 1
    return (v + 1) & mask