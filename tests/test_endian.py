import struct

import pytest

from zenkit.endian import Byte4, endian_swap16, endian_swap32, host_net16, host_net32


def test_swap32_value():
    assert endian_swap32(0x12345678) == 0x78563412


def test_swap16_value():
    assert endian_swap16(0x1234) == 0x3412


@pytest.mark.parametrize("n", [0, 1, 0xFF, 0xDEADBEEF, 0xFFFFFFFF, 0x01020304])
def test_swap32_is_involution(n):
    assert endian_swap32(endian_swap32(n)) == n


@pytest.mark.parametrize("n", [0, 1, 0xABCD, 0xFFFF])
def test_swap16_is_involution(n):
    assert endian_swap16(endian_swap16(n)) == n


@pytest.mark.parametrize("n", [0, 0x01020304, 0xCAFEBABE])
def test_host_net32_matches_network_order(n):
    expected = struct.unpack("=I", struct.pack(">I", n))[0]
    assert host_net32(n) == expected
    assert host_net32(host_net32(n)) == n


@pytest.mark.parametrize("n", [0, 0x0102, 0xBEEF])
def test_host_net16_matches_network_order(n):
    expected = struct.unpack("=H", struct.pack(">H", n))[0]
    assert host_net16(n) == expected


def test_byte4_bytes_round_trip():
    b = Byte4.from_bytes(1, 2, 3, 4)
    assert b.bytes == bytes([1, 2, 3, 4])


def test_byte4_be_and_le_values():
    b = Byte4.from_bytes(0x12, 0x34, 0x56, 0x78)
    assert b.be_value() == 0x12345678
    assert b.le_value() == 0x78563412


def test_byte4_setters_round_trip():
    b = Byte4()
    b.set_with_be(0xA1B2C3D4)
    assert b.be_value() == 0xA1B2C3D4
    assert b.bytes == bytes([0xA1, 0xB2, 0xC3, 0xD4])
    b.set_with_le(0xA1B2C3D4)
    assert b.le_value() == 0xA1B2C3D4
    assert b.bytes == bytes([0xD4, 0xC3, 0xB2, 0xA1])


def test_byte4_equality():
    assert Byte4(5) == Byte4(5)
    assert not (Byte4(5) == Byte4(6))