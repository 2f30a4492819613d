"""A growable byte buffer with a read cursor."""

from __future__ import annotations

import struct


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Buffer:
    """Bytes that can be appended to, overwritten in place and read sequentially."""

    def __init__(self, data=b""):
        if isinstance(data, int):
            self._data = bytearray(data)
        else:
            self._data = bytearray(_as_bytes(data))
        self.position = 0

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def append(self, data) -> None:
        """Add data at the end."""
        self._data += _as_bytes(data)

    def write(self, pos, data) -> None:
        """Overwrite at pos, growing the buffer if needed; pos may not lie past the end."""
        if pos < 0 or pos > len(self._data):
            raise IndexError(f"write position {pos} outside buffer of {len(self._data)} bytes")
        chunk = _as_bytes(data)
        self._data[pos:pos + len(chunk)] = chunk

    def read(self, size) -> bytes:
        """Read size bytes at the cursor and move past them."""
        end = self.position + size
        if size < 0 or end > len(self._data):
            raise EOFError(f"cannot read {size} bytes at position {self.position}")
        chunk = bytes(self._data[self.position:end])
        self.position = end
        return chunk

    def read_struct(self, fmt) -> tuple:
        """Read and unpack a struct of the given format at the cursor."""
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))

    def forward(self, size) -> None:
        """Move the cursor ahead without reading."""
        self.position += size

    def resize(self, size) -> None:
        """Truncate or zero-extend to size bytes."""
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend(bytes(size - len(self._data)))

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self.data