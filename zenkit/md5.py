"""Incremental MD5 digests in hex, byte and number forms."""

from __future__ import annotations

import hashlib
import sys


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class MD5Util:
    """Streaming MD5: start, feed data with update, read the digest with a finish method.

    Finishing does not consume the state, so more data may be added afterwards.
    """

    def __init__(self):
        self.start()

    def start(self) -> None:
        """Reset to the state of an empty message."""
        self._hash = hashlib.md5(usedforsecurity=False)

    def update(self, data) -> None:
        """Feed bytes (or text, encoded as UTF-8)."""
        self._hash.update(_as_bytes(data))

    def finish_bytes(self) -> bytes:
        """The 16-byte digest."""
        return self._hash.copy().digest()

    def finish(self, upper_case=False) -> str:
        """The digest as 32 hex digits."""
        text = self._hash.copy().hexdigest()
        return text.upper() if upper_case else text

    def finish_number(self) -> int:
        """The middle eight digest bytes read as a host-order 64-bit number."""
        return int.from_bytes(self.finish_bytes()[4:12], sys.byteorder)


def md5(data, upper_case=False) -> str:
    """Hex MD5 digest of data."""
    coder = MD5Util()
    coder.update(data)
    return coder.finish(upper_case)