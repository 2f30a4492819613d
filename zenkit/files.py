"""Whole-file read, write and append helpers."""

from __future__ import annotations

from pathlib import Path


def get_file_extension(path) -> str:
    """Text after the last dot of the path, or an empty string if there is none."""
    path = str(path)
    pos = path.rfind(".")
    if pos < 0:
        return ""
    return path[pos + 1:]


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def load_file_to_string(path) -> str:
    """The file's text, up to the first NUL character; raises OSError if unreadable."""
    raw = Path(path).read_bytes()
    end = raw.find(b"\0")
    if end >= 0:
        raw = raw[:end]
    return raw.decode("utf-8", errors="surrogateescape")


def load_file_to_buffer(path) -> bytes:
    """The file's whole content as bytes; raises OSError if unreadable."""
    return Path(path).read_bytes()


def write_buffer_to_file(path, data) -> None:
    """Replace the file's content with data."""
    with open(path, "wb") as stream:
        stream.write(_as_bytes(data))


def append_buffer_to_file(path, data) -> None:
    """Add data at the end of the file, creating it if needed."""
    with open(path, "ab") as stream:
        stream.write(_as_bytes(data))


def append_string_to_file(path, text) -> None:
    """Add text (UTF-8) at the end of the file, creating it if needed."""
    append_buffer_to_file(path, text)


def write_string_to_file(path, text) -> None:
    """Replace the file's content with text (UTF-8)."""
    write_buffer_to_file(path, text)