"""Reading and writing comma-separated tables."""

from __future__ import annotations

_QUOTE = '"'
_COMMA = ","
_ENDL = "\n"
_RETURN = "\r"
_SPECIAL = (_QUOTE, _COMMA, _ENDL, _RETURN)


def _read_row(data: str, index: int):
    """Parse one row starting at index; returns the row and the index after it."""
    n = len(data)
    row = []
    while True:
        field = []
        terminator = None
        if index < n and data[index] == _QUOTE:
            index += 1
            while True:
                if index >= n:
                    raise ValueError("unterminated quoted field")
                ch = data[index]
                index += 1
                if ch != _QUOTE:
                    field.append(ch)
                    continue
                if index >= n:
                    break
                ch = data[index]
                index += 1
                if ch == _QUOTE:
                    field.append(_QUOTE)
                    continue
                if ch not in (_COMMA, _ENDL, _RETURN):
                    raise ValueError(f"unexpected character after quoted field at {index - 1}")
                terminator = ch
                break
        else:
            while index < n:
                ch = data[index]
                index += 1
                if ch in (_COMMA, _ENDL, _RETURN):
                    terminator = ch
                    break
                field.append(ch)
        row.append("".join(field))
        if terminator == _COMMA:
            continue
        if terminator == _RETURN and index < n and data[index] == _ENDL:
            index += 1
        return row, index


class CSVLoader:
    """Holds a table as a list of rows of text fields."""

    def __init__(self):
        self.rows: list[list[str]] = []

    def clear(self) -> None:
        self.rows.clear()

    def decode(self, content) -> None:
        """Parse content and add its rows to the table; raises ValueError if malformed."""
        index = 0
        while index < len(content):
            row, index = _read_row(content, index)
            self.rows.append(row)

    def encode(self) -> str:
        """The table as text, rows separated by CRLF, fields quoted where needed."""
        return "\r\n".join(",".join(_encode_field(f) for f in row) for row in self.rows)


def _encode_field(field: str) -> str:
    if any(ch in field for ch in _SPECIAL):
        return _QUOTE + field.replace(_QUOTE, _QUOTE * 2) + _QUOTE
    return field