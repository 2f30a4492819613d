"""Multi-language string tables keyed by identifier."""

from __future__ import annotations


class Localization:
    """Maps a key to texts indexed by language.

    Each row of the table is ``key, text_lang0, text_lang1, ...``.
    """

    def __init__(self):
        self._data: dict[str, list[str]] = {}
        self.language_index = 0

    def init_with_csv_content(self, rows) -> bool:
        """Load rows of a table; empty rows are skipped, later keys replace earlier ones."""
        for row in rows:
            row = list(row)
            if not row:
                continue
            self._data[row[0]] = row[1:]
        return True

    def get_item(self, key) -> list:
        """The texts of a key, creating an empty entry if the key is new."""
        return self._data.setdefault(key, [])

    def set_text(self, key, text, lang_index=None) -> list:
        """Set a key's text for a language (the current one by default); returns its texts."""
        if lang_index is None:
            lang_index = self.language_index
        item = self._data.setdefault(key, [])
        if len(item) <= lang_index:
            item.extend([""] * (lang_index + 1 - len(item)))
        item[lang_index] = text
        return item

    def get_text(self, key) -> str:
        """Text in the current language, falling back to the first; empty if unknown."""
        item = self._data.get(key)
        if not item:
            return ""
        if len(item) > self.language_index:
            return item[self.language_index]
        return item[0]