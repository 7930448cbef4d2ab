from collections.abc import Mapping

DEFAULT_REPLACEMENT = "BLEEP"


def normalize_word(word: str) -> str:
    return str(word).lower()


class WordDictionary:
    """Mapping of banned words (lowercase) to their replacement text.

    Empty words are never stored, so every key has a non-zero width.
    """

    def __init__(self, default_replacement: str = DEFAULT_REPLACEMENT) -> None:
        self.default_replacement = default_replacement
        self._entries: dict[str, str] = {}

    def replace_all(self, data: Mapping[str, str]) -> None:
        entries: dict[str, str] = {}
        for word, replacement in data.items():
            key = normalize_word(word)
            if not key:
                continue
            entries[key] = replacement if replacement is not None else self.default_replacement
        self._entries = entries

    def add(self, word: str, replacement: str | None = None) -> bool:
        """Insert or overwrite one entry. Returns False for an empty word."""
        key = normalize_word(word)
        if not key:
            return False
        self._entries[key] = replacement or self.default_replacement
        return True

    def remove(self, word: str) -> None:
        self._entries.pop(normalize_word(word), None)

    def get(self, word: str) -> str | None:
        return self._entries.get(normalize_word(word))

    def keys(self) -> list[str]:
        return list(self._entries)

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._entries
