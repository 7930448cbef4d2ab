"""Replacement strategies for matched words."""

import random
from collections.abc import Sequence
from enum import Enum

from wordfilter.filtering.dictionary import WordDictionary
from wordfilter.filtering.exceptions import ReplacementMethodError
from wordfilter.logging.logger import Log

MASK_CHAR = "*"


class ReplacementMethod(str, Enum):
    """Available strategies for producing replacement text."""

    STARS = "stars"
    GRAWLIX = "grawlix"
    WORD = "word"

    @classmethod
    def from_name(cls, name: "str | ReplacementMethod") -> "ReplacementMethod":
        """Resolve a method by name or alias, case-insensitively.

        Raises:
            ReplacementMethodError: if the name is not a known method.
        """
        if isinstance(name, cls):
            return name
        method = _ALIASES.get(str(name).strip().lower())
        if method is None:
            raise ReplacementMethodError(
                f"Replacement method '{name}' not valid. "
                f"Choose from: {sorted(_ALIASES)}"
            )
        return method


_ALIASES: dict[str, ReplacementMethod] = {
    **{method.value: method for method in ReplacementMethod},
    "mask": ReplacementMethod.STARS,
    "random-symbols": ReplacementMethod.GRAWLIX,
    "random_symbols": ReplacementMethod.GRAWLIX,
    "fixed-word": ReplacementMethod.WORD,
    "fixed_word": ReplacementMethod.WORD,
}


def build_replacement(
    method: ReplacementMethod,
    matched: str,
    key: str,
    dictionary: WordDictionary,
    grawlix_chars: Sequence[str],
    rng: random.Random,
    fallback: str,
) -> str:
    """Compute replacement text for one matched word.

    Args:
        method: Active replacement method.
        matched: The text that was matched, in its original casing.
        key: The dictionary key that produced the match (lowercase).
        dictionary: Dictionary used by ``word``.
        grawlix_chars: Palette sampled by ``grawlix``.
        rng: Random source for ``grawlix``.
        fallback: Text used by ``word`` when the key has no entry.
    """
    if method is ReplacementMethod.STARS:
        return MASK_CHAR * len(matched)

    if method is ReplacementMethod.GRAWLIX:
        if not grawlix_chars:
            Log.warning("Grawlix palette is empty, masking with stars instead")
            return MASK_CHAR * len(matched)
        return "".join(rng.choice(grawlix_chars) for _ in matched)

    replacement = dictionary.get(key)
    if replacement is None:
        Log.warning(f"No replacement text for '{key}', using '{fallback}'", word=key)
        return fallback
    return replacement
