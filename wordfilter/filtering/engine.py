"""Dictionary-driven word filter.

Two scanning modes share one dictionary and one replacement method:

* ``clean`` is lenient: for each word it replaces only the first
  case-insensitive substring hit, even inside larger words.
* ``sanitize`` is strict: it replaces every whole-word occurrence and
  reports what it found.

Output is assembled from unmatched spans and replacement text while a read
cursor advances, so replacement text is never rescanned for the same word.
"""

import random
from collections.abc import Mapping, Sequence
from pathlib import Path

from wordfilter.config.settings import DEFAULT_GRAWLIX_CHARS
from wordfilter.filtering.base import BaseWordFilter
from wordfilter.filtering.dictionary import DEFAULT_REPLACEMENT, WordDictionary
from wordfilter.filtering.exceptions import SeedLoadError
from wordfilter.filtering.matcher import boundary_pattern, replace_tags, substring_pattern
from wordfilter.filtering.models import FilterDebugInfo, SanitizeResult
from wordfilter.filtering.replacement import ReplacementMethod, build_replacement
from wordfilter.logging.logger import Log
from wordfilter.seeds.loader import DEFAULT_SEED_NAME, load_seed


class WordFilter(BaseWordFilter):
    """Filter engine holding a dictionary, a replacement method and a palette.

    Each instance owns its state, so independent configurations can coexist.
    Instances are not thread-safe.
    """

    def __init__(
        self,
        replacement_method: str | ReplacementMethod = ReplacementMethod.STARS,
        grawlix_chars: Sequence[str] | None = None,
        default_replacement: str = DEFAULT_REPLACEMENT,
        seed_dir: Path | None = None,
        strip_tags: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self._dictionary = WordDictionary(default_replacement)
        self._method = ReplacementMethod.from_name(replacement_method)
        self._grawlix_chars: list[str] = list(
            DEFAULT_GRAWLIX_CHARS if grawlix_chars is None else grawlix_chars
        )
        self._seed_dir = seed_dir
        self._strip_tags = strip_tags
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def clean(self, text: str) -> str:
        for key in self._dictionary.keys():
            match = substring_pattern(key).search(text)
            if match is None:
                continue
            replacement = self._replacement_for(key, match.group())
            text = text[: match.start()] + replacement + text[match.end() :]
        return text

    def sanitize(self, text: str) -> SanitizeResult:
        matched_words: set[str] = set()
        count = 0

        for key in self._dictionary.keys():
            text, hits = self._replace_all(text, key)
            if hits:
                matched_words.add(key)
                count += hits

        if count and self._strip_tags:
            text = replace_tags(text)

        Log.debug(
            f"Sanitized text: {count} matches of {len(matched_words)} words",
            matches=count,
            words=len(matched_words),
        )
        return SanitizeResult(result=text, count=count, matched_words=matched_words)

    def _replace_all(self, text: str, key: str) -> tuple[str, int]:
        """Replace every whole-word occurrence of *key* in one forward scan."""
        pieces: list[str] = []
        cursor = 0
        hits = 0

        for match in boundary_pattern(key).finditer(text):
            pieces.append(text[cursor : match.start()])
            pieces.append(self._replacement_for(key, match.group()))
            cursor = match.end()
            hits += 1

        if not hits:
            return text, 0
        pieces.append(text[cursor:])
        return "".join(pieces), hits

    def _replacement_for(self, key: str, matched: str) -> str:
        return build_replacement(
            self._method,
            matched,
            key,
            self._dictionary,
            self._grawlix_chars,
            self._rng,
            self._dictionary.default_replacement,
        )

    # ------------------------------------------------------------------
    # Dictionary management
    # ------------------------------------------------------------------

    def seed(self, source: Mapping[str, str] | str) -> "WordFilter":
        """Replace the whole dictionary.

        Args:
            source: Either a mapping of word to replacement text, or the name
                    of a seed file. A seed file that cannot be loaded is
                    reported as a warning and the dictionary is kept as is.
        """
        if isinstance(source, Mapping):
            self._dictionary.replace_all(source)
            Log.info(
                f"Seeded dictionary with {len(self._dictionary)} words",
                words=len(self._dictionary),
            )
            return self

        try:
            data = load_seed(
                source,
                self._seed_dir,
                default_replacement=self._dictionary.default_replacement,
            )
        except SeedLoadError as exc:
            Log.warning(f"Couldn't load word filter seed '{source}': {exc}", seed=source)
            return self

        self._dictionary.replace_all(data)
        Log.info(
            f"Seeded dictionary from '{source}' with {len(self._dictionary)} words",
            seed=source,
            words=len(self._dictionary),
        )
        return self

    def add_word(self, word: str, replacement: str | None = None) -> "WordFilter":
        """Add or overwrite a word; *replacement* is used by the ``word`` method."""
        if not self._dictionary.add(word, replacement):
            Log.warning("Ignoring empty word")
        return self

    def remove_word(self, word: str) -> "WordFilter":
        self._dictionary.remove(word)
        return self

    def get_defaults(self) -> dict[str, str]:
        """Return the bundled default dictionary.

        Raises:
            SeedLoadError: if the bundled seed file is missing or invalid.
        """
        return load_seed(
            DEFAULT_SEED_NAME,
            default_replacement=self._dictionary.default_replacement,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_replacement_method(self, method: str | ReplacementMethod) -> "WordFilter":
        """Switch the replacement method.

        Raises:
            ReplacementMethodError: if *method* is unknown; the active method
                                    is left unchanged.
        """
        self._method = ReplacementMethod.from_name(method)
        return self

    def set_grawlix_chars(self, chars: Sequence[str]) -> "WordFilter":
        self._grawlix_chars = list(chars)
        return self

    def debug(self) -> FilterDebugInfo:
        return FilterDebugInfo(
            dictionary=self._dictionary.as_dict(),
            replacement_method=self._method.value,
            grawlix_chars=list(self._grawlix_chars),
        )

    def inspect(self) -> FilterDebugInfo:
        return self.debug()
