"""Pattern construction for dictionary lookups."""

import re
from functools import lru_cache

_TAG_RE = re.compile(r"<[^>]+>")


@lru_cache(maxsize=1024)
def substring_pattern(key: str) -> re.Pattern[str]:
    """Case-insensitive pattern matching *key* anywhere, even inside words."""
    return re.compile(re.escape(key), re.IGNORECASE)


@lru_cache(maxsize=1024)
def boundary_pattern(key: str) -> re.Pattern[str]:
    """Case-insensitive pattern matching *key* as a whole word or phrase.

    The key must be preceded by start-of-string or a non-word character and
    followed by a non-word character or end-of-string. The flanking
    characters are asserted, not consumed, so adjacent occurrences sharing
    one delimiter are all found.
    """
    return re.compile(
        rf"(?<!\w){re.escape(key)}(?!\w)",
        re.IGNORECASE | re.MULTILINE,
    )


def replace_tags(text: str) -> str:
    """Replace every HTML-like ``<...>`` tag with a single space."""
    return _TAG_RE.sub(" ", text)
