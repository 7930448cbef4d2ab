from dataclasses import dataclass, field


@dataclass
class SanitizeResult:
    """Output of a strict sanitize pass.

    ``matched_words`` holds the lowercase dictionary keys as stored, not
    their regex-escaped form, so phrases and keys with pattern characters
    carry no backslashes.
    """

    result: str
    count: int = 0
    matched_words: set[str] = field(default_factory=set)


@dataclass(frozen=True)
class FilterDebugInfo:
    """Snapshot of a filter's internal state."""

    dictionary: dict[str, str]
    replacement_method: str  # e.g. "stars", "grawlix", "word"
    grawlix_chars: list[str]
