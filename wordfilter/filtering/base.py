from abc import ABC, abstractmethod

from wordfilter.filtering.models import SanitizeResult


class BaseWordFilter(ABC):
    """Contract for all dictionary-driven word filters."""

    @abstractmethod
    def clean(self, text: str) -> str:
        """Replace the first occurrence of each dictionary word in text.

        Matching is a case-insensitive substring search without word
        boundary checks.

        Args:
            text: Arbitrary input text.

        Returns:
            The text with matched words replaced.
        """

    @abstractmethod
    def sanitize(self, text: str) -> SanitizeResult:
        """Replace every whole-word occurrence of each dictionary word.

        Args:
            text: Arbitrary input text.

        Returns:
            SanitizeResult with the matched words, match count and
            filtered text.
        """
