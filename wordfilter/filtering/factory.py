from wordfilter.config.settings import FilterSettings
from wordfilter.filtering.engine import WordFilter
from wordfilter.logging.logger import Log


class WordFilterFactory:
    """Creates a word filter configured from settings."""

    @classmethod
    def create(cls, settings: FilterSettings) -> WordFilter:
        """Create a filter and seed it when ``seed_name`` is set.

        Raises:
            ReplacementMethodError: if ``replacement_method`` is unknown.
        """
        Log.configure(settings.log_level)
        word_filter = WordFilter(
            replacement_method=settings.replacement_method,
            grawlix_chars=settings.grawlix_chars,
            default_replacement=settings.default_replacement,
            seed_dir=settings.seed_dir,
            strip_tags=settings.strip_tags,
        )
        if settings.seed_name:
            word_filter.seed(settings.seed_name)
        return word_filter
