from wordfilter.filtering import (
    BaseWordFilter,
    ReplacementMethod,
    WordFilter,
    WordFilterFactory,
)
from wordfilter.filtering.exceptions import FilterError, ReplacementMethodError, SeedLoadError
from wordfilter.filtering.models import FilterDebugInfo, SanitizeResult

__all__ = [
    "BaseWordFilter",
    "FilterDebugInfo",
    "FilterError",
    "ReplacementMethod",
    "ReplacementMethodError",
    "SanitizeResult",
    "SeedLoadError",
    "WordFilter",
    "WordFilterFactory",
]
