from wordfilter.filtering.base import BaseWordFilter
from wordfilter.filtering.engine import WordFilter
from wordfilter.filtering.factory import WordFilterFactory
from wordfilter.filtering.replacement import ReplacementMethod

__all__ = ["BaseWordFilter", "ReplacementMethod", "WordFilter", "WordFilterFactory"]
