from .base import SuggestionSource
from .latex import LatexSource
from .word_list import WordListSource


def default_sources() -> list[SuggestionSource]:
    """Built-in sources in priority order."""
    return [LatexSource(), WordListSource()]


__all__ = [
    "LatexSource",
    "SuggestionSource",
    "WordListSource",
    "default_sources",
]
