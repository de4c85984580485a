"""Static word list source."""

from collections.abc import Iterable

from ..config import Settings
from ..suggestion import PlainSuggestion, Suggestion, TriggerContext
from .base import SuggestionSource


class WordListSource(SuggestionSource):
    """Offers words that start with the typed query.

    Words come from ``settings.word_list`` plus any passed at construction.
    Matching is case-sensitive and keeps list order; the query itself is
    never offered back.
    """

    blocks_all_other_providers = False

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.words: list[str] = []
        self.add_words(words)

    def add_words(self, words: Iterable[str]) -> None:
        """Add words, skipping blanks and duplicates."""
        for word in words:
            word = word.strip()
            if word and word not in self.words:
                self.words.append(word)

    def get_suggestions(self, context: TriggerContext, settings: Settings) -> list[Suggestion]:
        query = context.query
        if len(query) < settings.min_word_trigger_length:
            return []

        suggestions: list[Suggestion] = []
        seen: set[str] = set()
        for word in [*self.words, *settings.word_list]:
            if word in seen or word == query or not word.startswith(query):
                continue
            seen.add(word)
            suggestions.append(PlainSuggestion(word))
        return suggestions
