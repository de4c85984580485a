"""Suggestion source interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..config import Settings
from ..suggestion import Suggestion, TriggerContext


class SuggestionSource(ABC):
    """Abstract base class for completion candidate sources.

    A source must answer synchronously from data it already holds.
    """

    #: When True, a non-empty result stops all lower-priority sources.
    blocks_all_other_providers: bool = False

    @abstractmethod
    def get_suggestions(self, context: TriggerContext, settings: Settings) -> Sequence[Suggestion | str]:
        """Return candidates for the trigger, in the order to display them."""
        pass
