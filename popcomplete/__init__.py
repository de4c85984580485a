# In-editor autocomplete popup

from .aggregator import collect
from .charclass import CharacterClassCache, CharacterClassError, ConfigurationError
from .config import InsertionKey, Settings
from .keybinder import AcceptKeyBinder
from .matcher import match_backward
from .popup import PopupState, SuggestionPopup
from .suggestion import (
    PlainSuggestion,
    Position,
    RichSuggestion,
    Suggestion,
    TriggerContext,
    display_name,
    replacement_text,
)

__all__ = [
    "AcceptKeyBinder",
    "CharacterClassCache",
    "CharacterClassError",
    "ConfigurationError",
    "InsertionKey",
    "PlainSuggestion",
    "PopupState",
    "Position",
    "RichSuggestion",
    "Settings",
    "Suggestion",
    "SuggestionPopup",
    "TriggerContext",
    "collect",
    "display_name",
    "match_backward",
    "replacement_text",
]
