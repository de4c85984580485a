"""Suggestion popup controller.

Drives the trigger -> collect -> show -> accept cycle:

1. On every cursor move the word before the cursor is matched backward
   using the configured character class.
2. A non-empty match becomes a TriggerContext and the sources are asked for
   candidates in priority order.
3. Candidates are shown; accepting one rewrites the trigger range (or the
   candidate's override start through the trigger end) and either moves the
   cursor past the insertion or hands the text to the snippet engine.

After an acceptance the next cursor event is ignored, since it is the echo
of our own edit.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings

from .aggregator import collect
from .charclass import CharacterClassCache
from .config import InsertionKey, Settings
from .editor import EditorHost, PopupView, SnippetEngine
from .keybinder import AcceptKeyBinder
from .matcher import match_backward
from .sources import SuggestionSource, default_sources
from .suggestion import Position, Suggestion, TriggerContext, override_start, replacement_text

logger = logging.getLogger("popcomplete.popup")

SNIPPET_MARKERS = ("#", "~")


def is_snippet(text: str) -> bool:
    return any(marker in text for marker in SNIPPET_MARKERS)


class PopupState(str, Enum):
    IDLE = "idle"
    SUGGESTING = "suggesting"


class SuggestionPopup:
    """Autocomplete popup bound to one editor."""

    def __init__(
        self,
        editor: EditorHost,
        view: PopupView,
        snippet_engine: SnippetEngine,
        settings: Settings,
        key_bindings: KeyBindings | None = None,
        sources: Sequence[SuggestionSource] | None = None,
    ) -> None:
        self.editor = editor
        self.view = view
        self.snippet_engine = snippet_engine
        self.settings = settings
        self.sources: list[SuggestionSource] = list(sources) if sources is not None else default_sources()
        self.snippets_supported = settings.snippets_supported

        self.state = PopupState.IDLE
        self.context: TriggerContext | None = None
        self.suggestions: list[Suggestion] = []

        # Set after an acceptance to swallow the cursor event it causes.
        self._just_closed = False
        self._character_class = CharacterClassCache()

        self.key_bindings = key_bindings if key_bindings is not None else KeyBindings()
        self.key_binder = AcceptKeyBinder(
            self.key_bindings,
            on_accept=self.accept_selected,
            filter=Condition(lambda: self.is_open),
        )
        self.set_insertion_key(settings.insertion_key)

    @property
    def is_open(self) -> bool:
        return self.state is PopupState.SUGGESTING

    # --- Trigger ---

    def on_cursor_activity(self) -> list[Suggestion]:
        """Handle a cursor move or edit. Returns the suggestions now shown."""
        if self._just_closed:
            self._just_closed = False
            self._close()
            return []

        context = self.trigger(self.editor.get_cursor())
        if context is None:
            self._close()
            return []

        suggestions = self.get_suggestions(context)
        if not suggestions:
            self._close()
            return []

        self.context = context
        self.suggestions = suggestions
        self.state = PopupState.SUGGESTING
        self.view.show(suggestions)
        return suggestions

    def trigger(self, cursor: Position) -> TriggerContext | None:
        """Build a trigger context for the word ending at ``cursor``.

        Raises CharacterClassError when the configured class is malformed.
        """
        is_word_char = self._character_class.get_matcher(self.settings.character_regex)
        match = match_backward(
            self.editor.get_line(cursor.line),
            cursor.ch,
            is_word_char,
            self.settings.max_look_back_distance,
        )
        if not match.query:
            return None

        return TriggerContext(
            start=cursor.shifted(-len(match.query)),
            end=cursor,
            query=match.query,
            separator_char=match.separator_char,
        )

    def get_suggestions(self, context: TriggerContext) -> list[Suggestion]:
        return collect(context, self.sources, self.settings)

    # --- Accept / dismiss ---

    def accept_selected(self) -> bool:
        """Accept the highlighted suggestion. Returns False if none is shown."""
        suggestion = self.view.selected() if self.is_open else None
        if suggestion is None:
            return False

        self.select_suggestion(suggestion)
        return True

    def select_suggestion(self, suggestion: Suggestion) -> None:
        if self.context is None:
            raise RuntimeError("No active trigger to complete")

        context = self.context
        replacement = replacement_text(suggestion)
        start = override_start(suggestion)
        if start is None:
            start = context.start

        self._close()
        # Set before editing so the cursor event from our own edit is skipped.
        # A no-op replacement fires no event, so it must not arm the latch.
        if not self._is_noop(replacement, start, context.end):
            self._just_closed = True

        self.editor.replace_range(replacement, start, context.end)

        if is_snippet(replacement):
            if self.snippets_supported:
                self.snippet_engine.handle_snippet(replacement, start, self.editor)
            else:
                logger.warning("Snippets are not supported in the current editing mode; inserted as plain text")
        else:
            self.editor.set_cursor(start.shifted(len(replacement)))

        logger.debug("Accepted %r at %s", replacement, start)

    def _is_noop(self, replacement: str, start: Position, end: Position) -> bool:
        if start.line != end.line or self.editor.get_cursor() != end:
            return False
        return self.editor.get_line(start.line)[start.ch : end.ch] == replacement

    def dismiss(self) -> None:
        """Close the popup without editing. The next keystroke may reopen it."""
        self._close()

    def prevent_next_trigger(self) -> None:
        self._just_closed = True

    def _close(self) -> None:
        if self.state is PopupState.SUGGESTING:
            self.view.close()
        self.state = PopupState.IDLE
        self.context = None
        self.suggestions = []

    # --- Settings ---

    def set_insertion_key(self, key: InsertionKey | str) -> None:
        self.key_binder.set_accept_key(key)

    def apply_settings(self, settings: Settings | None = None) -> None:
        """Pick up changed settings.

        The accept key is rebound right away; a new character class is
        compiled on the next trigger.
        """
        if settings is not None:
            self.settings = settings
        if self.key_binder.active_key != InsertionKey(self.settings.insertion_key):
            self.set_insertion_key(self.settings.insertion_key)
