"""prompt_toolkit host for the suggestion popup.

The popup renders through prompt_toolkit's own completion menu by filling
``Buffer.complete_state``. Selection is moved by our key bindings instead of
``Buffer.complete_next`` because the latter writes the completion into the
buffer while navigating.
"""

from __future__ import annotations

from collections.abc import Sequence

from prompt_toolkit.buffer import Buffer, CompletionState
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent

from .config import Settings
from .editor import EditorHost, PopupView, SnippetEngine
from .popup import SNIPPET_MARKERS, SuggestionPopup
from .sources import SuggestionSource
from .suggestion import Position, Suggestion, display_name, replacement_text


def advance(start: Position, text: str) -> Position:
    """Position right after ``text`` when inserted at ``start``."""
    lines = text.split("\n")
    if len(lines) == 1:
        return start.shifted(len(text))
    return Position(start.line + len(lines) - 1, len(lines[-1]))


class BufferEditor(EditorHost):
    """EditorHost backed by a prompt_toolkit Buffer."""

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    def get_cursor(self) -> Position:
        document = self.buffer.document
        return Position(document.cursor_position_row, document.cursor_position_col)

    def get_line(self, line: int) -> str:
        lines = self.buffer.document.lines
        if 0 <= line < len(lines):
            return lines[line]
        return ""

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        document = self.buffer.document
        start_index = self._index(start)
        end_index = self._index(end)
        new_text = document.text[:start_index] + text + document.text[end_index:]
        # One document swap so the host sees a single edit.
        self.buffer.document = Document(new_text, start_index + len(text))

    def set_cursor(self, position: Position) -> None:
        self.buffer.cursor_position = self._index(position)

    def _index(self, position: Position) -> int:
        return self.buffer.document.translate_row_col_to_index(position.line, position.ch)


class CompletionMenuView(PopupView):
    """PopupView that shows suggestions in prompt_toolkit's completion menu."""

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer
        self._suggestions: list[Suggestion] = []

    def show(self, suggestions: Sequence[Suggestion]) -> None:
        self._suggestions = list(suggestions)
        completions = [
            Completion(replacement_text(s), start_position=0, display=display_name(s))
            for s in self._suggestions
        ]
        self.buffer.complete_state = CompletionState(
            original_document=self.buffer.document,
            completions=completions,
            complete_index=0,
        )

    def close(self) -> None:
        self.buffer.complete_state = None
        self._suggestions = []

    def selected(self) -> Suggestion | None:
        state = self.buffer.complete_state
        if state is None or state.complete_index is None or not self._suggestions:
            return None
        return self._suggestions[state.complete_index]

    def select_next(self) -> None:
        self._move(1)

    def select_previous(self) -> None:
        self._move(-1)

    def _move(self, step: int) -> None:
        state = self.buffer.complete_state
        if state is None or not self._suggestions:
            return
        index = state.complete_index or 0
        state.complete_index = (index + step) % len(self._suggestions)


class PlaceholderSnippetEngine(SnippetEngine):
    """Removes placeholder markers and parks the cursor on the first one.

    Does not track the remaining placeholders.
    """

    def handle_snippet(self, text: str, start: Position, editor: EditorHost) -> None:
        first = min(text.index(m) for m in SNIPPET_MARKERS if m in text)
        cleaned = text
        for marker in SNIPPET_MARKERS:
            cleaned = cleaned.replace(marker, "")

        editor.replace_range(cleaned, start, advance(start, text))
        editor.set_cursor(advance(start, text[:first]))


def attach_popup(
    buffer: Buffer,
    settings: Settings,
    key_bindings: KeyBindings | None = None,
    sources: Sequence[SuggestionSource] | None = None,
    snippet_engine: SnippetEngine | None = None,
) -> tuple[SuggestionPopup, KeyBindings]:
    """Create a popup for ``buffer`` and hook it to cursor movement.

    Returns the popup and the key bindings to install in the application.
    An ``enter`` binding already present in ``key_bindings`` is replaced by
    the popup's accept key.
    """
    if key_bindings is None:
        key_bindings = KeyBindings()
    view = CompletionMenuView(buffer)
    popup = SuggestionPopup(
        BufferEditor(buffer),
        view,
        snippet_engine or PlaceholderSnippetEngine(),
        settings,
        key_bindings=key_bindings,
        sources=sources,
    )
    is_open = Condition(lambda: popup.is_open)

    @key_bindings.add("escape", filter=is_open, eager=True)
    def _dismiss(event: KeyPressEvent) -> None:
        popup.dismiss()

    @key_bindings.add("down", filter=is_open)
    def _next(event: KeyPressEvent) -> None:
        view.select_next()

    @key_bindings.add("up", filter=is_open)
    def _previous(event: KeyPressEvent) -> None:
        view.select_previous()

    def _on_cursor_changed(_: Buffer) -> None:
        popup.on_cursor_activity()

    buffer.on_cursor_position_changed += _on_cursor_changed
    return popup, key_bindings
