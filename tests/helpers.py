"""Test doubles for the host editor contracts and suggestion sources."""

from __future__ import annotations

from collections.abc import Sequence

from popcomplete.config import Settings
from popcomplete.editor import EditorHost, PopupView, SnippetEngine
from popcomplete.sources import SuggestionSource
from popcomplete.suggestion import Position, Suggestion, TriggerContext


class FakeEditor(EditorHost):
    """In-memory editor. The cursor starts at the end of the text."""

    def __init__(self, text: str = "", cursor: Position | None = None) -> None:
        self.lines = text.split("\n")
        self.cursor = cursor if cursor is not None else Position(len(self.lines) - 1, len(self.lines[-1]))
        self.replacements: list[tuple[str, Position, Position]] = []

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def get_cursor(self) -> Position:
        return self.cursor

    def get_line(self, line: int) -> str:
        return self.lines[line]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        full = self.text
        new = full[: self._index(start)] + text + full[self._index(end) :]
        self.lines = new.split("\n")
        self.replacements.append((text, start, end))

    def set_cursor(self, position: Position) -> None:
        self.cursor = position

    def _index(self, position: Position) -> int:
        return sum(len(line) + 1 for line in self.lines[: position.line]) + position.ch


class FakeView(PopupView):
    def __init__(self) -> None:
        self.items: list[Suggestion] = []
        self.index = 0
        self.visible = False
        self.show_count = 0

    def show(self, suggestions: Sequence[Suggestion]) -> None:
        self.items = list(suggestions)
        self.index = 0
        self.visible = True
        self.show_count += 1

    def close(self) -> None:
        self.items = []
        self.visible = False

    def selected(self) -> Suggestion | None:
        if not self.visible or not self.items:
            return None
        return self.items[self.index]


class RecordingSnippetEngine(SnippetEngine):
    def __init__(self) -> None:
        self.calls: list[tuple[str, Position]] = []

    def handle_snippet(self, text: str, start: Position, editor: EditorHost) -> None:
        self.calls.append((text, start))


class StaticSource(SuggestionSource):
    """Returns fixed candidates and records every call."""

    def __init__(
        self,
        suggestions: Sequence[Suggestion | str] = (),
        blocks: bool = False,
        error: Exception | None = None,
    ) -> None:
        self.suggestions = list(suggestions)
        self.blocks_all_other_providers = blocks
        self.error = error
        self.contexts: list[TriggerContext] = []

    @property
    def called(self) -> bool:
        return bool(self.contexts)

    def get_suggestions(self, context: TriggerContext, settings: Settings) -> list[Suggestion | str]:
        self.contexts.append(context)
        if self.error is not None:
            raise self.error
        return list(self.suggestions)
