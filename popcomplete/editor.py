"""Host editor contracts consumed by the popup controller."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .suggestion import Position, Suggestion


class EditorHost(ABC):
    """Text buffer and cursor operations of the host editor."""

    @abstractmethod
    def get_cursor(self) -> Position:
        pass

    @abstractmethod
    def get_line(self, line: int) -> str:
        pass

    @abstractmethod
    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the text in ``[start, end)`` with ``text``."""
        pass

    @abstractmethod
    def set_cursor(self, position: Position) -> None:
        pass


class PopupView(ABC):
    """Presentation of the suggestion list."""

    @abstractmethod
    def show(self, suggestions: Sequence[Suggestion]) -> None:
        """Display ``suggestions`` with the first one highlighted."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    @abstractmethod
    def selected(self) -> Suggestion | None:
        """The highlighted suggestion, or None when nothing is shown."""
        pass


class SnippetEngine(ABC):
    """Takes over cursor handling for text with placeholder markers."""

    @abstractmethod
    def handle_snippet(self, text: str, start: Position, editor: EditorHost) -> None:
        pass
