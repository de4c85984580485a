"""Suggestion data model.

A suggestion is a tagged variant with two cases:
- PlainSuggestion: a bare word, shown and inserted as-is
- RichSuggestion: separate display name and replacement text, optionally
  carrying an override start that supersedes the detected trigger start

Use the accessor functions instead of checking fields on the objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    """A buffer position: zero-based line and column."""

    line: int
    ch: int

    def shifted(self, delta: int) -> Position:
        return Position(self.line, self.ch + delta)


# --- Suggestion variant ---


@dataclass(frozen=True)
class PlainSuggestion:
    """A suggestion that is shown and inserted as the same text."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Suggestion text must not be empty")


@dataclass(frozen=True)
class RichSuggestion:
    """A suggestion with its own display name and replacement text."""

    display_name: str
    replacement: str
    override_start: Position | None = None

    def __post_init__(self) -> None:
        if not self.replacement:
            raise ValueError("Suggestion replacement must not be empty")


Suggestion = PlainSuggestion | RichSuggestion


def display_name(suggestion: Suggestion) -> str:
    """Text shown in the popup for a suggestion."""
    if isinstance(suggestion, RichSuggestion):
        return suggestion.display_name
    return suggestion.text


def replacement_text(suggestion: Suggestion) -> str:
    """Text inserted into the buffer when a suggestion is accepted."""
    if isinstance(suggestion, RichSuggestion):
        return suggestion.replacement
    return suggestion.text


def override_start(suggestion: Suggestion) -> Position | None:
    if isinstance(suggestion, RichSuggestion):
        return suggestion.override_start
    return None


# --- Trigger context ---


@dataclass
class TriggerContext:
    """The range a trigger would replace, plus the text found in it.

    ``start`` can be moved back by the aggregator when a blocking source
    reports an override start.
    """

    start: Position
    end: Position
    query: str
    separator_char: str = ""
