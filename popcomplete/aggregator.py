"""Multi-source suggestion collection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .suggestion import PlainSuggestion, RichSuggestion, Suggestion, TriggerContext, override_start

if TYPE_CHECKING:
    from .config import Settings
    from .sources import SuggestionSource

logger = logging.getLogger("popcomplete.aggregator")


class MalformedSuggestionsError(TypeError):
    """A source returned something other than a list of suggestions."""


def _normalize(result: object, context: TriggerContext) -> list[Suggestion]:
    if isinstance(result, (str, bytes)) or not isinstance(result, Sequence):
        raise MalformedSuggestionsError(f"expected a sequence of suggestions, got {type(result).__name__}")

    suggestions: list[Suggestion] = []
    for item in result:
        if isinstance(item, RichSuggestion) and item.override_start is not None and item.override_start > context.end:
            raise MalformedSuggestionsError(f"override start {item.override_start} is after trigger end {context.end}")
        if isinstance(item, (PlainSuggestion, RichSuggestion)):
            suggestions.append(item)
        elif isinstance(item, str) and item:
            suggestions.append(PlainSuggestion(item))
        else:
            raise MalformedSuggestionsError(f"invalid suggestion {item!r}")
    return suggestions


def _query_source(source: SuggestionSource, context: TriggerContext, settings: Settings) -> list[Suggestion]:
    """Ask one source for candidates. Failures count as no candidates."""
    try:
        return _normalize(source.get_suggestions(context, settings), context)
    except Exception:
        logger.exception("Suggestion source %s failed; skipping it", type(source).__name__)
        return []


def collect(
    context: TriggerContext,
    sources: Sequence[SuggestionSource],
    settings: Settings,
) -> list[Suggestion]:
    """Gather candidates from ``sources`` in priority order.

    Candidates are concatenated source by source. When a blocking source
    leaves the result non-empty, no further source is consulted and the
    override starts of the collected candidates are applied to
    ``context.start`` (the last one wins).
    """
    suggestions: list[Suggestion] = []

    for source in sources:
        suggestions.extend(_query_source(source, context, settings))

        if source.blocks_all_other_providers and suggestions:
            for suggestion in suggestions:
                start = override_start(suggestion)
                if start is not None:
                    context.start = start
            logger.debug(
                "%s blocked remaining sources with %d suggestions",
                type(source).__name__,
                len(suggestions),
            )
            break

    return suggestions
