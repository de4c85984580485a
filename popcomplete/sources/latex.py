"""Math notation source.

Triggered by a backslash directly before the query, e.g. ``\fr``. Accepting a
candidate replaces the backslash as well, which is why every candidate carries
an override start one column before the trigger start.

Replacements use ``#`` as the snippet placeholder marker.
"""

from ..config import Settings
from ..suggestion import RichSuggestion, Suggestion, TriggerContext
from .base import SuggestionSource

LATEX_COMMANDS: list[tuple[str, str]] = [
    ("\\frac", "\\frac{#}{#}"),
    ("\\sqrt", "\\sqrt{#}"),
    ("\\sum", "\\sum_{#}^{#}"),
    ("\\int", "\\int_{#}^{#}"),
    ("\\lim", "\\lim_{#}"),
    ("\\text", "\\text{#}"),
    ("\\mathbb", "\\mathbb{#}"),
    ("\\alpha", "\\alpha"),
    ("\\beta", "\\beta"),
    ("\\gamma", "\\gamma"),
    ("\\delta", "\\delta"),
    ("\\epsilon", "\\epsilon"),
    ("\\lambda", "\\lambda"),
    ("\\mu", "\\mu"),
    ("\\pi", "\\pi"),
    ("\\sigma", "\\sigma"),
    ("\\theta", "\\theta"),
    ("\\omega", "\\omega"),
    ("\\infty", "\\infty"),
    ("\\cdot", "\\cdot"),
    ("\\leq", "\\leq"),
    ("\\geq", "\\geq"),
    ("\\neq", "\\neq"),
    ("\\rightarrow", "\\rightarrow"),
]

TRIGGER_CHAR = "\\"


class LatexSource(SuggestionSource):
    """Completes LaTeX commands after a backslash."""

    blocks_all_other_providers = True

    def __init__(self, commands: list[tuple[str, str]] | None = None) -> None:
        self.commands = commands if commands is not None else LATEX_COMMANDS

    def get_suggestions(self, context: TriggerContext, settings: Settings) -> list[Suggestion]:
        if context.separator_char != TRIGGER_CHAR or not context.query:
            return []

        prefix = TRIGGER_CHAR + context.query
        # The backslash sits just before the detected start.
        start = context.start.shifted(-len(TRIGGER_CHAR))
        return [
            RichSuggestion(display_name=name, replacement=replacement, override_start=start)
            for name, replacement in self.commands
            if name.startswith(prefix) and replacement != prefix
        ]
