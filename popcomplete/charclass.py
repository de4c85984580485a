"""Compiled character-class cache for word matching."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

logger = logging.getLogger("popcomplete.charclass")


class ConfigurationError(Exception):
    """Raised when a configured value cannot be used."""


class CharacterClassError(ConfigurationError):
    """Raised when the configured character class does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid character class [{pattern}]: {reason}")
        self.pattern = pattern
        self.reason = reason


def compile_character_class(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` as the body of a single bracket expression."""
    try:
        return re.compile(f"[{pattern}]")
    except re.error as e:
        raise CharacterClassError(pattern, str(e)) from e


class CharacterClassCache:
    """Holds the last compiled character class.

    Recompiles only when the pattern string changes. Python strings are
    sequences of code points, so astral characters are tested whole.
    """

    def __init__(self) -> None:
        self._pattern: str | None = None
        self._matcher: Callable[[str], bool] | None = None
        self.compile_count = 0

    def get_matcher(self, pattern: str) -> Callable[[str], bool]:
        if self._matcher is None or pattern != self._pattern:
            compiled = compile_character_class(pattern)
            self._pattern = pattern
            self._matcher = lambda char: compiled.fullmatch(char) is not None
            self.compile_count += 1
            logger.debug("Compiled character class [%s]", pattern)

        return self._matcher
