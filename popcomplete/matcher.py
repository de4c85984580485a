"""Backward word matching from the cursor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class BackwardMatch:
    """Result of scanning backward from the cursor."""

    query: str
    separator_char: str


def match_backward(
    line: str,
    cursor_ch: int,
    is_word_char: Callable[[str], bool],
    max_lookback: int,
) -> BackwardMatch:
    """Collect the partial word that ends at ``cursor_ch`` on ``line``.

    The scan walks left one character at a time while ``is_word_char`` holds.
    It stops at the first non-word character (returned as the separator), at
    the line start, or once ``max_lookback`` characters have been examined.
    In the last two cases the separator is empty.
    """
    cursor_ch = min(cursor_ch, len(line))
    lookback_end = max(0, cursor_ch - max_lookback)
    chars: list[str] = []
    separator = ""

    for i in range(cursor_ch - 1, lookback_end - 1, -1):
        char = line[i]
        if not is_word_char(char):
            separator = char
            break
        chars.append(char)

    chars.reverse()
    return BackwardMatch(query="".join(chars), separator_char=separator)
