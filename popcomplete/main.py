#!/usr/bin/env python3
"""Entry point for the popcomplete playground."""

import asyncio
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from .config import InsertionKey, Settings
from .console_app import ConsoleApp


def load_words(path: Path) -> list[str]:
    """Read one word per line, ignoring blank lines."""
    with path.open("r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


@click.command()
@click.option('--words', 'words_file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Word list file, one word per line')
@click.option('--insertion-key', type=click.Choice([k.value for k in InsertionKey]),
              help='Key that accepts the highlighted suggestion')
@click.option('--character-regex', help='Character class body for word characters, e.g. "a-zA-Z"')
@click.option('--max-lookback', type=int, help='Maximum characters scanned back from the cursor')
@click.option('--no-snippets', is_flag=True, help='Insert snippets as plain text')
def main(
    words_file: Path | None,
    insertion_key: str | None,
    character_regex: str | None,
    max_lookback: int | None,
    no_snippets: bool,
):
    """popcomplete - in-editor autocomplete playground

    Examples:
        popcomplete --words /usr/share/dict/words
        popcomplete --insertion-key tab --character-regex "a-z"
    """
    console = Console(stderr=True)
    overrides: dict[str, object] = {}
    if insertion_key is not None:
        overrides["insertion_key"] = insertion_key
    if character_regex is not None:
        overrides["character_regex"] = character_regex
    if max_lookback is not None:
        overrides["max_look_back_distance"] = max_lookback
    if no_snippets:
        overrides["snippets_supported"] = False

    try:
        settings = Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        sys.exit(2)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        words = load_words(words_file) if words_file else []
        app = ConsoleApp(settings, words)
        asyncio.run(app.run())
    except KeyboardInterrupt:
        sys.exit(0)
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
