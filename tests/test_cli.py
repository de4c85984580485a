"""Tests for the command line entry point."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from popcomplete.config import InsertionKey
from popcomplete.main import load_words, main


def test_load_words(tmp_path: Path) -> None:
    words_file = tmp_path / "words.txt"
    words_file.write_text("query\n\n  quest \nqueue\n", encoding="utf-8")

    assert load_words(words_file) == ["query", "quest", "queue"]


def test_invalid_character_regex_exits_with_config_error() -> None:
    result = CliRunner().invoke(main, ["--character-regex", "z-a"])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


def test_options_flow_into_settings(tmp_path: Path) -> None:
    words_file = tmp_path / "words.txt"
    words_file.write_text("alpha\nbeta\n", encoding="utf-8")

    with patch("popcomplete.main.ConsoleApp") as app_cls, patch("popcomplete.main.asyncio.run") as run:
        app_cls.return_value.run = MagicMock()
        result = CliRunner().invoke(
            main,
            ["--words", str(words_file), "--insertion-key", "tab", "--max-lookback", "10", "--no-snippets"],
        )

    assert result.exit_code == 0, result.output
    settings, words = app_cls.call_args.args
    assert settings.insertion_key is InsertionKey.TAB
    assert settings.max_look_back_distance == 10
    assert settings.snippets_supported is False
    assert words == ["alpha", "beta"]
    run.assert_called_once()
