"""Shared test fixtures."""

import os

import pytest

from popcomplete.config import Settings

from tests.helpers import FakeView, RecordingSnippetEngine


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep POPCOMPLETE_* variables and a local .env out of Settings."""
    for name in list(os.environ):
        if name.upper().startswith("POPCOMPLETE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings(character_regex="a-zA-Z", min_word_trigger_length=2)


@pytest.fixture
def view() -> FakeView:
    return FakeView()


@pytest.fixture
def snippet_engine() -> RecordingSnippetEngine:
    return RecordingSnippetEngine()
