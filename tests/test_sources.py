"""Tests for the built-in suggestion sources."""

from popcomplete.config import Settings
from popcomplete.sources import LatexSource, WordListSource, default_sources
from popcomplete.suggestion import PlainSuggestion, Position, RichSuggestion, TriggerContext


def _context(query: str, separator: str = " ", start_ch: int = 4) -> TriggerContext:
    start = Position(0, start_ch)
    return TriggerContext(start=start, end=start.shifted(len(query)), query=query, separator_char=separator)


class TestWordListSource:
    def test_prefix_matches_in_list_order(self, settings: Settings) -> None:
        source = WordListSource(["quiet", "query", "apple", "quest"])
        assert source.get_suggestions(_context("qu"), settings) == [
            PlainSuggestion("quiet"),
            PlainSuggestion("query"),
            PlainSuggestion("quest"),
        ]

    def test_is_case_sensitive(self, settings: Settings) -> None:
        source = WordListSource(["Query"])
        assert source.get_suggestions(_context("qu"), settings) == []

    def test_exact_match_is_not_offered(self, settings: Settings) -> None:
        source = WordListSource(["query", "queryable"])
        assert source.get_suggestions(_context("query"), settings) == [PlainSuggestion("queryable")]

    def test_respects_min_trigger_length(self) -> None:
        settings = Settings(character_regex="a-z", min_word_trigger_length=3)
        source = WordListSource(["query"])
        assert source.get_suggestions(_context("qu"), settings) == []
        assert source.get_suggestions(_context("que"), settings) == [PlainSuggestion("query")]

    def test_settings_words_are_merged_without_duplicates(self) -> None:
        settings = Settings(word_list=["quote", "query"])
        source = WordListSource(["query"])
        assert source.get_suggestions(_context("qu"), settings) == [
            PlainSuggestion("query"),
            PlainSuggestion("quote"),
        ]

    def test_add_words_skips_blanks(self) -> None:
        source = WordListSource()
        source.add_words(["  alpha ", "", "alpha", "beta"])
        assert source.words == ["alpha", "beta"]

    def test_does_not_block(self) -> None:
        assert WordListSource.blocks_all_other_providers is False


class TestLatexSource:
    def test_requires_backslash_separator(self, settings: Settings) -> None:
        assert LatexSource().get_suggestions(_context("fr", separator=" "), settings) == []

    def test_requires_query(self, settings: Settings) -> None:
        assert LatexSource().get_suggestions(_context("", separator="\\"), settings) == []

    def test_candidates_replace_backslash(self, settings: Settings) -> None:
        result = LatexSource().get_suggestions(_context("fr", separator="\\", start_ch=3), settings)
        assert result == [RichSuggestion("\\frac", "\\frac{#}{#}", override_start=Position(0, 2))]

    def test_exact_command_is_not_offered(self, settings: Settings) -> None:
        result = LatexSource().get_suggestions(_context("alpha", separator="\\"), settings)
        assert result == []

    def test_exact_name_with_longer_replacement_is_offered(self, settings: Settings) -> None:
        result = LatexSource().get_suggestions(_context("sum", separator="\\"), settings)
        assert [s.replacement for s in result] == ["\\sum_{#}^{#}"]

    def test_custom_commands(self, settings: Settings) -> None:
        source = LatexSource([("\\foo", "\\foo"), ("\\bar", "\\bar")])
        result = source.get_suggestions(_context("b", separator="\\"), settings)
        assert [s.display_name for s in result] == ["\\bar"]

    def test_blocks(self) -> None:
        assert LatexSource.blocks_all_other_providers is True


def test_default_sources_priority() -> None:
    sources = default_sources()
    assert [type(s) for s in sources] == [LatexSource, WordListSource]
