"""Test polarity lexicons and comment scanning."""

import dataclasses

import pytest
from vendorpulse.core import lexicon as lexicon_module
from vendorpulse.core.errors import LexiconError
from vendorpulse.core.lexicon import (
    DEFAULT_LEXICON,
    PolarityLexicon,
    configured_lexicon,
    load_lexicon,
    scan_polarity,
)
from vendorpulse.core.models import Review


class TestScanPolarity:
    """Test comment scanning against the built-in lexicon."""

    def test_counts_hits_and_comments(self):
        reviews = [
            Review(rating=5, comment="Excellent and PROFESSIONAL"),
            Review(rating=2, comment="rude staff, overpriced"),
            Review(rating=4, comment="nothing to add"),
        ]
        counts = scan_polarity(reviews)

        assert counts.positive_count == 2
        assert counts.negative_count == 2
        assert counts.total_comments == 3

    def test_each_word_counts_once_per_comment(self):
        counts = scan_polarity([Review(rating=5, comment="great great great")])
        assert counts.positive_count == 1

    def test_substring_matches_inside_longer_words(self):
        """Plain substring matching: 'good' hits inside 'goodbye'."""
        counts = scan_polarity([Review(rating=3, comment="said goodbye")])
        assert counts.positive_count == 1

    def test_missing_and_empty_comments_skipped(self):
        reviews = [Review(rating=5), Review(rating=5, comment=""), {"rating": 4, "comment": None}]
        counts = scan_polarity(reviews)

        assert counts.total_comments == 0
        assert counts.positive_count == 0
        assert counts.negative_count == 0

    def test_non_string_comment_skipped(self):
        counts = scan_polarity([{"rating": 4, "comment": 12345}])
        assert counts.total_comments == 0

    def test_custom_lexicon(self):
        custom = PolarityLexicon.from_words(["Tasty"], ["Cold"])
        counts = scan_polarity([Review(rating=4, comment="tasty but cold")], custom)

        assert counts.positive_count == 1
        assert counts.negative_count == 1


class TestPolarityLexicon:
    """Test lexicon construction."""

    def test_default_lexicon_sizes(self):
        assert len(DEFAULT_LEXICON.positive) == 20
        assert len(DEFAULT_LEXICON.negative) == 19
        assert "excellent" in DEFAULT_LEXICON.positive
        assert "overpriced" in DEFAULT_LEXICON.negative

    def test_from_words_normalizes(self):
        lex = PolarityLexicon.from_words([" Great ", "great", "", "BEST"], ["Bad"])
        assert lex.positive == ("great", "best")
        assert lex.negative == ("bad",)

    def test_lexicon_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_LEXICON.positive = ("changed",)


class TestLoadLexicon:
    """Test loading lexicons from YAML."""

    def test_load_valid_file(self, tmp_path):
        path = tmp_path / "lexicon.yaml"
        path.write_text("positive:\n  - Yummy\n  - punctual\nnegative:\n  - soggy\n", encoding="utf-8")

        lex = load_lexicon(str(path))
        assert lex.positive == ("yummy", "punctual")
        assert lex.negative == ("soggy",)

    def test_missing_file(self, tmp_path):
        with pytest.raises(LexiconError):
            load_lexicon(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("positive: [unclosed\n", encoding="utf-8")
        with pytest.raises(LexiconError):
            load_lexicon(str(path))

    def test_missing_list(self, tmp_path):
        path = tmp_path / "half.yaml"
        path.write_text("positive:\n  - good\n", encoding="utf-8")
        with pytest.raises(LexiconError):
            load_lexicon(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- good\n- bad\n", encoding="utf-8")
        with pytest.raises(LexiconError):
            load_lexicon(str(path))


class TestConfiguredLexicon:
    """Test lexicon selection through settings."""

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.setattr(lexicon_module.settings, "lexicon_file", "")
        assert configured_lexicon() is DEFAULT_LEXICON

    def test_file_when_set(self, monkeypatch, tmp_path):
        path = tmp_path / "lexicon.yaml"
        path.write_text("positive: [fresh]\nnegative: [stale]\n", encoding="utf-8")
        monkeypatch.setattr(lexicon_module.settings, "lexicon_file", str(path))

        lex = configured_lexicon()
        assert lex.positive == ("fresh",)
        assert lex.negative == ("stale",)
