"""Tests for core helper functions."""

import pytest

from core.helpers import capitalize_words, lcfirst, pluralize


class TestLcfirst:
    """Tests for lcfirst()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("BlogPost", "blogPost"),
            ("Article", "article"),
            ("article", "article"),
            ("A", "a"),
            ("", ""),
        ],
    )
    def test_lcfirst(self, value, expected):
        assert lcfirst(value) == expected


class TestPluralize:
    """Tests for pluralize()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("article", "articles"),
            ("page", "pages"),
            ("category", "categories"),
            ("day", "days"),
            ("box", "boxes"),
            ("church", "churches"),
            ("person", "people"),
            ("media", "media"),
            ("blogPost", "blogPosts"),
            ("pageCategory", "pageCategories"),
            ("newsItem", "newsItems"),
            ("", ""),
        ],
    )
    def test_pluralize(self, value, expected):
        assert pluralize(value) == expected


class TestCapitalizeWords:
    """Tests for capitalize_words()."""

    def test_capitalizes_each_word(self):
        assert capitalize_words("red car front") == "Red Car Front"

    def test_keeps_inner_case(self):
        assert capitalize_words("my iPhone photo") == "My IPhone Photo"

    def test_collapses_whitespace(self):
        assert capitalize_words("  two   words ") == "Two Words"
