"""Tests for pure domain services: CSS, merging, markup and text helpers."""

from __future__ import annotations

import pytest

from themecore.domain.callbacks import return_false, return_value
from themecore.domain.services import (
    color_rule,
    hex_to_rgb,
    markup,
    minify_css,
    replace_recursive,
)
from themecore.domain.services.text import esc_attr, humanize, slugify
from themecore.infrastructure import InMemoryHost


class TestMinifyCss:
    """Tests for the CSS minifier."""

    def test_whitespace_and_last_semicolon(self) -> None:
        """Whitespace around punctuation and the final semicolon go."""
        assert minify_css("a , b {\n  color: red;\n}") == "a,b{color:red}"

    def test_short_hex(self) -> None:
        """Repeated-pair hex colors are shortened."""
        assert minify_css("a{color:#ffffff;background:#AABBCC}") == "a{color:#fff;background:#ABC}"

    def test_zero_units(self) -> None:
        """Units are dropped from zero values."""
        assert minify_css("a{margin:0px;padding:0em}") == "a{margin:0;padding:0}"

    def test_leading_zero(self) -> None:
        """Leading zeros are stripped from fractional lengths."""
        assert minify_css("a{margin:0.5em}") == "a{margin:.5em}"

    def test_comments_removed_but_important_kept(self) -> None:
        """Plain comments go, /*! comments stay."""
        assert minify_css("/* note */a{color:red}") == "a{color:red}"
        assert minify_css("/*! keep */a{color:red}").startswith("/*! keep */")

    def test_four_zeros_collapse(self) -> None:
        """0 0 0 0 collapses to a single 0."""
        assert minify_css("a{margin:0 0 0 0}") == "a{margin:0}"


class TestColorRule:
    """Tests for color rule generation."""

    def test_hex_to_rgb(self) -> None:
        """Hex colors become decimal triples."""
        assert hex_to_rgb("#009cff") == "0,156,255"

    def test_hex_pattern(self) -> None:
        """Plain patterns receive the hex value."""
        rule = color_rule(["a", ".button"], {"color": "%s"}, "#ff0000")

        assert rule == "a,.button{color:#ff0000;}"

    def test_rgba_pattern(self) -> None:
        """Patterns mentioning rgba receive the decimal triple."""
        rule = color_rule([".overlay"], {"background": "rgba(%s,0.8)"}, "#ff0000")

        assert rule == ".overlay{background:rgba(255,0,0,0.8);}"

    def test_short_hex_to_rgb(self) -> None:
        """Three digit colors expand before conversion."""
        assert hex_to_rgb("#abc") == "170,187,204"

    def test_rgba_pattern_short_hex(self) -> None:
        """Three digit colors work in rgba patterns."""
        rule = color_rule([".overlay"], {"background": "rgba(%s,0.5)"}, "#abc")

        assert rule == ".overlay{background:rgba(170,187,204,0.5);}"

    def test_non_hex_color_substituted_unchanged(self) -> None:
        """Values that are not hex colors are used as they are."""
        rule = color_rule(["a"], {"background": "rgba(%s,0.5)"}, "red")

        assert rule == "a{background:rgba(red,0.5);}"

    def test_literal_percent_in_pattern(self) -> None:
        """Percent signs besides the placeholder are kept."""
        rule = color_rule(["a"], {"background": "linear-gradient(%s 0%,#fff 100%)"}, "#ff0000")

        assert rule == "a{background:linear-gradient(#ff0000 0%,#fff 100%);}"

    def test_hex_to_rgb_rejects_other_values(self) -> None:
        """Only hex colors can be converted."""
        with pytest.raises(ValueError, match="Not a hex color"):
            hex_to_rgb("red")


class TestReplaceRecursive:
    """Tests for the recursive replace merge."""

    def test_nested_mappings_merge(self) -> None:
        """Nested keys not replaced survive."""
        base = {"home": "Home", "labels": {"prefix": "You are here: ", "author": "By "}}

        merged = replace_recursive(base, {"labels": {"author": "Author: "}})

        assert merged == {"home": "Home", "labels": {"prefix": "You are here: ", "author": "Author: "}}

    def test_lists_merge_by_index(self) -> None:
        """Lists are replaced index by index."""
        assert replace_recursive([1, 2, 3], [9]) == [9, 2, 3]
        assert replace_recursive([1], [7, 8]) == [7, 8]

    def test_scalar_replaces(self) -> None:
        """Non-container replacements win outright."""
        assert replace_recursive({"sep": " / "}, {"sep": None}) == {"sep": None}

    def test_inputs_not_modified(self) -> None:
        """Neither argument is mutated."""
        base = {"labels": {"home": "Home"}}
        replacement = {"labels": {"home": "Start"}}

        replace_recursive(base, replacement)

        assert base == {"labels": {"home": "Home"}}


class TestMarkup:
    """Tests for contextual markup rendering."""

    def test_attributes_filtered(self, host: InMemoryHost) -> None:
        """The context attributes pass through genesis_attr_<context>."""
        host.add_filter("genesis_attr_hero", lambda atts: {**atts, "id": "hero"})

        markup(host, open="<section %s>", close="</section>", content="Hi", context="hero")

        assert host.rendered == '<section class="hero" id="hero">Hi</section>'

    def test_part_suppressed(self, host: InMemoryHost) -> None:
        """A part filtered to False is not printed."""
        host.add_filter("genesis_markup_entry-title_open", return_false)

        markup(host, open="<h1 %s>", close="</h1>", content="Title", context="entry-title")

        assert host.rendered == "Title</h1>"


class TestTextAndCallbacks:
    """Tests for text helpers and shared callbacks."""

    def test_slugify(self) -> None:
        """Titles become lowercase dash separated handles."""
        assert slugify("Business Pro") == "business-pro"

    def test_humanize(self) -> None:
        """Snake case ids become capitalized words."""
        assert humanize("no_image") == "No Image"

    def test_esc_attr(self) -> None:
        """Quotes are escaped in attributes."""
        assert esc_attr('a"b') == "a&quot;b"

    def test_return_value(self) -> None:
        """return_value ignores arguments."""
        callback = return_value("full-width-content")

        assert callback("anything", 1) == "full-width-content"
