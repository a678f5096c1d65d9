"""Tests for selector naming and escaping."""

from __future__ import annotations

import pytest

from delvforge.engine.selectors import (
    SelectorBuilder,
    container_params,
    escape_identifier,
    media_params,
    theme_attribute_selector,
    theme_root_selector,
)


class TestEscapeIdentifier:
    """Tests for CSS identifier escaping."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("df-red", "df-red"),
            ("df-hover:red", "df-hover\\:red"),
            ("df-p-0.5", "df-p-0\\.5"),
            ("df-text-primary-500/10", "df-text-primary-500\\/10"),
            ("df-w-1/3", "df-w-1\\/3"),
            ("df-@sm:flex", "df-\\@sm\\:flex"),
            ("2xl", "\\32 xl"),
            ("-2", "-\\32 "),
        ],
    )
    def test_escape(self, name: str, expected: str):
        """Punctuation is backslash-escaped; a leading digit is hex-escaped."""
        assert escape_identifier(name) == expected

    def test_non_ascii_passthrough(self):
        """Non-ASCII characters are valid identifier characters."""
        assert escape_identifier("df-ñ") == "df-ñ"

    def test_lone_hyphen(self):
        assert escape_identifier("-") == "\\-"


class TestSelectorBuilder:
    """Tests for class-name and selector composition."""

    def test_class_name_variants_outermost_first(self):
        """Variants come before the suffix, each followed by the separator."""
        builder = SelectorBuilder("df-", ":")
        assert builder.class_name("red", "md", "hover") == "df-md:hover:red"

    def test_empty_variants_are_skipped(self):
        builder = SelectorBuilder("df-", ":")
        assert builder.class_name("red", "", "hover") == "df-hover:red"

    def test_custom_separator(self):
        """Any separator is supported and escaped when needed."""
        builder = SelectorBuilder("x-", "_")
        assert builder.selector("red", "sm") == ".x-sm_red"

    def test_pseudo_suffix(self):
        builder = SelectorBuilder("df-", ":")
        assert builder.selector("red", "focus", pseudo=":focus") == ".df-focus\\:red:focus"

    def test_theme_scoped(self):
        """Theme selectors match descendants of and elements carrying the attribute."""
        builder = SelectorBuilder("df-", ":")
        assert builder.selector("red", theme="dark") == (
            ':is([data-theme="dark"] .dark\\:df-red, [data-theme="dark"].dark\\:df-red)'
        )


class TestThemeSelectors:
    """Tests for theme attribute and root selectors."""

    def test_attribute_selector(self):
        assert theme_attribute_selector("dark") == '[data-theme="dark"]'

    def test_attribute_selector_quotes(self):
        """Quotes in a theme name are escaped inside the attribute value."""
        assert theme_attribute_selector('a"b') == '[data-theme="a\\"b"]'

    def test_root_selector_default(self):
        """The default (empty) variant targets :root."""
        assert theme_root_selector("") == ":root"

    def test_root_selector_named(self):
        assert theme_root_selector("dark") == '[data-theme="dark"]'


class TestQueryParams:
    """Tests for media and container query parameters."""

    def test_width_breakpoint(self):
        assert media_params("640px") == "screen and (min-width: 640px)"

    def test_fractional_width(self):
        assert media_params(".5rem") == "screen and (min-width: .5rem)"

    def test_media_type_verbatim(self):
        """Non-width values are used as the query itself."""
        assert media_params("print") == "print"

    def test_media_prefix_stripped(self):
        assert media_params("@media print") == "print"

    def test_container_params(self):
        assert container_params("40rem") == "(min-width: 40rem)"
