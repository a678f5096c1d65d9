"""Tests for unit helpers and the stylesheet model."""

from __future__ import annotations

import pytest

from delvforge.core.errors import ConfigurationError
from delvforge.core.units import format_number, negate, parse_float, stringify, to_rem, unit_of
from delvforge.engine import AtRule, Declaration, Stylesheet, StyleRule


class TestUnits:
    """Tests for the rem convention and number formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, "1rem"), (0.25, "0.25rem"), (2.0, "2rem"), ("1px", "1px"), ("auto", "auto")],
    )
    def test_to_rem(self, value, expected: str):
        assert to_rem(value) == expected

    def test_format_number(self):
        assert format_number(1.0) == "1"
        assert format_number(0.125) == "0.125"

    def test_stringify(self):
        assert stringify(True) == "true"
        assert stringify(3.0) == "3"
        assert stringify("x") == "x"

    def test_negate(self):
        assert negate(0.5) == "-0.5rem"
        assert negate("1px") == "-1px"

    def test_parse_float(self):
        assert parse_float("1.5rem") == 1.5
        assert parse_float(".5em") == 0.5
        assert parse_float("calc(1px)") is None

    def test_unit_of(self):
        assert unit_of("1.5rem") == "rem"
        assert unit_of("10") == ""


class TestStylesheet:
    """Tests for rule containers and rendering."""

    def test_rules_are_not_merged(self):
        """Two rules with one selector stay two blocks."""
        sheet = Stylesheet()
        sheet.append(StyleRule(".a", (Declaration("color", "red"),)))
        sheet.append(StyleRule(".a", (Declaration("color", "blue"),)))

        assert len(sheet.find(".a")) == 2
        assert sheet.to_css() == ".a {\n  color: red;\n}\n\n.a {\n  color: blue;\n}\n"

    def test_nested_rendering(self):
        rule = StyleRule(".b", (Declaration("gap", "1rem", important=True),))
        sheet = Stylesheet([AtRule("media", "print", (rule,))])

        assert sheet.to_css() == "@media print {\n  .b {\n    gap: 1rem !important;\n  }\n}\n"
        assert sheet.rule_count() == 1
        assert sheet.at_rules("container") == []

    def test_get_returns_last(self):
        rule = StyleRule(".c", (Declaration("color", "red"), Declaration("color", "blue")))
        assert rule.get("color") == "blue"
        assert rule.get("margin") is None


class TestErrors:
    def test_source_prefix(self):
        error = ConfigurationError("bad value", source="delvforge.yaml")
        assert str(error) == "delvforge.yaml: bad value"
        assert error.message == "bad value"

    def test_without_source(self):
        assert str(ConfigurationError("bad value")) == "bad value"
