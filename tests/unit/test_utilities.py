"""Tests for the utility categories."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from delvforge.core.options import Options
from delvforge.engine import Stylesheet
from delvforge.generator import prepare_options
from delvforge.utilities import (
    CATEGORIES,
    advanced,
    align,
    color,
    components,
    containers,
    enhanced,
    flex,
    get_category,
    grid,
    sizing,
    spacing,
    variables,
)


def _without(options: Options, flag: str) -> Options:
    features = options.features.model_copy(update={flag: False})
    return options.model_copy(update={"features": features})


def _run(generate, options: Options) -> Stylesheet:
    sheet = Stylesheet()
    generate(sheet, options)
    return sheet


@pytest.fixture
def options(small_options: Options) -> Options:
    return prepare_options(small_options)


class TestRegistry:
    """Tests for the category registry."""

    def test_order(self):
        assert [name for name, _ in CATEGORIES] == [
            "align",
            "color",
            "flex",
            "grid",
            "height",
            "margin",
            "padding",
            "spacing",
            "width",
            "containers",
            "components",
            "advanced",
            "enhanced",
            "variables",
        ]

    def test_get_category(self):
        assert get_category("align") is align.generate
        with pytest.raises(KeyError):
            get_category("fonts")


class TestLayoutCategories:
    """Tests for align, flex, grid and sizing tables."""

    def test_align_responsive(self, options: Options):
        sheet = _run(align.generate, options)
        assert sheet.find(".df-md\\:text-center")[0].get("text-align") == "center"

    def test_flex_split_properties(self, options: Options):
        sheet = _run(flex.generate, options)
        assert sheet.find(".df-grow")[0].get("flex-grow") == "1"
        assert sheet.find(".df-flex-1")[0].get("flex") == "1 1 0%"

    def test_grid_columns_follow_options(self):
        options = Options(grid={"columns": 4}, breakpoints={}, themes={})
        sheet = _run(grid.generate, options)
        selectors = sheet.selectors()
        assert ".df-grid-cols-4" in selectors
        assert ".df-grid-cols-5" not in selectors
        assert sheet.find(".df-col-span-2")[0].get("grid-column") == "span 2 / span 2"

    def test_grid_gap_and_gutters(self):
        options = Options(
            grid={"gap": "0.75rem", "gutters": {"md": "1.5rem"}}, breakpoints={}, themes={}
        )
        sheet = _run(grid.generate, options)
        assert sheet.find(".df-grid-gap")[0].get("gap") == "0.75rem"
        assert sheet.find(".df-gutter-md")[0].get("gap") == "1.5rem"

    def test_width(self, options: Options):
        table = sizing.width_table(options)
        assert table["w-4"] == "1rem"
        assert table["w-1/3"] == "33.333333%"
        assert table["w-0"] == "0%"

    def test_height(self, options: Options):
        assert sizing.height_table(options)["h-px"] == "1px"


class TestSpacingCategories:
    """Tests for margin, padding and gap."""

    def test_margin_auto_and_negative(self, options: Options):
        sheet = _run(spacing.generate_margin, options)
        assert sheet.find(".df-mx-auto")[0].get("margin-inline") == "auto"
        assert sheet.find(".df--mt-4")[0].get("margin-block-start") == "-1rem"
        assert sheet.find(".df--m-0") == []

    def test_padding(self, options: Options):
        sheet = _run(spacing.generate_padding, options)
        assert sheet.find(".df-p-1")[0].get("padding") == "0.25rem"

    def test_gap(self, options: Options):
        sheet = _run(spacing.generate_gap, options)
        assert sheet.find(".df-gap-x-4")[0].get("column-gap") == "1rem"
        assert sheet.find(".df-gap-y-4")[0].get("row-gap") == "1rem"


class TestColorCategory:
    """Tests for color utilities."""

    def test_palette_and_specials(self, options: Options):
        table = color.color_table("text", options)
        assert table["text-brand-500"] == "#2196f3"
        assert table["text-brand-500/50"] == "rgba(33,150,243,0.5)"
        assert table["text-current"] == "currentColor"

    def test_theme_only_colors(self, options: Options):
        assert color.theme_only_colors(options) == {"background": None}

    def test_scoped_for_each_theme(self, options: Options):
        sheet = _run(color.generate, options)
        assert sheet.find(".df-hover\\:bg-brand-500:hover")
        assert any(s.startswith(':is([data-theme="dark"]') for s in sheet.selectors())


class TestContainersCategory:
    """Tests for container utilities."""

    def test_container_types(self, options: Options):
        sheet = _run(containers.generate, options)
        assert sheet.find(".df-\\@container")[0].get("container-type") == "inline-size"
        assert sheet.find(".df-\\@container-sm")[0].get("container") == "sm / inline-size"

    def test_container_types_need_feature(self, small_options: Options):
        options = _without(small_options, "container_queries")
        sheet = _run(containers.generate, options)
        assert sheet.find(".df-\\@container") == []

    def test_responsive_container(self, options: Options):
        """The container class is capped at breakpoints that are container sizes."""
        nodes = containers.responsive_container(options)
        assert nodes[0].selector == ".df-container"
        assert nodes[0].get("padding-inline") == "var(--df-container-padding, 1rem)"
        assert len(nodes) == 2
        assert nodes[1].params == "screen and (min-width: 640px)"
        assert nodes[1].rules[0].get("max-width") == "640px"

    def test_shaped_containers(self, options: Options):
        sheet = _run(containers.generate, options)
        (rule,) = sheet.find(".df-container-safe")
        assert rule.get("padding-left") == "env(safe-area-inset-left)"

    def test_custom_properties(self, options: Options):
        sheet = _run(containers.generate, options)
        (root,) = sheet.find(":root")
        assert [d.prop for d in root.declarations] == [
            "--df-container-padding",
            "--df-container-padding-sm",
            "--df-container-padding-lg",
        ]
        assert root.get("--df-container-padding") == "1rem"

    def test_container_reads_defined_padding_variable(self, options: Options):
        """The padding variable the container class reads is one the category defines."""
        sheet = _run(containers.generate, options)
        (root,) = sheet.find(":root")
        (container,) = sheet.find(".df-container")
        name = container.get("padding-inline").removeprefix("var(").split(",")[0]
        assert root.get(name) is not None


class TestComponentsCategory:
    """Tests for component utilities."""

    def test_builtin_uses_variable_prefix(self):
        options = Options(prefix={"cssVariable": "ui-"}, themes={})
        table = components.builtin_table(options)
        assert ("background-color", "var(--ui-primary-500)") in table["btn-primary"].items

    def test_form_select_url_survives(self, options: Options):
        items = dict(components.builtin_table(options)["form-select"].items)
        assert items["background-image"].startswith('url("data:image/svg+xml,')

    def test_configured_component_resolves_utilities(self, small_config: dict[str, Any]):
        """Configured components inline the declarations of generated utilities."""
        small_config["components"] = {"pill": {"base": "flex p-4 hover:bg-brand-500 unknown-x"}}
        configured = prepare_options(small_config)
        sheet = Stylesheet()
        for name in ("flex", "padding"):
            get_category(name)(sheet, configured)

        table = components.configured_table(sheet, configured)
        assert dict(table["pill"].items) == {"display": "flex", "padding": "1rem"}

    @pytest.mark.parametrize("separator", ["-", "/", "."])
    def test_configured_component_with_separator_in_utility_names(
        self, small_config: dict[str, Any], separator: str
    ):
        """Plain utilities containing the separator character are still inlined."""
        small_config["separator"] = separator
        base = f"px-4 hover{separator}p-1 sm{separator}p-1"
        small_config["components"] = {"pill": {"base": base}}
        configured = prepare_options(small_config)
        sheet = Stylesheet()
        spacing.generate_padding(sheet, configured)

        table = components.configured_table(sheet, configured)
        assert dict(table["pill"].items) == {"padding-inline": "1rem"}

        components.generate(sheet, configured)
        assert sheet.find(".df-pill") != []

    def test_variant_prefixes(self, small_options: Options):
        prefixes = components.variant_prefixes(prepare_options(small_options))
        assert "hover:" in prefixes
        assert "md:" in prefixes
        assert "@sm:" in prefixes
        assert "dark:" in prefixes
        assert "light:" not in prefixes

    def test_unresolvable_component_skipped(
        self, small_config: dict[str, Any], caplog: pytest.LogCaptureFixture
    ):
        small_config["components"] = {"ghost": {"base": "nothing-here"}}
        configured = prepare_options(small_config)
        with caplog.at_level(logging.DEBUG, logger="delvforge.utilities.components"):
            table = components.configured_table(Stylesheet(), configured)
        assert table == {}
        assert "ghost" in caplog.text


class TestAdvancedAndEnhanced:
    """Tests for advanced and enhanced utilities."""

    def test_container_display(self, options: Options):
        sheet = _run(advanced.generate, options)
        (block,) = sheet.at_rules("container")
        assert ".df-\\@sm\\:hidden" in [rule.selector for rule in block.rules]

    def test_advanced_grid_flag(self, options: Options):
        assert _run(advanced.generate, options).find(".df-grid-auto-fit")
        disabled = _without(options, "advanced_grid")
        assert _run(advanced.generate, disabled).find(".df-grid-auto-fit") == []

    def test_fluid_typography(self, options: Options):
        assert enhanced.fluid_typography_table(options) == {
            "text-fluid-sm": (
                "clamp(0.875rem, 0.875rem + (0.4375) * ((100vw - 20rem) / (60)), 1.3125rem)"
            )
        }

    def test_print_utilities(self, options: Options):
        sheet = _run(enhanced.generate, options)
        (block,) = [node for node in sheet.at_rules("media") if node.params == "print"]
        assert block.rules[0].selector == ".df-print\\:hidden"
        assert block.rules[0].get("display") == "none"

    def test_interaction_states(self, options: Options):
        sheet = _run(enhanced.generate, options)
        assert sheet.find(".df-hover\\:cursor-pointer:hover")


class TestVariablesCategory:
    """Tests for custom property output."""

    def test_rules(self, options: Options):
        sheet = _run(variables.generate, options)
        selectors = [node.selector for node in sheet]
        assert selectors == [":root", ":root", '[data-theme="dark"]', ":root"]

    def test_base_tokens(self, options: Options):
        base = _run(variables.generate, options).nodes[0]
        assert base.get("--df-spacing-4") == "1"
        assert base.get("--df-font-size-sm") == "0.875rem"
        assert base.get("--df-breakpoint-md") == "768px"
        assert base.get("--df-brand-500") == "#2196f3"

    def test_utility_tokens(self, options: Options):
        last = _run(variables.generate, options).nodes[-1]
        assert last.get("--df-radius-full") == "9999px"
        assert last.get("--df-z-index-auto") == "auto"
        assert last.get("--df-duration-150") == "150ms"
        assert last.get("--df-ease-in-out") == "cubic-bezier(0.4, 0, 0.2, 1)"

    def test_configured_animations(self, options: Options):
        custom = options.model_copy(
            update={"animations": {"durations": {"fast": "90ms"}, "easings": {}}}
        )
        last = _run(variables.generate, custom).nodes[-1]
        assert last.get("--df-duration-fast") == "90ms"
        assert last.get("--df-duration-150") is None

    def test_disabled(self, options: Options):
        disabled = _without(options, "custom_properties")
        assert len(_run(variables.generate, disabled)) == 0
