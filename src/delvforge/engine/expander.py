"""
Rule expansion engine.

Expands a utility table (class suffix -> value) into style rules across the
enabled axes, in this order for each theme variant:

1. one base rule per entry
2. states: one rule per (entry x pseudo-state), not breakpoint-scoped
3. responsive: per breakpoint, one ``@media`` block holding the base rules
   again and, when states are on too, the breakpoint-prefixed state rules
4. container queries (only with the ``containerQueries`` feature): per
   container, one ``@container`` block with one rule per entry

With ``with_theme`` the whole sequence is repeated once per theme variant;
otherwise it runs once with the empty (unscoped) variant.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from delvforge.core.options import Options
from delvforge.themes.resolver import ThemeResolver

from .rules import AtRule, Declaration, Stylesheet, StyleRule
from .selectors import SelectorBuilder, container_params, media_params
from .values import Value, as_value, resolve_declarations

logger = logging.getLogger(__name__)

PSEUDO_STATES: tuple[str, ...] = ("hover", "focus", "active", "focus-visible", "disabled")

UtilityTable = Mapping[str, Any]


@dataclass(frozen=True)
class AxisConfig:
    """Which expansion axes run for one ``expand`` call."""

    responsive: bool = False
    states: bool = False
    with_theme: bool = False
    container_query: bool = False


RESPONSIVE = AxisConfig(responsive=True)
RESPONSIVE_STATES = AxisConfig(responsive=True, states=True)
THEMED = AxisConfig(responsive=True, states=True, with_theme=True)


class _VariantPass:
    """Emits every enabled axis for one theme variant."""

    def __init__(
        self,
        properties: Sequence[str],
        entries: list[tuple[str, Value]],
        options: Options,
        axes: AxisConfig,
        output: Stylesheet,
    ):
        self.properties = properties
        self.entries = entries
        self.options = options
        self.axes = axes
        self.output = output
        self.builder = SelectorBuilder(options.class_prefix, options.separator)

    def __call__(self, theme_name: str) -> None:
        resolved = {
            suffix: resolve_declarations(value, self.properties, theme_name, self.options)
            for suffix, value in self.entries
        }

        # Base
        for suffix, _ in self.entries:
            self.output.append(self._rule(suffix, resolved[suffix], theme=theme_name))

        # States
        if self.axes.states:
            self.output.extend(self._state_rules(resolved, theme_name))

        # Responsive
        if self.axes.responsive:
            for breakpoint, width in self.options.breakpoints.items():
                rules = [
                    self._rule(suffix, resolved[suffix], breakpoint, theme=theme_name)
                    for suffix, _ in self.entries
                ]
                if self.axes.states:
                    rules.extend(self._state_rules(resolved, theme_name, breakpoint))
                self.output.append(AtRule("media", media_params(width), tuple(rules)))

        # Container queries
        if self.axes.container_query:
            if not self.options.feature("containerQueries"):
                logger.debug("Container queries disabled; skipping container axis")
                return
            for container, width in self.options.containers.items():
                rules = [
                    self._rule(suffix, resolved[suffix], f"@{container}", theme=theme_name)
                    for suffix, _ in self.entries
                ]
                self.output.append(AtRule("container", container_params(width), tuple(rules)))

    def _state_rules(
        self,
        resolved: dict[str, list[tuple[str, str]]],
        theme_name: str,
        breakpoint: str = "",
    ) -> list[StyleRule]:
        return [
            self._rule(
                suffix,
                resolved[suffix],
                breakpoint,
                state,
                theme=theme_name,
                pseudo=f":{state}",
            )
            for suffix, _ in self.entries
            for state in PSEUDO_STATES
        ]

    def _rule(
        self,
        suffix: str,
        pairs: list[tuple[str, str]],
        *variants: str,
        theme: str = "",
        pseudo: str = "",
    ) -> StyleRule:
        selector = self.builder.selector(suffix, *variants, theme=theme, pseudo=pseudo)
        important = self.options.important
        return StyleRule(
            selector, tuple(Declaration(prop, value, important) for prop, value in pairs)
        )


def expand(
    properties: str | Sequence[str],
    table: UtilityTable,
    options: Options,
    axes: AxisConfig | None = None,
    *,
    output: Stylesheet | None = None,
    breakpoints: Mapping[str, str] | None = None,
) -> Stylesheet:
    """
    Expand a utility table into style rules.

    Args:
        properties: Target CSS property name(s). Literal and computed values
            are attached to each, in order.
        table: Class suffix -> value (literal, ``fn(theme_name, options)``,
            or a mapping of explicit declarations).
        options: Generation options; never modified.
        axes: Expansion axes; defaults to base rules only.
        output: Stylesheet to append to; a new one is created if omitted.
        breakpoints: Breakpoint table to use for this call only, in place of
            ``options.breakpoints``.

    Returns:
        The stylesheet the rules were appended to.
    """
    axes = axes or AxisConfig()
    output = output if output is not None else Stylesheet()
    if not table:
        return output

    if breakpoints is not None:
        options = options.with_breakpoints(breakpoints)

    props = [properties] if isinstance(properties, str) else list(properties)
    entries = [(str(suffix), as_value(value)) for suffix, value in table.items()]
    variant_pass = _VariantPass(props, entries, options, axes, output)

    before = len(output)
    if axes.with_theme:
        ThemeResolver.from_options(options).always(variant_pass)
    else:
        variant_pass("")

    logger.debug(
        "Expanded %d entries for %s into %d node(s)",
        len(entries),
        ", ".join(props) or "<declarations>",
        len(output) - before,
    )
    return output
