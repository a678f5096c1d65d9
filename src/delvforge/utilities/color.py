"""
Text, background and border color utilities.

Global palette entries become literal values with opacity variants. Colors
that only themes declare (``background``, ``surface`` ...) become computed
values, so each theme variant gets its own value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from delvforge.core.options import Options
from delvforge.engine import Computed, Stylesheet, expand
from delvforge.engine.expander import THEMED
from delvforge.themes import theme_color
from delvforge.tokens import OPACITY_STEPS, generate_color_variants, with_opacity

logger = logging.getLogger(__name__)

SPECIAL_COLORS = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000000",
    "white": "#ffffff",
}

COLOR_PROPERTIES = {
    "text": "color",
    "bg": "background-color",
    "border": "border-color",
}


def _themed_value(
    theme_name: str,
    options: Options,
    *,
    name: str,
    shade: str | None = None,
    opacity: int | None = None,
) -> str | None:
    value = theme_color(options, theme_name, name, shade)
    if value is None or opacity is None:
        return value
    return with_opacity(value, opacity)


def theme_only_colors(options: Options) -> dict[str, Any]:
    """Colors declared by at least one theme but absent from the global palette."""
    found: dict[str, Any] = {}
    for theme in options.themes.values():
        for name, value in theme.colors.items():
            if name in options.colors:
                continue
            if isinstance(value, Mapping):
                shades = found.setdefault(name, {})
                if isinstance(shades, dict):
                    shades.update(dict.fromkeys(value))
            else:
                found.setdefault(name, None)
    return found


def _themed_table(base: str, name: str, shades: Any) -> dict[str, Computed]:
    table: dict[str, Computed] = {}
    if not isinstance(shades, Mapping):
        table[f"{base}-{name}"] = Computed(partial(_themed_value, name=name))
        return table
    for shade in shades:
        table[f"{base}-{name}-{shade}"] = Computed(partial(_themed_value, name=name, shade=shade))
        for opacity in OPACITY_STEPS:
            table[f"{base}-{name}-{shade}/{opacity}"] = Computed(
                partial(_themed_value, name=name, shade=shade, opacity=opacity)
            )
    return table


def color_table(base: str, options: Options) -> dict[str, Any]:
    """Utility table for one prefix (``text``, ``bg`` or ``border``)."""
    table: dict[str, Any] = {}
    for name, value in options.colors.items():
        if isinstance(value, Mapping):
            table.update(generate_color_variants(value, f"{base}-{name}"))
        else:
            table[f"{base}-{name}"] = str(value)

    for name, shades in theme_only_colors(options).items():
        table.update(_themed_table(base, name, shades))

    for name, value in SPECIAL_COLORS.items():
        table[f"{base}-{name}"] = value
    return table


def generate(sheet: Stylesheet, options: Options) -> None:
    for base, prop in COLOR_PROPERTIES.items():
        table = color_table(base, options)
        logger.debug("%s: %d color utilities", prop, len(table))
        expand(prop, table, options, THEMED, output=sheet)
