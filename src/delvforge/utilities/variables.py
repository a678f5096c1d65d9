"""Global, per-theme and utility custom properties."""

from __future__ import annotations

import logging
from typing import Any

from delvforge.core.options import Options
from delvforge.engine import Stylesheet
from delvforge.themes import generate_custom_properties, generate_theme_properties

logger = logging.getLogger(__name__)

SHADOWS = {
    "xs": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "sm": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "DEFAULT": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "0 0 #0000",
}

RADII = {
    "none": "0px",
    "sm": "0.125rem",
    "DEFAULT": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

_EASE = "150ms cubic-bezier(0.4, 0, 0.2, 1)"

TRANSITIONS = {
    "none": "none",
    "all": f"all {_EASE}",
    "DEFAULT": (
        "color, background-color, border-color, text-decoration-color, fill, stroke, "
        f"opacity, box-shadow, transform, filter, backdrop-filter {_EASE}"
    ),
    "colors": (
        f"color, background-color, border-color, text-decoration-color, fill, stroke {_EASE}"
    ),
    "opacity": f"opacity {_EASE}",
    "shadow": f"box-shadow {_EASE}",
    "transform": f"transform {_EASE}",
}

Z_INDEX = {
    **{str(level): str(level) for level in (0, 10, 20, 30, 40, 50)},
    "auto": "auto",
}


def base_tokens(options: Options) -> dict[str, Any]:
    """Spacing, font sizes, breakpoints and the global palette as one token tree."""
    return {
        "spacing": options.spacing,
        "font-size": {key: options.font_size_value(key) for key in options.font_size},
        "breakpoint": options.breakpoints,
        **options.colors,
    }


def utility_tokens(options: Options) -> dict[str, Any]:
    """Shadow, radius, transition and z-index scales plus the configured animation tokens."""
    return {
        "shadow": SHADOWS,
        "radius": RADII,
        "transition": TRANSITIONS,
        "z-index": Z_INDEX,
        "duration": options.animations.get("durations", {}),
        "ease": options.animations.get("easings", {}),
    }


def generate(sheet: Stylesheet, options: Options) -> None:
    if not options.feature("customProperties"):
        logger.debug("Custom properties disabled; skipping variables")
        return

    sheet.append(generate_custom_properties(base_tokens(options), options))
    sheet.extend(generate_theme_properties(options))
    sheet.append(generate_custom_properties(utility_tokens(options), options))
