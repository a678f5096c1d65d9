"""Fluid type, safe-area spacing, interaction, media and print utilities."""

from __future__ import annotations

from delvforge.core.options import Options
from delvforge.engine import Stylesheet, expand
from delvforge.engine.expander import RESPONSIVE, RESPONSIVE_STATES, AxisConfig
from delvforge.tokens import generate_fluid_typography, scale_length

FLUID_SCALE = 1.5

SAFE_AREA_SIDES = ("top", "right", "bottom", "left")

VIEWPORT_SPACING = {
    "space-viewport-sm": "min(2rem, 5vw)",
    "space-viewport-md": "min(4rem, 8vw)",
    "space-viewport-lg": "min(6rem, 12vw)",
}

USER_SELECT = {
    "select-none": "none",
    "select-text": "text",
    "select-all": "all",
    "select-auto": "auto",
}

POINTER_EVENTS = {"pointer-none": "none", "pointer-auto": "auto"}

CURSOR = {
    "cursor-pointer": "pointer",
    "cursor-wait": "wait",
    "cursor-text": "text",
    "cursor-move": "move",
    "cursor-help": "help",
    "cursor-not-allowed": "not-allowed",
}

ASPECT_RATIO = {
    "aspect-square": "1 / 1",
    "aspect-video": "16 / 9",
    "aspect-photo": "4 / 3",
    "aspect-auto": "auto",
}

OBJECT_FIT = {
    "object-contain": "contain",
    "object-cover": "cover",
    "object-fill": "fill",
    "object-none": "none",
    "object-scale-down": "scale-down",
}

PRINT_DISPLAY = {
    "hidden": "none",
    "block": "block",
    "inline": "inline",
    "flex": "flex",
}

PRINT_BREAKPOINTS = {"print": "print"}


def fluid_typography_table(options: Options) -> dict[str, str]:
    """``text-fluid-<size>`` clamps growing each font size by half across the viewport range."""
    table: dict[str, str] = {}
    for size, value in options.font_size.items():
        if not isinstance(value, list | tuple) or not value:
            continue
        min_size = str(value[0])
        table[f"text-fluid-{size}"] = generate_fluid_typography(
            min_size, scale_length(min_size, FLUID_SCALE)
        )
    return table


def generate(sheet: Stylesheet, options: Options) -> None:
    if options.feature("fluidTypography"):
        expand("font-size", fluid_typography_table(options), options, AxisConfig(), output=sheet)

    for side in SAFE_AREA_SIDES:
        table = {f"space-safe-{side}": f"env(safe-area-inset-{side})"}
        expand(f"padding-{side}", table, options, RESPONSIVE, output=sheet)
    expand("padding-inline", VIEWPORT_SPACING, options, RESPONSIVE, output=sheet)

    expand("user-select", USER_SELECT, options, RESPONSIVE_STATES, output=sheet)
    expand("pointer-events", POINTER_EVENTS, options, RESPONSIVE_STATES, output=sheet)
    expand("cursor", CURSOR, options, RESPONSIVE_STATES, output=sheet)

    expand("aspect-ratio", ASPECT_RATIO, options, RESPONSIVE, output=sheet)
    expand("object-fit", OBJECT_FIT, options, RESPONSIVE, output=sheet)

    expand(
        "display",
        PRINT_DISPLAY,
        options,
        RESPONSIVE,
        output=sheet,
        breakpoints=PRINT_BREAKPOINTS,
    )
