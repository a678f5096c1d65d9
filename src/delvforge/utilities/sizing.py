"""Width and height utilities."""

from __future__ import annotations

from delvforge.core.options import Options
from delvforge.core.units import to_rem
from delvforge.engine import Stylesheet, expand
from delvforge.engine.expander import RESPONSIVE

PERCENTAGES = (0, 5, 10, 15, 20, 25, 30, 33, 40, 50, 60, 66, 70, 75, 80, 85, 90, 95, 100)


def width_table(options: Options) -> dict[str, str]:
    table = {
        "w-auto": "auto",
        "w-full": "100%",
        "w-screen": "100vw",
        "w-min": "min-content",
        "w-max": "max-content",
        "w-fit": "fit-content",
    }
    for key, value in options.spacing.items():
        table[f"w-{key}"] = to_rem(value)
    for percent in PERCENTAGES:
        if percent == 33:
            table["w-1/3"] = "33.333333%"
        elif percent == 66:
            table["w-2/3"] = "66.666667%"
        else:
            # Percentages win over a spacing key of the same name
            table[f"w-{percent}"] = f"{percent}%"
    return table


def height_table(options: Options) -> dict[str, str]:
    table = {
        "h-auto": "auto",
        "h-full": "100%",
        "h-screen": "100vh",
        "h-min": "min-content",
        "h-max": "max-content",
        "h-fit": "fit-content",
    }
    for key, value in options.spacing.items():
        table[f"h-{key}"] = to_rem(value)
    return table


def generate_height(sheet: Stylesheet, options: Options) -> None:
    expand("height", height_table(options), options, RESPONSIVE, output=sheet)


def generate_width(sheet: Stylesheet, options: Options) -> None:
    expand("width", width_table(options), options, RESPONSIVE, output=sheet)
