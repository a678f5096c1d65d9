"""
Utility categories.

Each category is a ``generate(sheet, options)`` function that appends its
rules to the stylesheet. ``CATEGORIES`` lists them in emission order.

Usage:
    from delvforge.utilities import CATEGORIES

    for name, generate in CATEGORIES:
        generate(sheet, options)
"""

from __future__ import annotations

from collections.abc import Callable

from delvforge.core.options import Options
from delvforge.engine import Stylesheet

from . import (
    advanced,
    align,
    color,
    components,
    containers,
    enhanced,
    flex,
    grid,
    sizing,
    spacing,
    variables,
)

Category = Callable[[Stylesheet, Options], None]

CATEGORIES: list[tuple[str, Category]] = [
    ("align", align.generate),
    ("color", color.generate),
    ("flex", flex.generate),
    ("grid", grid.generate),
    ("height", sizing.generate_height),
    ("margin", spacing.generate_margin),
    ("padding", spacing.generate_padding),
    ("spacing", spacing.generate_gap),
    ("width", sizing.generate_width),
    ("containers", containers.generate),
    ("components", components.generate),
    ("advanced", advanced.generate),
    ("enhanced", enhanced.generate),
    ("variables", variables.generate),
]


def get_category(name: str) -> Category:
    """Look up a category by name; raises KeyError for unknown names."""
    for category_name, generate in CATEGORIES:
        if category_name == name:
            return generate
    raise KeyError(name)


__all__ = ["CATEGORIES", "Category", "get_category"]
