"""Margin, padding and gap utilities from the spacing scale."""

from __future__ import annotations

from delvforge.core.options import Options
from delvforge.core.units import to_rem
from delvforge.engine import Stylesheet, expand
from delvforge.engine.expander import RESPONSIVE
from delvforge.tokens import generate_spacing_utilities


def generate_margin(sheet: Stylesheet, options: Options) -> None:
    """``m-4``, ``mt-4`` … plus negatives (``-mx-2``) and ``*-auto``."""
    groups = generate_spacing_utilities(options.spacing, "margin", options, negative=True)
    auto_groups = generate_spacing_utilities({"auto": "auto"}, "margin", options)
    for (properties, table), (_, auto_table) in zip(groups, auto_groups, strict=True):
        expand(properties, {**table, **auto_table}, options, RESPONSIVE, output=sheet)


def generate_padding(sheet: Stylesheet, options: Options) -> None:
    for properties, table in generate_spacing_utilities(options.spacing, "padding", options):
        expand(properties, table, options, RESPONSIVE, output=sheet)


def generate_gap(sheet: Stylesheet, options: Options) -> None:
    gap: dict[str, str] = {}
    column_gap: dict[str, str] = {}
    row_gap: dict[str, str] = {}
    for key, value in options.spacing.items():
        gap[f"gap-{key}"] = to_rem(value)
        column_gap[f"gap-x-{key}"] = to_rem(value)
        row_gap[f"gap-y-{key}"] = to_rem(value)

    expand("gap", gap, options, RESPONSIVE, output=sheet)
    expand("column-gap", column_gap, options, RESPONSIVE, output=sheet)
    expand("row-gap", row_gap, options, RESPONSIVE, output=sheet)
