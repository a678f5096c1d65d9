"""Flexbox utilities."""

from __future__ import annotations

from delvforge.core.options import Options
from delvforge.engine import Stylesheet, expand
from delvforge.engine.expander import RESPONSIVE

DISPLAY = {
    "flex": "flex",
    "inline-flex": "inline-flex",
}

FLEX_DIRECTION = {
    "flex-row": "row",
    "flex-row-reverse": "row-reverse",
    "flex-col": "column",
    "flex-col-reverse": "column-reverse",
}

FLEX_WRAP = {
    "flex-wrap": "wrap",
    "flex-wrap-reverse": "wrap-reverse",
    "flex-nowrap": "nowrap",
}

FLEX = {
    "flex-1": "1 1 0%",
    "flex-auto": "1 1 auto",
    "flex-initial": "0 1 auto",
    "flex-none": "none",
}

FLEX_GROW = {"grow": "1", "grow-0": "0"}

FLEX_SHRINK = {"shrink": "1", "shrink-0": "0"}

JUSTIFY_CONTENT = {
    "justify-start": "flex-start",
    "justify-end": "flex-end",
    "justify-center": "center",
    "justify-between": "space-between",
    "justify-around": "space-around",
    "justify-evenly": "space-evenly",
    "justify-stretch": "stretch",
}

ALIGN_ITEMS = {
    "items-start": "flex-start",
    "items-end": "flex-end",
    "items-center": "center",
    "items-baseline": "baseline",
    "items-stretch": "stretch",
}

ALIGN_CONTENT = {
    "content-start": "flex-start",
    "content-end": "flex-end",
    "content-center": "center",
    "content-between": "space-between",
    "content-around": "space-around",
    "content-evenly": "space-evenly",
    "content-stretch": "stretch",
}

ALIGN_SELF = {
    "self-auto": "auto",
    "self-start": "flex-start",
    "self-end": "flex-end",
    "self-center": "center",
    "self-baseline": "baseline",
    "self-stretch": "stretch",
}

ORDER = {
    **{f"order-{i}": str(i) for i in range(13)},
    "order-first": "-9999",
    "order-last": "9999",
    "order-none": "0",
}

TABLES: list[tuple[str, dict[str, str]]] = [
    ("display", DISPLAY),
    ("flex-direction", FLEX_DIRECTION),
    ("flex-wrap", FLEX_WRAP),
    ("flex", FLEX),
    ("flex-grow", FLEX_GROW),
    ("flex-shrink", FLEX_SHRINK),
    ("justify-content", JUSTIFY_CONTENT),
    ("align-items", ALIGN_ITEMS),
    ("align-content", ALIGN_CONTENT),
    ("align-self", ALIGN_SELF),
    ("order", ORDER),
]


def generate(sheet: Stylesheet, options: Options) -> None:
    for prop, table in TABLES:
        expand(prop, table, options, RESPONSIVE, output=sheet)
