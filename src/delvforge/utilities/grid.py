"""CSS grid utilities (column count from ``options.grid.columns``)."""

from __future__ import annotations

from delvforge.core.options import Options
from delvforge.engine import Stylesheet, expand
from delvforge.engine.expander import RESPONSIVE

GRID_ROWS = 12

DISPLAY = {"grid": "grid", "inline-grid": "inline-grid"}

AUTO_FLOW = {
    "grid-flow-row": "row",
    "grid-flow-col": "column",
    "grid-flow-dense": "dense",
    "grid-flow-row-dense": "row dense",
    "grid-flow-col-dense": "column dense",
}

AUTO_COLUMNS = {
    "auto-cols-auto": "auto",
    "auto-cols-min": "min-content",
    "auto-cols-max": "max-content",
    "auto-cols-fr": "minmax(0, 1fr)",
}

AUTO_ROWS = {
    "auto-rows-auto": "auto",
    "auto-rows-min": "min-content",
    "auto-rows-max": "max-content",
    "auto-rows-fr": "minmax(0, 1fr)",
}

PLACE_CONTENT = {
    "place-content-center": "center",
    "place-content-start": "start",
    "place-content-end": "end",
    "place-content-between": "space-between",
    "place-content-around": "space-around",
    "place-content-evenly": "space-evenly",
    "place-content-stretch": "stretch",
}

PLACE_ITEMS = {
    "place-items-start": "start",
    "place-items-end": "end",
    "place-items-center": "center",
    "place-items-stretch": "stretch",
}

PLACE_SELF = {
    "place-self-auto": "auto",
    "place-self-start": "start",
    "place-self-end": "end",
    "place-self-center": "center",
    "place-self-stretch": "stretch",
}


def _template(prefix: str, count: int) -> dict[str, str]:
    table = {f"{prefix}-none": "none", f"{prefix}-subgrid": "subgrid"}
    table.update({f"{prefix}-{i}": f"repeat({i}, minmax(0, 1fr))" for i in range(1, count + 1)})
    return table


def gap_table(options: Options) -> dict[str, str]:
    """``grid-gap`` plus one ``gutter-<name>`` entry per configured gutter."""
    table = {"grid-gap": options.grid.gap}
    table.update({f"gutter-{name}": width for name, width in options.grid.gutters.items()})
    return table


def _placement(prefix: str, count: int) -> list[tuple[str, dict[str, str]]]:
    """``col``/``row`` span, start and end tables."""
    axis = "column" if prefix == "col" else "row"
    span = {f"{prefix}-auto": "auto", f"{prefix}-span-full": "1 / -1"}
    span.update({f"{prefix}-span-{i}": f"span {i} / span {i}" for i in range(1, count + 1)})
    start = {f"{prefix}-start-{i}": str(i) for i in range(1, count + 1)}
    end = {f"{prefix}-end-{i}": str(i) for i in range(1, count + 1)}
    return [
        (f"grid-{axis}", span),
        (f"grid-{axis}-start", start),
        (f"grid-{axis}-end", end),
    ]


def generate(sheet: Stylesheet, options: Options) -> None:
    columns = options.grid.columns
    tables: list[tuple[str, dict[str, str]]] = [
        ("display", DISPLAY),
        ("grid-template-columns", _template("grid-cols", columns)),
        *_placement("col", columns),
        ("grid-template-rows", _template("grid-rows", GRID_ROWS)),
        *_placement("row", GRID_ROWS),
        ("grid-auto-flow", AUTO_FLOW),
        ("grid-auto-columns", AUTO_COLUMNS),
        ("grid-auto-rows", AUTO_ROWS),
        ("place-content", PLACE_CONTENT),
        ("place-items", PLACE_ITEMS),
        ("place-self", PLACE_SELF),
        ("gap", gap_table(options)),
    ]
    for prop, table in tables:
        expand(prop, table, options, RESPONSIVE, output=sheet)
