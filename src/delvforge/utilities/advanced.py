"""Container-query display utilities and advanced grid templates."""

from __future__ import annotations

import logging

from delvforge.core.options import Options
from delvforge.engine import Stylesheet, expand
from delvforge.engine.expander import RESPONSIVE, AxisConfig

logger = logging.getLogger(__name__)

CONTAINER_DISPLAY = {
    "hidden": "none",
    "block": "block",
    "inline": "inline",
    "flex": "flex",
    "grid": "grid",
}

GRID_TEMPLATES = {
    "grid-auto-fit": "repeat(auto-fit, minmax(250px, 1fr))",
    "grid-auto-fill": "repeat(auto-fill, minmax(250px, 1fr))",
}

GRID_FLOW = {"grid-dense": "dense"}


def generate(sheet: Stylesheet, options: Options) -> None:
    if options.feature("containerQueries"):
        expand(
            "display",
            CONTAINER_DISPLAY,
            options,
            AxisConfig(container_query=True),
            output=sheet,
        )

    if options.feature("advancedGrid"):
        expand("grid-template-columns", GRID_TEMPLATES, options, RESPONSIVE, output=sheet)
        expand("grid-auto-flow", GRID_FLOW, options, RESPONSIVE, output=sheet)

    if options.feature("modernSelectors"):
        logger.debug("Modern selector utilities are not generated")
