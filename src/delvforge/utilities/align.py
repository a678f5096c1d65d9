"""Text and vertical alignment utilities."""

from __future__ import annotations

from delvforge.core.options import Options
from delvforge.engine import Stylesheet, expand
from delvforge.engine.expander import RESPONSIVE

TEXT_ALIGN = {
    "text-left": "left",
    "text-center": "center",
    "text-right": "right",
    "text-justify": "justify",
    "text-start": "start",
    "text-end": "end",
}

VERTICAL_ALIGN = {
    "align-baseline": "baseline",
    "align-top": "top",
    "align-middle": "middle",
    "align-bottom": "bottom",
    "align-text-top": "text-top",
    "align-text-bottom": "text-bottom",
    "align-sub": "sub",
    "align-super": "super",
}


def generate(sheet: Stylesheet, options: Options) -> None:
    expand("text-align", TEXT_ALIGN, options, RESPONSIVE, output=sheet)
    expand("vertical-align", VERTICAL_ALIGN, options, RESPONSIVE, output=sheet)
