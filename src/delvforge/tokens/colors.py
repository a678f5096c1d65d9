"""
Pure-Python color parsing and opacity variants.

Parses the CSS color syntaxes token tables use (hex, ``rgb()``/``rgba()``,
``hsl()``/``hsla()``, named colors) and derives alpha-blended variants of a
palette. No external color libraries required.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from delvforge.core.errors import MalformedColorError
from delvforge.core.units import format_number

logger = logging.getLogger(__name__)

OPACITY_STEPS: tuple[int, ...] = (10, 20, 30, 40, 50, 60, 70, 80, 90)

# CSS named colors (CSS Color Module Level 4)
NAMED_COLORS: dict[str, str] = {
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aqua": "#00ffff",
    "aquamarine": "#7fffd4", "azure": "#f0ffff", "beige": "#f5f5dc",
    "bisque": "#ffe4c4", "black": "#000000", "blanchedalmond": "#ffebcd",
    "blue": "#0000ff", "blueviolet": "#8a2be2", "brown": "#a52a2a",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "coral": "#ff7f50", "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc", "crimson": "#dc143c", "cyan": "#00ffff",
    "darkblue": "#00008b", "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9", "darkgreen": "#006400", "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b", "darkmagenta": "#8b008b", "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00", "darkorchid": "#9932cc", "darkred": "#8b0000",
    "darksalmon": "#e9967a", "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f", "darkslategrey": "#2f4f4f", "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3", "deeppink": "#ff1493", "deepskyblue": "#00bfff",
    "dimgray": "#696969", "dimgrey": "#696969", "dodgerblue": "#1e90ff",
    "firebrick": "#b22222", "floralwhite": "#fffaf0", "forestgreen": "#228b22",
    "fuchsia": "#ff00ff", "gainsboro": "#dcdcdc", "ghostwhite": "#f8f8ff",
    "gold": "#ffd700", "goldenrod": "#daa520", "gray": "#808080",
    "green": "#008000", "greenyellow": "#adff2f", "grey": "#808080",
    "honeydew": "#f0fff0", "hotpink": "#ff69b4", "indianred": "#cd5c5c",
    "indigo": "#4b0082", "ivory": "#fffff0", "khaki": "#f0e68c",
    "lavender": "#e6e6fa", "lavenderblush": "#fff0f5", "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd", "lightblue": "#add8e6", "lightcoral": "#f08080",
    "lightcyan": "#e0ffff", "lightgoldenrodyellow": "#fafad2", "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90", "lightgrey": "#d3d3d3", "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa", "lightskyblue": "#87cefa",
    "lightslategray": "#778899", "lightslategrey": "#778899", "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0", "lime": "#00ff00", "limegreen": "#32cd32",
    "linen": "#faf0e6", "magenta": "#ff00ff", "maroon": "#800000",
    "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd", "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db", "mediumseagreen": "#3cb371", "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a", "mediumturquoise": "#48d1cc", "mediumvioletred": "#c71585",
    "midnightblue": "#191970", "mintcream": "#f5fffa", "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5", "navajowhite": "#ffdead", "navy": "#000080",
    "oldlace": "#fdf5e6", "olive": "#808000", "olivedrab": "#6b8e23",
    "orange": "#ffa500", "orangered": "#ff4500", "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa", "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5", "peachpuff": "#ffdab9",
    "peru": "#cd853f", "pink": "#ffc0cb", "plum": "#dda0dd",
    "powderblue": "#b0e0e6", "purple": "#800080", "rebeccapurple": "#663399",
    "red": "#ff0000", "rosybrown": "#bc8f8f", "royalblue": "#4169e1",
    "saddlebrown": "#8b4513", "salmon": "#fa8072", "sandybrown": "#f4a460",
    "seagreen": "#2e8b57", "seashell": "#fff5ee", "sienna": "#a0522d",
    "silver": "#c0c0c0", "skyblue": "#87ceeb", "slateblue": "#6a5acd",
    "slategray": "#708090", "slategrey": "#708090", "snow": "#fffafa",
    "springgreen": "#00ff7f", "steelblue": "#4682b4", "tan": "#d2b48c",
    "teal": "#008080", "thistle": "#d8bfd8", "tomato": "#ff6347",
    "turquoise": "#40e0d0", "violet": "#ee82ee", "wheat": "#f5deb3",
    "white": "#ffffff", "whitesmoke": "#f5f5f5", "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
}

_HEX = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNCTION = re.compile(r"^(rgba?|hsla?)\(\s*(.*?)\s*\)$", re.IGNORECASE)


@dataclass(frozen=True)
class RGBA:
    """An sRGB color with channels 0-255 and alpha 0-1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def with_alpha(self, alpha: float) -> RGBA:
        return RGBA(self.r, self.g, self.b, alpha)

    def to_css(self) -> str:
        """``rgb(r,g,b)`` when opaque, ``rgba(r,g,b,a)`` otherwise."""
        r, g, b = (round(channel) for channel in (self.r, self.g, self.b))
        if self.a >= 1.0:
            return f"rgb({r},{g},{b})"
        return f"rgba({r},{g},{b},{format_number(round(self.a, 4))})"


def _parse_hex(digits: str) -> RGBA:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return RGBA(r, g, b, a)


def _split_arguments(body: str) -> tuple[list[str], str | None]:
    """Split ``"1, 2, 3, .5"`` or ``"1 2 3 / 50%"`` into channels and alpha."""
    alpha: str | None = None
    if "/" in body:
        body, alpha = (part.strip() for part in body.split("/", 1))
    parts = [p for p in re.split(r"[\s,]+", body) if p]
    if alpha is None and len(parts) == 4:
        alpha = parts.pop()
    return parts, alpha


def _number(token: str, scale: float = 1.0) -> float:
    """Parse a number or percentage (percentages are scaled by ``scale``)."""
    if token.endswith("%"):
        return float(token[:-1]) / 100 * scale
    return float(token)


def _hue(token: str) -> float:
    token = token.lower()
    if token.endswith("deg"):
        return float(token[:-3])
    if token.endswith("turn"):
        return float(token[:-4]) * 360
    if token.endswith("rad"):
        return float(token[:-3]) * 180 / 3.141592653589793
    return float(token)


def _hsl_to_rgb(h: float, s: float, lightness: float) -> tuple[float, float, float]:
    h = (h % 360) / 360

    def channel(n: float) -> float:
        k = (n + h * 12) % 12
        a = s * min(lightness, 1 - lightness)
        return lightness - a * max(-1, min(k - 3, 9 - k, 1))

    return channel(0) * 255, channel(8) * 255, channel(4) * 255


def parse_color(value: Any) -> RGBA:
    """
    Parse a CSS color value.

    Args:
        value: Hex (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb()/rgba(),
            hsl()/hsla(), a named color or ``transparent``.

    Returns:
        Parsed RGBA color.

    Raises:
        MalformedColorError: If the value is not a color this parser knows.
    """
    text = str(value).strip()
    lowered = text.lower()

    if lowered == "transparent":
        return RGBA(0, 0, 0, 0.0)
    if lowered in NAMED_COLORS:
        return _parse_hex(NAMED_COLORS[lowered][1:])

    match = _HEX.match(text)
    if match:
        return _parse_hex(match.group(1))

    match = _FUNCTION.match(text)
    if match:
        kind = match.group(1).lower()
        try:
            parts, alpha_token = _split_arguments(match.group(2))
            if len(parts) != 3:
                raise ValueError(f"expected 3 channels, got {len(parts)}")
            alpha = _number(alpha_token) if alpha_token is not None else 1.0
            if kind.startswith("rgb"):
                r, g, b = (_number(p, 255) for p in parts)
            else:
                r, g, b = _hsl_to_rgb(_hue(parts[0]), _number(parts[1], 1), _number(parts[2], 1))
        except ValueError as e:
            raise MalformedColorError(f"Cannot parse color {text!r}: {e}") from e
        return RGBA(
            max(0.0, min(255.0, r)),
            max(0.0, min(255.0, g)),
            max(0.0, min(255.0, b)),
            max(0.0, min(1.0, alpha)),
        )

    raise MalformedColorError(f"Cannot parse color {text!r}")


def with_opacity(value: Any, opacity: int) -> str:
    """
    Blend a color to ``opacity`` percent.

    Falls back to ``color-mix(in srgb, <value> <opacity>%, transparent)`` when
    the value cannot be parsed, logging a warning instead of failing.
    """
    try:
        return parse_color(value).with_alpha(opacity / 100).to_css()
    except MalformedColorError as e:
        logger.warning("%s; using color-mix fallback", e.message)
        return f"color-mix(in srgb, {value} {opacity}%, transparent)"


def generate_color_variants(colors: Mapping[str, Any], base: str) -> dict[str, str]:
    """
    Expand a shade table into solid and opacity utility entries.

    For every shade this yields ``<base>-<shade>`` holding the stored value and
    nine ``<base>-<shade>/<opacity>`` entries at 10%..90%. A malformed shade
    only affects its own opacity entries.

    Args:
        colors: Shade -> color value (e.g. ``{"500": "#2196f3"}``)
        base: Utility name prefix (e.g. ``"text-primary"``)

    Returns:
        Ordered utility table
    """
    variants: dict[str, str] = {}
    for shade, value in colors.items():
        variants[f"{base}-{shade}"] = str(value)
        for opacity in OPACITY_STEPS:
            variants[f"{base}-{shade}/{opacity}"] = with_opacity(value, opacity)
    return variants
