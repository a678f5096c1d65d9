"""
Token-table generators for utility categories.

Builds utility tables from token scales: spacing directions (physical or
logical properties), fluid typography, configured component class lists and
multi-declaration strings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from delvforge.core.options import ComponentSpec, Options
from delvforge.core.units import format_number, negate, parse_float, to_rem, unit_of

# =============================================================================
# Spacing
# =============================================================================


def spacing_directions(prop: str, logical: bool) -> dict[str, tuple[str, ...]]:
    """Direction suffix -> target properties for ``margin`` / ``padding``."""
    if logical:
        return {
            "": (prop,),
            "t": (f"{prop}-block-start",),
            "r": (f"{prop}-inline-end",),
            "b": (f"{prop}-block-end",),
            "l": (f"{prop}-inline-start",),
            "x": (f"{prop}-inline",),
            "y": (f"{prop}-block",),
        }
    return {
        "": (prop,),
        "t": (f"{prop}-top",),
        "r": (f"{prop}-right",),
        "b": (f"{prop}-bottom",),
        "l": (f"{prop}-left",),
        "x": (f"{prop}-left", f"{prop}-right"),
        "y": (f"{prop}-top", f"{prop}-bottom"),
    }


def generate_spacing_utilities(
    scale: Mapping[str, Any],
    prop: str,
    options: Options,
    *,
    negative: bool = False,
) -> list[tuple[tuple[str, ...], dict[str, str]]]:
    """
    Build one utility table per spacing direction.

    ``generate_spacing_utilities(spacing, "margin", options)`` yields tables
    such as ``{"m-4": "1rem"}`` for ``margin`` and ``{"mx-4": "1rem"}`` for
    ``margin-inline`` (or ``margin-left`` + ``margin-right`` without logical
    properties).

    Args:
        scale: Spacing token table (bare numbers are rem)
        prop: ``"margin"`` or ``"padding"``
        options: Generation options (``logicalProperties`` feature)
        negative: Also emit ``-m-4`` style negative entries (zero excluded)

    Returns:
        ``(properties, table)`` pairs in direction order
    """
    abbreviation = prop[0]
    directions = spacing_directions(prop, options.feature("logicalProperties"))

    groups: list[tuple[tuple[str, ...], dict[str, str]]] = []
    for direction, properties in directions.items():
        table: dict[str, str] = {}
        for key, value in scale.items():
            table[f"{abbreviation}{direction}-{key}"] = to_rem(value)
        if negative:
            for key, value in scale.items():
                if parse_float(value) == 0:
                    continue
                table[f"-{abbreviation}{direction}-{key}"] = negate(value)
        groups.append((properties, table))
    return groups


# =============================================================================
# Typography
# =============================================================================


def _fmt(value: float) -> str:
    return format_number(round(value, 4))


def generate_fluid_typography(
    min_size: str,
    max_size: str,
    min_viewport: str = "20rem",
    max_viewport: str = "80rem",
) -> str:
    """
    A ``clamp()`` that scales linearly from ``min_size`` at ``min_viewport``
    to ``max_size`` at ``max_viewport``.
    """
    lo, hi = parse_float(min_size), parse_float(max_size)
    vlo, vhi = parse_float(min_viewport), parse_float(max_viewport)
    if lo is None or hi is None or vlo is None or vhi is None or vhi == vlo:
        return f"clamp({min_size}, {min_size}, {max_size})"
    return (
        f"clamp({min_size}, {min_size} + ({_fmt(hi - lo)}) * "
        f"((100vw - {min_viewport}) / ({_fmt(vhi - vlo)})), {max_size})"
    )


def scale_length(value: str, factor: float) -> str:
    """Multiply a CSS length keeping its unit (``"0.75rem"`` * 1.5 -> ``"1.125rem"``)."""
    number = parse_float(value)
    if number is None:
        return f"calc({value} * {_fmt(factor)})"
    return f"{_fmt(number * factor)}{unit_of(str(value))}"


# =============================================================================
# Components
# =============================================================================


def _join(*parts: str) -> str:
    return " ".join(part.strip() for part in parts if part and part.strip())


def compose_component_classes(
    components: Mapping[str, ComponentSpec | Mapping[str, Any]],
) -> dict[str, str]:
    """
    Compose configured components into utility class lists.

    For each component this yields ``name``, ``name-<variant>``,
    ``name-<size>`` and ``name-<size>-<variant>``, each the base list followed
    by the size and variant lists.
    """
    composed: dict[str, str] = {}
    for name, raw in components.items():
        spec = raw if isinstance(raw, ComponentSpec) else ComponentSpec.model_validate(raw)
        composed[name] = _join(spec.base)
        for variant, classes in spec.variants.items():
            composed[f"{name}-{variant}"] = _join(spec.base, classes)
        for size, size_classes in spec.sizes.items():
            composed[f"{name}-{size}"] = _join(spec.base, size_classes)
            for variant, classes in spec.variants.items():
                composed[f"{name}-{size}-{variant}"] = _join(spec.base, size_classes, classes)
    return composed


def class_name(utilities: str, options: Options) -> str:
    """Prefix every utility in a space-separated list (``"p-4 md:flex"`` -> ``"df-p-4 df-md:flex"``)."""
    prefix = options.class_prefix
    return " ".join(f"{prefix}{token}" for token in utilities.split())


# =============================================================================
# Declaration strings
# =============================================================================


def _split_top_level(text: str, separator: str) -> list[str]:
    """Split on ``separator`` outside parentheses and quotes."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []
    for ch in text:
        if quote:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return parts


def parse_declarations(text: str) -> dict[str, str]:
    """
    Parse ``"a: b; c: d"`` into an ordered ``{"a": "b", "c": "d"}``.

    Each declaration is split on its first ``:`` only, so values such as
    ``url("data:...")`` survive. Empty or malformed pieces are skipped.
    """
    declarations: dict[str, str] = {}
    for piece in _split_top_level(text, ";"):
        prop, sep, value = piece.partition(":")
        prop, value = prop.strip(), " ".join(value.split())
        if sep and prop and value:
            declarations[prop] = value
    return declarations
