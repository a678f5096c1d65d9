"""Container widths, container-type utilities and the responsive ``container`` class."""

from __future__ import annotations

from delvforge.core.options import Options
from delvforge.engine import AtRule, Declaration, Declarations, Stylesheet, StyleRule, expand
from delvforge.engine.expander import RESPONSIVE, AxisConfig
from delvforge.engine.selectors import SelectorBuilder, media_params
from delvforge.themes import generate_custom_properties
from delvforge.tokens import parse_declarations

CONTAINER_VARIABLES = {
    "container-padding": "1rem",
    "container-padding-sm": "0.75rem",
    "container-padding-lg": "1.5rem",
}

FIXED_WIDTHS = {
    "container-prose": "65ch",
    "container-narrow": "36rem",
    "container-wide": "80rem",
    "container-full": "100vw",
}

SHAPED = {
    "container-square": "aspect-ratio: 1 / 1; width: 100%",
    "container-video": "aspect-ratio: 16 / 9; width: 100%",
    "container-portrait": "aspect-ratio: 3 / 4; width: 100%",
    "container-scroll": "overflow: auto; max-height: 100%",
    "container-scroll-x": "overflow-x: auto; overflow-y: hidden",
    "container-scroll-y": "overflow-y: auto; overflow-x: hidden",
    "container-safe": (
        "padding-top: env(safe-area-inset-top); padding-right: env(safe-area-inset-right); "
        "padding-bottom: env(safe-area-inset-bottom); padding-left: env(safe-area-inset-left)"
    ),
}


def container_type_table(options: Options) -> tuple[dict[str, str], dict[str, str]]:
    """``@container*`` tables: (container-type entries, named container entries)."""
    types = {
        "@container": "inline-size",
        "@container-normal": "normal",
        "@container-size": "size",
    }
    named = {f"@container-{name}": f"{name} / inline-size" for name in options.containers}
    return types, named


def responsive_container(options: Options) -> list[StyleRule | AtRule]:
    """The ``container`` class, capped per breakpoint that is also a container size."""
    builder = SelectorBuilder(options.class_prefix, options.separator)
    padding = f"var(--{options.variable_prefix}container-padding, 1rem)"
    container = builder.selector("container")
    nodes: list[StyleRule | AtRule] = [
        StyleRule(
            container,
            (
                Declaration("width", "100%"),
                Declaration("margin-inline", "auto"),
                Declaration("padding-inline", padding),
            ),
        ),
    ]
    for breakpoint, width in options.breakpoints.items():
        if breakpoint not in options.containers:
            continue
        rule = StyleRule(container, (Declaration("max-width", options.containers[breakpoint]),))
        nodes.append(AtRule("media", media_params(width), (rule,)))
    return nodes


def generate(sheet: Stylesheet, options: Options) -> None:
    if options.feature("containerQueries"):
        types, named = container_type_table(options)
        expand("container-type", types, options, AxisConfig(), output=sheet)
        expand("container", named, options, AxisConfig(), output=sheet)

    widths = {f"container-{size}": width for size, width in options.containers.items()}
    expand("width", {"container-fluid": "100%"}, options, RESPONSIVE, output=sheet)
    expand("max-width", {**widths, **FIXED_WIDTHS}, options, RESPONSIVE, output=sheet)
    shaped = {name: Declarations.of(parse_declarations(text)) for name, text in SHAPED.items()}
    expand([], shaped, options, RESPONSIVE, output=sheet)

    sheet.append(generate_custom_properties(CONTAINER_VARIABLES, options))
    sheet.extend(responsive_container(options))
