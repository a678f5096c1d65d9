"""
CSS custom property generator for DelvForge.

Flattens (possibly nested) token trees into ``--<prefix>a-b-c: value``
declarations, scoped to ``:root`` for global and default-theme variables and
to ``[data-theme="<name>"]`` for every other theme.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from delvforge.core.options import Options
from delvforge.core.units import stringify
from delvforge.engine.rules import Declaration, StyleRule
from delvforge.engine.selectors import theme_root_selector

from .resolver import ThemeResolver


def flatten_tokens(tree: Mapping[str, Any], prefix: str = "") -> list[Declaration]:
    """
    Flatten a token tree depth-first into custom property declarations.

    A leaf at path ``[a, b, c]`` becomes ``--<prefix>a-b-c``. Leaves are
    stringified as-is; no unit is added here. Sequences are walked with their
    indexes as path segments. None leaves are skipped.

    Args:
        tree: Nested mapping of tokens
        prefix: Variable-name prefix (e.g. "df-")

    Returns:
        Declarations in depth-first order
    """
    declarations: list[Declaration] = []

    def walk(node: Any, path: list[str]) -> None:
        if isinstance(node, Mapping):
            items = [(str(k), v) for k, v in node.items()]
        elif isinstance(node, list | tuple):
            items = [(str(i), v) for i, v in enumerate(node)]
        else:
            if node is not None:
                declarations.append(Declaration(f"--{prefix}{'-'.join(path)}", stringify(node)))
            return
        for key, value in items:
            walk(value, [*path, key])

    walk(tree, [])
    return declarations


def generate_custom_properties(
    tree: Mapping[str, Any],
    options: Options,
    selector: str = ":root",
) -> StyleRule:
    """
    Generate one rule holding the flattened custom properties of ``tree``.

    Args:
        tree: Nested token mapping
        options: Generation options (provides the variable prefix)
        selector: Rule selector, ``:root`` by default

    Returns:
        StyleRule with one declaration per leaf
    """
    return StyleRule(selector, tuple(flatten_tokens(tree, options.variable_prefix)))


def generate_theme_properties(options: Options) -> list[StyleRule]:
    """
    Generate one custom property rule per theme that declares colors.

    The default theme's rule targets ``:root``; every other theme targets
    ``[data-theme="<variant name>"]``. ``borderRadius`` and ``colorScheme``
    are appended when the theme sets them.
    """
    rules: list[StyleRule] = []
    prefix = options.variable_prefix

    for _key, variant, theme in ThemeResolver.from_options(options).entries():
        if not theme.colors:
            continue
        declarations = flatten_tokens(theme.colors, prefix)
        if theme.border_radius:
            declarations.append(Declaration(f"--{prefix}border-radius", theme.border_radius))
        if theme.color_scheme:
            declarations.append(Declaration("color-scheme", theme.color_scheme))
        rules.append(StyleRule(theme_root_selector(variant), tuple(declarations)))

    return rules
