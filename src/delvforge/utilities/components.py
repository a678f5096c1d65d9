"""
Component classes.

Two sources feed this category:

- built-in component declaration sets (cards, buttons, forms, navigation,
  badges), expanded with responsive, state and theme variants
- configured ``components``, composed into utility class lists and resolved
  against the utility rules already generated
"""

from __future__ import annotations

import logging

from delvforge.core.options import Options
from delvforge.engine import Declarations, Stylesheet, StyleRule, expand
from delvforge.engine.expander import PSEUDO_STATES, RESPONSIVE_STATES, THEMED
from delvforge.engine.selectors import SelectorBuilder
from delvforge.themes import ThemeResolver
from delvforge.tokens import compose_component_classes, parse_declarations

logger = logging.getLogger(__name__)

# Variable references use the default ``df-`` variable prefix and are
# rewritten to the configured one at generation time.
_DEFAULT_VARIABLE = "var(--df-"

CARDS = {
    "card": (
        "background-color: var(--df-surface-section); border: 1px solid var(--df-surface-border); "
        "border-radius: var(--df-border-radius); padding: 1rem; box-shadow: var(--df-shadow-sm)"
    ),
    "card-flat": (
        "background-color: var(--df-surface-section); border: 1px solid var(--df-surface-border); "
        "border-radius: var(--df-border-radius); padding: 1rem"
    ),
    "card-elevated": (
        "background-color: var(--df-surface-section); border-radius: var(--df-border-radius); "
        "padding: 1rem; box-shadow: var(--df-shadow-lg)"
    ),
    "card-outlined": (
        "background-color: var(--df-surface-section); border: 2px solid var(--df-primary-500); "
        "border-radius: var(--df-border-radius); padding: 1rem"
    ),
    "card-header": "padding: 1rem 1rem 0.5rem; border-bottom: 1px solid var(--df-surface-border)",
    "card-body": "padding: 1rem",
    "card-footer": "padding: 0.5rem 1rem 1rem; border-top: 1px solid var(--df-surface-border)",
    "card-sm": "padding: 0.75rem",
    "card-lg": "padding: 1.5rem",
    "card-xl": "padding: 2rem",
}

BUTTONS = {
    "btn": (
        "display: inline-flex; align-items: center; justify-content: center; "
        "border-radius: var(--df-border-radius); font-weight: 500; transition: all 150ms ease; "
        "cursor: pointer; text-decoration: none; border: 1px solid transparent; "
        "font-size: 0.875rem; padding: 0.5rem 1rem; line-height: 1.25rem"
    ),
    "btn-primary": (
        "background-color: var(--df-primary-500); color: var(--df-primary-invert); "
        "border-color: var(--df-primary-500)"
    ),
    "btn-secondary": (
        "background-color: var(--df-surface-100); color: var(--df-text-primary); "
        "border-color: var(--df-surface-300)"
    ),
    "btn-success": (
        "background-color: var(--df-success-500); color: white; border-color: var(--df-success-500)"
    ),
    "btn-warning": (
        "background-color: var(--df-warning-500); color: white; border-color: var(--df-warning-500)"
    ),
    "btn-danger": (
        "background-color: var(--df-danger-500); color: white; border-color: var(--df-danger-500)"
    ),
    "btn-outline": (
        "background-color: transparent; color: var(--df-primary-500); "
        "border-color: var(--df-primary-500)"
    ),
    "btn-ghost": (
        "background-color: transparent; color: var(--df-text-primary); border-color: transparent"
    ),
    "btn-xs": "padding: 0.25rem 0.5rem; font-size: 0.75rem; line-height: 1rem",
    "btn-sm": "padding: 0.375rem 0.75rem; font-size: 0.8125rem; line-height: 1.125rem",
    "btn-lg": "padding: 0.75rem 1.5rem; font-size: 1rem; line-height: 1.5rem",
    "btn-xl": "padding: 1rem 2rem; font-size: 1.125rem; line-height: 1.75rem",
    "btn-loading": "position: relative; color: transparent",
    "btn-disabled": "opacity: 0.5; cursor: not-allowed; pointer-events: none",
}

FORMS = {
    "form-group": "display: flex; flex-direction: column; gap: 0.5rem; margin-bottom: 1rem",
    "form-row": "display: flex; gap: 1rem; align-items: end",
    "form-control": (
        "display: block; width: 100%; padding: 0.5rem 0.75rem; font-size: 0.875rem; "
        "line-height: 1.5; background-color: var(--df-surface-section); "
        "border: 1px solid var(--df-surface-border); border-radius: var(--df-border-radius); "
        "transition: border-color 150ms ease, box-shadow 150ms ease"
    ),
    "form-select": (
        "display: block; width: 100%; padding: 0.5rem 2rem 0.5rem 0.75rem; font-size: 0.875rem; "
        "line-height: 1.5; background-color: var(--df-surface-section); "
        "border: 1px solid var(--df-surface-border); border-radius: var(--df-border-radius); "
        "background-image: url(\"data:image/svg+xml,%3csvg xmlns='http://www.w3.org/2000/svg' "
        "viewBox='0 0 16 16'%3e%3cpath fill='none' stroke='%23343a40' stroke-linecap='round' "
        "stroke-linejoin='round' stroke-width='2' d='M2 5l6 6 6-6'/%3e%3c/svg%3e\"); "
        "background-repeat: no-repeat; background-position: right 0.75rem center; "
        "background-size: 16px 12px"
    ),
    "form-label": (
        "display: block; font-weight: 500; margin-bottom: 0.5rem; color: var(--df-text-primary)"
    ),
    "form-help": "font-size: 0.75rem; color: var(--df-text-secondary); margin-top: 0.25rem",
    "form-error": "font-size: 0.75rem; color: var(--df-danger-500); margin-top: 0.25rem",
    "form-valid": "border-color: var(--df-success-500)",
    "form-invalid": "border-color: var(--df-danger-500)",
    "form-check": "display: flex; align-items: center; gap: 0.5rem",
    "form-check-input": (
        "width: 1rem; height: 1rem; border: 1px solid var(--df-surface-border); "
        "border-radius: 0.25rem"
    ),
}

NAVIGATION = {
    "navbar": (
        "display: flex; align-items: center; justify-content: space-between; padding: 1rem; "
        "background-color: var(--df-surface-section); "
        "border-bottom: 1px solid var(--df-surface-border)"
    ),
    "navbar-brand": (
        "font-size: 1.25rem; font-weight: 600; text-decoration: none; "
        "color: var(--df-text-primary)"
    ),
    "navbar-nav": "display: flex; gap: 1rem; list-style: none; margin: 0; padding: 0",
    "navbar-item": "color: var(--df-text-secondary); text-decoration: none; padding: 0.5rem",
    "navbar-active": "color: var(--df-primary-500); font-weight: 500",
    "breadcrumb": (
        "display: flex; align-items: center; gap: 0.5rem; list-style: none; margin: 0; padding: 0"
    ),
    "breadcrumb-item": "color: var(--df-text-secondary)",
    "breadcrumb-separator": "color: var(--df-text-secondary); user-select: none",
    "tabs": "display: flex; border-bottom: 1px solid var(--df-surface-border)",
    "tab": (
        "padding: 0.75rem 1rem; cursor: pointer; border-bottom: 2px solid transparent; "
        "transition: all 150ms ease"
    ),
    "tab-active": (
        "border-bottom-color: var(--df-primary-500); color: var(--df-primary-500); "
        "font-weight: 500"
    ),
}

BADGES = {
    "badge": (
        "display: inline-flex; align-items: center; padding: 0.25rem 0.5rem; font-size: 0.75rem; "
        "font-weight: 500; border-radius: 9999px; line-height: 1"
    ),
    "badge-primary": "background-color: var(--df-primary-500); color: var(--df-primary-invert)",
    "badge-secondary": "background-color: var(--df-surface-200); color: var(--df-text-primary)",
    "badge-success": "background-color: var(--df-success-500); color: white",
    "badge-warning": "background-color: var(--df-warning-500); color: white",
    "badge-danger": "background-color: var(--df-danger-500); color: white",
    "badge-outline": (
        "background-color: transparent; border: 1px solid var(--df-primary-500); "
        "color: var(--df-primary-500)"
    ),
    "badge-sm": "padding: 0.125rem 0.375rem; font-size: 0.6875rem",
    "badge-lg": "padding: 0.375rem 0.75rem; font-size: 0.875rem",
    "chip": (
        "display: inline-flex; align-items: center; gap: 0.25rem; padding: 0.375rem 0.75rem; "
        "font-size: 0.875rem; background-color: var(--df-surface-100); border-radius: 9999px"
    ),
    "chip-remove": "cursor: pointer; opacity: 0.7; transition: opacity 150ms ease",
}

BUILTIN_COMPONENTS: dict[str, str] = {**CARDS, **BUTTONS, **FORMS, **NAVIGATION, **BADGES}


def builtin_table(options: Options) -> dict[str, Declarations]:
    """Built-in components as explicit declarations, using the configured variable prefix."""
    variable = f"var(--{options.variable_prefix}"
    return {
        name: Declarations.of(parse_declarations(text.replace(_DEFAULT_VARIABLE, variable)))
        for name, text in BUILTIN_COMPONENTS.items()
    }


def variant_prefixes(options: Options) -> tuple[str, ...]:
    """Variant tokens (state, breakpoint, container, theme) joined to the separator."""
    variants = [
        *PSEUDO_STATES,
        *options.breakpoints,
        *(f"@{name}" for name in options.containers),
        *(name for name in ThemeResolver.from_options(options).variant_names if name),
    ]
    return tuple(f"{variant}{options.separator}" for variant in variants)


def _rule_index(sheet: Stylesheet) -> dict[str, StyleRule]:
    """Top-level rules by selector; the last rule for a selector wins."""
    return {node.selector: node for node in sheet if isinstance(node, StyleRule)}


def resolve_component(
    name: str,
    classes: str,
    index: dict[str, StyleRule],
    options: Options,
) -> dict[str, str]:
    """
    Merge the declarations of every plain utility in ``classes``.

    Variant-prefixed utilities (``hover:bg-primary-600``) and utilities that
    were not generated are skipped.
    """
    builder = SelectorBuilder(options.class_prefix, options.separator)
    variants = variant_prefixes(options)
    declarations: dict[str, str] = {}
    for token in classes.split():
        if token.startswith(variants):
            logger.debug("Component %r: variant utility %r is not inlined", name, token)
            continue
        rule = index.get(builder.selector(token))
        if rule is None:
            logger.debug("Component %r: utility %r was not generated", name, token)
            continue
        for declaration in rule.declarations:
            declarations[declaration.prop] = declaration.value
    return declarations


def configured_table(sheet: Stylesheet, options: Options) -> dict[str, Declarations]:
    index = _rule_index(sheet)
    table: dict[str, Declarations] = {}
    for name, classes in compose_component_classes(options.components).items():
        if name in BUILTIN_COMPONENTS:
            logger.debug("Component %r is provided by the built-in set", name)
            continue
        declarations = resolve_component(name, classes, index, options)
        if not declarations:
            logger.debug("Component %r resolved to no declarations; skipped", name)
            continue
        table[name] = Declarations.of(declarations)
    return table


def generate(sheet: Stylesheet, options: Options) -> None:
    # Resolve configured components before the built-ins land in the sheet
    configured = configured_table(sheet, options)
    expand([], configured, options, RESPONSIVE_STATES, output=sheet)
    expand([], builtin_table(options), options, THEMED, output=sheet)
