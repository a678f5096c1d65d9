"""
DelvForge rule generation engine.

Usage:
    from delvforge.engine import AxisConfig, expand

    sheet = expand("color", {"red": "#ff0000"}, options, AxisConfig(states=True))
    sheet.to_css()
"""

from .expander import PSEUDO_STATES, AxisConfig, UtilityTable, expand
from .rules import AtRule, Declaration, Stylesheet, StyleRule
from .selectors import SelectorBuilder, escape_identifier
from .values import Computed, Declarations, Literal, as_value, resolve_value

__all__ = [
    # Expansion
    "AxisConfig",
    "PSEUDO_STATES",
    "UtilityTable",
    "expand",
    # Output
    "AtRule",
    "Declaration",
    "StyleRule",
    "Stylesheet",
    # Naming
    "SelectorBuilder",
    "escape_identifier",
    # Values
    "Computed",
    "Declarations",
    "Literal",
    "as_value",
    "resolve_value",
]
