"""
DelvForge theme system.

Usage:
    from delvforge.themes import ThemeResolver, generate_theme_properties

    resolver = ThemeResolver.from_options(options)
    resolver.resolve_variants()  # ["", "dark"]

    rules = generate_theme_properties(options)
"""

from .css_generator import (
    flatten_tokens,
    generate_custom_properties,
    generate_theme_properties,
)
from .resolver import ThemeResolver, resolve_theme_inheritance, theme_color

__all__ = [
    # Resolution
    "ThemeResolver",
    "resolve_theme_inheritance",
    "theme_color",
    # Custom properties
    "flatten_tokens",
    "generate_custom_properties",
    "generate_theme_properties",
]
