"""
DelvForge - utility-first CSS generator.

Expands declarative utility tables into responsive, stateful and
theme-scoped style rules.

Usage:
    from delvforge import generate_css

    css = generate_css({"prefix": {"className": "x-"}}, minify=True)
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import BuildError, ConfigurationError, DelvForgeError, MalformedColorError
from .core.options import Options
from .engine import AxisConfig, Stylesheet, expand
from .generator import generate, generate_css
from .tokens import class_name

__version__ = get_version()

__all__ = [
    "__version__",
    "Options",
    "AxisConfig",
    "Stylesheet",
    "expand",
    "generate",
    "generate_css",
    "class_name",
    "DelvForgeError",
    "ConfigurationError",
    "MalformedColorError",
    "BuildError",
]
