"""
Stylesheet generation entry point.

Runs every utility category in order against resolved options, then the
configured plugins, and returns the resulting stylesheet.

Usage:
    from delvforge.generator import generate, generate_css

    sheet = generate({"prefix": {"className": "x-"}})
    css = generate_css(minify=True)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from delvforge.core.config_loader import build_options
from delvforge.core.options import Options
from delvforge.engine import Stylesheet
from delvforge.themes import resolve_theme_inheritance
from delvforge.utilities import CATEGORIES

logger = logging.getLogger(__name__)


def prepare_options(config: Options | Mapping[str, Any] | None = None, **overrides: Any) -> Options:
    """Validate ``config`` and merge global tokens into every theme."""
    return resolve_theme_inheritance(build_options(config, **overrides))


def run_plugins(sheet: Stylesheet, options: Options) -> None:
    """Call each plugin with ``(stylesheet, options, plugin_options)`` in declaration order."""
    for fn, plugin_options in options.plugins:
        name = getattr(fn, "__name__", repr(fn))
        before = len(sheet)
        fn(sheet, options, plugin_options)
        logger.debug("Plugin %s added %d node(s)", name, len(sheet) - before)


def generate_with_stats(
    config: Options | Mapping[str, Any] | None = None, **overrides: Any
) -> tuple[Stylesheet, dict[str, int]]:
    """
    Generate the full utility stylesheet, counting rules per category.

    Args:
        config: Options, a config mapping, or None for defaults
        **overrides: Top-level option overrides

    Returns:
        The stylesheet (every category's rules followed by plugin output) and
        the number of style rules each category and the plugins added

    Raises:
        ConfigurationError: If the configuration does not validate
    """
    options = prepare_options(config, **overrides)
    sheet = Stylesheet()
    counts: dict[str, int] = {}
    total = 0

    for name, category in CATEGORIES:
        category(sheet, options)
        counts[name] = sheet.rule_count() - total
        total += counts[name]
        logger.debug("Category %s: %d rule(s)", name, counts[name])

    run_plugins(sheet, options)
    counts["plugins"] = sheet.rule_count() - total
    logger.info(
        "Generated %d rule(s) with prefix %r",
        sheet.rule_count(),
        options.class_prefix,
    )
    return sheet, counts


def generate(config: Options | Mapping[str, Any] | None = None, **overrides: Any) -> Stylesheet:
    """Generate the full utility stylesheet (see ``generate_with_stats``)."""
    return generate_with_stats(config, **overrides)[0]


def generate_css(
    config: Options | Mapping[str, Any] | None = None,
    *,
    minify: bool = False,
    **overrides: Any,
) -> str:
    """Generate the stylesheet and serialize it to CSS text."""
    return generate(config, **overrides).to_css(minify=minify)
