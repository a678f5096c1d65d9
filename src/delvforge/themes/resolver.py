"""
Theme resolver for DelvForge.

Resolves the ordered list of theme variant names rules are generated for:

1. The default theme (first one marked ``default``, else the first declared)
   contributes ``""`` and its rules are unscoped
2. Every other theme contributes its ``name`` (falling back to its key)

Also owns the one-time inheritance merge: global colors/components are copied
into every theme and the theme's own tokens override them, so later lookups
never need to consult two tables.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from typing import Any

from delvforge.core.options import Options, ThemeSpec

logger = logging.getLogger(__name__)


class ThemeResolver:
    """Ordered theme variants for one set of themes."""

    def __init__(self, themes: Mapping[str, ThemeSpec]):
        self.themes: dict[str, ThemeSpec] = dict(themes)
        keys = list(self.themes)

        defaults = [key for key in keys if self.themes[key].default]
        if len(defaults) > 1:
            logger.warning(
                "Themes %s are all marked default; using %r", ", ".join(defaults), defaults[0]
            )
        self.default_key: str | None = defaults[0] if defaults else (keys[0] if keys else None)

        self.variant_names: list[str] = [
            "" if key == self.default_key else (self.themes[key].name or key) for key in keys
        ]

    @classmethod
    def from_options(cls, options: Options) -> ThemeResolver:
        return cls(options.themes)

    def resolve_variants(self) -> list[str]:
        """Variant names in declaration order; ``[""]`` when no theme is declared."""
        return list(self.variant_names) or [""]

    def for_each(self, fn: Callable[[str], Any]) -> None:
        """Call ``fn`` once per declared theme variant."""
        for name in self.variant_names:
            fn(name)

    def always(self, fn: Callable[[str], Any]) -> None:
        """Like ``for_each`` but calls ``fn("")`` once when no theme is declared."""
        if self.variant_names:
            self.for_each(fn)
        else:
            fn("")

    def find(self, name: str) -> ThemeSpec | None:
        """Look up a theme by key, then by its ``name`` field."""
        theme = self.themes.get(name)
        if theme is not None:
            return theme
        for candidate in self.themes.values():
            if candidate.name == name:
                return candidate
        return None

    def with_theme(self, name: str, fn: Callable[[ThemeSpec], Any]) -> None:
        """Call ``fn(theme)`` if the theme exists; otherwise do nothing."""
        theme = self.find(name)
        if theme is not None:
            fn(theme)

    def theme_for_variant(self, variant_name: str) -> ThemeSpec | None:
        """The theme a variant name was produced from (``""`` is the default theme)."""
        if not variant_name:
            return self.themes.get(self.default_key) if self.default_key else None
        return self.find(variant_name)

    def entries(self) -> list[tuple[str, str, ThemeSpec]]:
        """``(key, variant_name, theme)`` triples in declaration order."""
        return [
            (key, variant, theme)
            for (key, theme), variant in zip(self.themes.items(), self.variant_names, strict=True)
        ]


def resolve_theme_inheritance(options: Options) -> Options:
    """
    Merge global colors/components into every theme.

    Each theme's own ``colors`` and ``components`` are shallow-merged on top of
    copies of the global tables. Returns a new Options; the input is untouched.
    Applying it to already-merged options yields the same result.
    """
    if not options.inherit_themes or not options.themes:
        return options

    merged: dict[str, ThemeSpec] = {}
    for key, theme in options.themes.items():
        colors = {**copy.deepcopy(options.colors), **theme.colors}
        components = {**options.components, **theme.components}
        merged[key] = theme.model_copy(update={"colors": colors, "components": components})

    logger.debug("Merged global tokens into %d theme(s)", len(merged))
    return options.model_copy(update={"themes": merged})


def theme_color(
    options: Options,
    variant_name: str,
    name: str,
    shade: str | None = None,
) -> str | None:
    """
    Color for a theme variant, falling back to the global color table.

    A theme that references a color nobody declares is a configuration defect:
    it is logged and None is returned, never raised.
    """
    theme = ThemeResolver.from_options(options).theme_for_variant(variant_name)
    tables: list[Mapping[str, Any]] = []
    if theme is not None:
        tables.append(theme.colors)
    tables.append(options.colors)

    for table in tables:
        value = table.get(name)
        if isinstance(value, Mapping):
            if shade is not None and shade in value:
                return str(value[shade])
        elif value is not None and shade is None:
            return str(value)

    logger.warning(
        "Color %r%s is not defined for theme %r",
        name,
        f" shade {shade!r}" if shade is not None else "",
        variant_name or "default",
    )
    return None
