"""
Configuration types for DelvForge.

``Options`` is built once per generation pass and is read-only for the whole
pass. The only derived copy made during a pass is the one produced by the
theme-inheritance merge (see ``delvforge.themes.resolver``), which happens
before any rule is emitted.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import (
    DEFAULT_ANIMATIONS,
    DEFAULT_BREAKPOINTS,
    DEFAULT_COLORS,
    DEFAULT_COMPONENTS,
    DEFAULT_CONTAINERS,
    DEFAULT_FEATURES,
    DEFAULT_FONT_SIZE,
    DEFAULT_GRID,
    DEFAULT_PREFIX,
    DEFAULT_SEPARATOR,
    DEFAULT_SPACING,
    DEFAULT_THEMES,
)
from .units import to_rem

# (stylesheet, options, plugin_options) -> None
PluginFn = Callable[..., Any]


def _string_keys(value: Any) -> Any:
    """Recursively turn mapping keys into strings (YAML gives ``50:`` an int key)."""
    if isinstance(value, Mapping):
        return {str(k): _string_keys(v) for k, v in value.items()}
    return value


# =============================================================================
# Small sections
# =============================================================================


class PrefixSpec(BaseModel):
    """Prefixes for generated class names and CSS custom properties."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_name: str = Field(
        default=DEFAULT_PREFIX, alias="className", description="Class-name prefix"
    )
    css_variable: str = Field(
        default=DEFAULT_PREFIX, alias="cssVariable", description="Custom property prefix"
    )


class FeatureFlags(BaseModel):
    """Named boolean feature flags."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    container_queries: bool = Field(
        default=DEFAULT_FEATURES["containerQueries"], alias="containerQueries"
    )
    custom_properties: bool = Field(
        default=DEFAULT_FEATURES["customProperties"], alias="customProperties"
    )
    modern_selectors: bool = Field(
        default=DEFAULT_FEATURES["modernSelectors"], alias="modernSelectors"
    )
    advanced_grid: bool = Field(default=DEFAULT_FEATURES["advancedGrid"], alias="advancedGrid")
    fluid_typography: bool = Field(
        default=DEFAULT_FEATURES["fluidTypography"], alias="fluidTypography"
    )
    logical_properties: bool = Field(
        default=DEFAULT_FEATURES["logicalProperties"], alias="logicalProperties"
    )

    def enabled(self, name: str) -> bool:
        """Look up a flag by its config (camelCase) or attribute (snake_case) name."""
        for field_name, info in type(self).model_fields.items():
            if name in (field_name, info.alias):
                return bool(getattr(self, field_name))
        return False


class GridSpec(BaseModel):
    """Grid system settings."""

    model_config = ConfigDict(frozen=True)

    columns: int = Field(default=24, ge=1, description="Number of grid columns")
    gap: str = Field(default="0.5rem", description="Default grid gap")
    gutters: dict[str, str] = Field(default_factory=dict, description="Named gutters")


class ComponentSpec(BaseModel):
    """
    A configured component: a base utility list plus named variants and sizes.

    Example:
        ComponentSpec(
            base="inline-flex rounded-md",
            variants={"outline": "border border-primary-500"},
            sizes={"sm": "h-9 px-3"},
        )
    """

    model_config = ConfigDict(frozen=True)

    base: str = Field(default="", description="Utility classes every variant starts with")
    variants: dict[str, str] = Field(default_factory=dict)
    sizes: dict[str, str] = Field(default_factory=dict)


class ThemeSpec(BaseModel):
    """
    A named theme.

    At most one theme should be marked ``default``; when none is, the first
    declared theme is the default. The default theme's rules are unscoped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str | None = Field(default=None, description="Variant name (falls back to key)")
    default: bool = Field(default=False, description="Whether this is the default theme")
    color_scheme: str | None = Field(default=None, alias="colorScheme")
    colors: dict[str, Any] = Field(default_factory=dict, description="Nested color tokens")
    components: dict[str, ComponentSpec] = Field(default_factory=dict)
    border_radius: str | None = Field(default=None, alias="borderRadius")

    @field_validator("colors", mode="before")
    @classmethod
    def _normalize_colors(cls, value: Any) -> Any:
        return _string_keys(value or {})


# =============================================================================
# Options
# =============================================================================


class Options(BaseModel):
    """
    Process-wide generation options.

    Example:
        Options(
            prefix=PrefixSpec(class_name="df-"),
            breakpoints={"sm": "640px", "md": "768px"},
            themes={"light": ThemeSpec(default=True), "dark": ThemeSpec()},
        )
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    important: bool = Field(default=False, description="Mark every declaration !important")
    inherit_themes: bool = Field(
        default=True,
        alias="inheritThemes",
        description="Merge global colors/components into each theme before generation",
    )
    prefix: PrefixSpec = Field(default_factory=PrefixSpec)
    separator: str = Field(
        default=DEFAULT_SEPARATOR, description="Token between variant name and utility name"
    )
    breakpoints: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    containers: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_CONTAINERS))
    grid: GridSpec = Field(default_factory=lambda: GridSpec(**copy.deepcopy(DEFAULT_GRID)))
    spacing: dict[str, int | float | str] = Field(
        default_factory=lambda: dict(DEFAULT_SPACING)
    )
    font_size: dict[str, Any] = Field(
        default_factory=lambda: copy.deepcopy(DEFAULT_FONT_SIZE), alias="fontSize"
    )
    colors: dict[str, Any] = Field(default_factory=lambda: copy.deepcopy(DEFAULT_COLORS))
    themes: dict[str, ThemeSpec] = Field(
        default_factory=lambda: {
            key: ThemeSpec.model_validate(value) for key, value in DEFAULT_THEMES.items()
        }
    )
    components: dict[str, ComponentSpec] = Field(
        default_factory=lambda: {
            key: ComponentSpec.model_validate(value) for key, value in DEFAULT_COMPONENTS.items()
        }
    )
    animations: dict[str, Any] = Field(default_factory=lambda: copy.deepcopy(DEFAULT_ANIMATIONS))
    features: FeatureFlags = Field(default_factory=FeatureFlags)
    plugins: list[tuple[Any, dict[str, Any]]] = Field(
        default_factory=list, description="(fn, plugin_options) pairs run after all categories"
    )

    @field_validator("separator", mode="before")
    @classmethod
    def _unescape_separator(cls, value: Any) -> Any:
        # "\\:" is accepted for configs written for pre-escaped separators
        if isinstance(value, str):
            value = value.replace("\\", "")
            if not value:
                raise ValueError("separator must not be empty")
        return value

    @field_validator("breakpoints", "containers", mode="before")
    @classmethod
    def _normalize_widths(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(k): str(v) for k, v in value.items()}
        return value

    @field_validator("spacing", "colors", "font_size", mode="before")
    @classmethod
    def _normalize_tokens(cls, value: Any) -> Any:
        return _string_keys(value or {})

    @field_validator("plugins", mode="before")
    @classmethod
    def _normalize_plugins(cls, value: Any) -> Any:
        plugins: list[tuple[Any, dict[str, Any]]] = []
        for entry in value or []:
            if callable(entry):
                plugins.append((entry, {}))
            elif isinstance(entry, list | tuple) and entry:
                plugin_options = entry[1] if len(entry) > 1 else None
                plugins.append((entry[0], dict(plugin_options or {})))
            else:
                raise ValueError(f"Invalid plugin entry: {entry!r}")
        return plugins

    # -------------------------------------------------------------------------
    # Read-only lookups
    # -------------------------------------------------------------------------

    @property
    def class_prefix(self) -> str:
        return self.prefix.class_name

    @property
    def variable_prefix(self) -> str:
        return self.prefix.css_variable

    def feature(self, name: str) -> bool:
        """Return whether a feature flag is enabled."""
        return self.features.enabled(name)

    def spacing_value(self, key: str | int | float) -> str | None:
        """Return the CSS value of a spacing token, bare numbers as rem."""
        raw = self.spacing.get(str(key))
        if raw is None:
            return None
        return to_rem(raw)

    def color(self, name: str, shade: str | int | None = None) -> str | None:
        """Return a global color token, or None if it is not declared."""
        value = self.colors.get(name)
        if isinstance(value, Mapping):
            if shade is None:
                return value.get("DEFAULT")
            return value.get(str(shade))
        if shade is not None:
            return None
        return value

    def font_size_value(self, key: str) -> str | None:
        """Return the font-size of a typography token (first element of a pair)."""
        value = self.font_size.get(key)
        if isinstance(value, list | tuple):
            return str(value[0]) if value else None
        return None if value is None else str(value)

    def with_breakpoints(self, breakpoints: Mapping[str, str]) -> Options:
        """Return a copy with a replaced breakpoint table; self is untouched."""
        return self.model_copy(update={"breakpoints": {str(k): str(v) for k, v in breakpoints.items()}})
