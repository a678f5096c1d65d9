"""Core DelvForge functionality: options, defaults, units, config loading, errors."""

from .config_loader import build_options, load_options, resolve_plugin
from .errors import BuildError, ConfigurationError, DelvForgeError, MalformedColorError
from .options import ComponentSpec, FeatureFlags, GridSpec, Options, PrefixSpec, ThemeSpec

__all__ = [
    "DelvForgeError",
    "ConfigurationError",
    "MalformedColorError",
    "BuildError",
    "Options",
    "PrefixSpec",
    "FeatureFlags",
    "GridSpec",
    "ComponentSpec",
    "ThemeSpec",
    "build_options",
    "load_options",
    "resolve_plugin",
]
