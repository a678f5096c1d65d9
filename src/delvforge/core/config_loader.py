"""
Options persistence layer for DelvForge.

Reads generation options from ``delvforge.yaml`` (or a ``.toml`` file) and
turns plain mappings into validated ``Options``. Plugins written in config
files are referenced as ``"package.module:function"`` strings.

Default location: {project_root}/delvforge.yaml
"""

from __future__ import annotations

import importlib
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ConfigurationError
from .options import Options

logger = logging.getLogger(__name__)

CONFIG_FILE = "delvforge.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_config_path(project_root: Path) -> Path:
    """Get the delvforge.yaml file path."""
    return project_root / CONFIG_FILE


def config_exists(project_root: Path) -> bool:
    """Check if a delvforge.yaml exists in the project."""
    return get_config_path(project_root).exists()


# =============================================================================
# Plugins
# =============================================================================


def resolve_plugin(reference: str) -> Any:
    """Import a plugin from a ``"package.module:function"`` reference."""
    module_name, _, attr = reference.partition(":")
    if not module_name or not attr:
        raise ConfigurationError(
            f"Plugin reference must look like 'package.module:function', got {reference!r}"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import plugin module {module_name!r}: {e}") from e
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise ConfigurationError(f"Plugin {attr!r} not found in {module_name!r}") from e


def _resolve_plugins(entries: list[Any]) -> list[Any]:
    resolved: list[Any] = []
    for entry in entries:
        if isinstance(entry, str):
            resolved.append((resolve_plugin(entry), {}))
        elif isinstance(entry, Mapping):
            target = entry.get("plugin")
            if target is None:
                raise ConfigurationError(f"Plugin entry without 'plugin' key: {dict(entry)!r}")
            fn = resolve_plugin(target) if isinstance(target, str) else target
            resolved.append((fn, dict(entry.get("options") or {})))
        elif isinstance(entry, list | tuple) and entry and isinstance(entry[0], str):
            resolved.append((resolve_plugin(entry[0]), *entry[1:]))
        else:
            resolved.append(entry)
    return resolved


# =============================================================================
# Building Options
# =============================================================================


def build_options(config: Options | Mapping[str, Any] | None = None, **overrides: Any) -> Options:
    """
    Build validated Options from a mapping.

    Top-level keys the mapping leaves out take their defaults; a supplied
    table replaces the default table whole.

    Args:
        config: Options (returned as-is unless overrides are given), a mapping
            of config keys (camelCase or snake_case), or None for all defaults.
        **overrides: Extra top-level keys applied on top of ``config``.

    Returns:
        Validated Options.

    Raises:
        ConfigurationError: If the configuration does not validate.
    """
    if isinstance(config, Options):
        if not overrides:
            return config
        data: dict[str, Any] = config.model_dump(by_alias=False)
        data["plugins"] = list(config.plugins)
    else:
        data = dict(config or {})
    data.update(overrides)

    if data.get("plugins"):
        data["plugins"] = _resolve_plugins(list(data["plugins"]))

    try:
        return Options.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration:\n{e}") from e


def read_config(path: Path) -> dict[str, Any]:
    """Read the raw option mapping from a YAML or TOML file."""
    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration: {e}", source=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration root must be a mapping", source=str(path))
    # Allow the options to live under a top-level "delvforge" section
    if "delvforge" in data and isinstance(data["delvforge"], dict):
        return data["delvforge"]
    return data


def load_options(path: Path | None = None) -> Options:
    """
    Load Options from a YAML or TOML file.

    Args:
        path: Config file. None means ``./delvforge.yaml`` if it exists,
            otherwise all defaults.

    Returns:
        Validated Options.

    Raises:
        ConfigurationError: If the file cannot be read or does not validate.
    """
    if path is None:
        if not config_exists(Path.cwd()):
            logger.debug("No %s found, using default options", CONFIG_FILE)
            return Options()
        path = get_config_path(Path.cwd())

    if not path.exists():
        raise ConfigurationError("Configuration file not found", source=str(path))

    data = read_config(path)
    logger.debug("Loaded configuration from %s (%d top-level keys)", path, len(data))
    try:
        return build_options(data)
    except ConfigurationError as e:
        raise ConfigurationError(e.message, source=str(path)) from e
