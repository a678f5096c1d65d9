"""Shared pytest fixtures for DelvForge tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from delvforge.core.options import Options


@pytest.fixture
def small_config() -> dict[str, Any]:
    """A compact configuration that keeps full generation passes fast."""
    return {
        "breakpoints": {"sm": "640px", "md": "768px"},
        "containers": {"sm": "640px"},
        "spacing": {"0": 0, "1": 0.25, "4": 1, "px": "1px"},
        "fontSize": {"sm": ["0.875rem", {"lineHeight": "1.25rem"}]},
        "colors": {"brand": {"500": "#2196f3"}},
        "themes": {
            "light": {
                "default": True,
                "colorScheme": "light",
                "colors": {"background": "#ffffff"},
            },
            "dark": {
                "colorScheme": "dark",
                "colors": {"background": "#000000"},
            },
        },
        "components": {},
    }


@pytest.fixture
def small_options(small_config: dict[str, Any]) -> Options:
    return Options.model_validate(small_config)


@pytest.fixture
def bare_options() -> Options:
    """Two breakpoints, one container and no themes."""
    return Options(
        breakpoints={"sm": "640px", "md": "768px"},
        containers={"sm": "640px"},
        themes={},
    )


@pytest.fixture
def themed_options() -> Options:
    """Two breakpoints and a light (default) / dark theme pair."""
    return Options(
        breakpoints={"sm": "640px", "md": "768px"},
        themes={
            "light": {"default": True, "colors": {"background": "#ffffff"}},
            "dark": {"colors": {"background": "#000000"}},
        },
    )


@pytest.fixture
def config_file(tmp_path: Path, small_config: dict[str, Any]) -> Path:
    """``small_config`` written as delvforge.yaml."""
    path = tmp_path / "delvforge.yaml"
    path.write_text(yaml.safe_dump(small_config, sort_keys=False))
    return path
