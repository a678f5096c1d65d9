"""CSS build system for DelvForge.

Writes generated stylesheets to disk. ``build_all`` renders every build
profile into an output directory and records the result in
``build-info.json``.

Usage::

    from delvforge.build import build_stylesheet
    build_stylesheet(output_path=Path("dist/delvforge.css"))

Or via CLI::

    delvforge build-all --output-dir dist
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from delvforge._version import get_version
from delvforge.core.errors import BuildError
from delvforge.core.options import Options
from delvforge.generator import generate

logger = logging.getLogger(__name__)

BUILD_INFO_FILE = "build-info.json"
DEFAULT_OUTPUT = Path("dist") / "delvforge.css"


@dataclass(frozen=True)
class BuildProfile:
    """A named set of option overrides rendered to one file."""

    name: str
    output: str
    options: Mapping[str, Any]


BUILD_PROFILES: tuple[BuildProfile, ...] = (
    BuildProfile("default", "delvforge.css", {}),
    BuildProfile(
        "prefixed",
        "delvforge-prefixed.css",
        {"prefix": {"className": "df-", "cssVariable": "df-"}},
    ),
    BuildProfile(
        "modern",
        "delvforge-modern.css",
        {
            "features": {
                "containerQueries": True,
                "customProperties": True,
                "modernSelectors": True,
                "advancedGrid": True,
                "fluidTypography": True,
                "logicalProperties": True,
            }
        },
    ),
)


@dataclass(frozen=True)
class BuildResult:
    config: str
    output: str
    size: int


def _write(output_path: Path, css: str) -> int:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(css, encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Cannot write stylesheet: {e}", source=str(output_path)) from e
    return len(css.encode("utf-8"))


def build_stylesheet(
    config: Options | Mapping[str, Any] | None = None,
    *,
    output_path: Path | None = None,
    minify: bool = False,
) -> Path:
    """Generate a stylesheet and write it to disk.

    Args:
        config: Options, a config mapping, or None for defaults.
        output_path: Where to write the CSS. Defaults to ``dist/delvforge.css``.
        minify: Whether to minify the output.

    Returns:
        Path to the generated CSS file.

    Raises:
        ConfigurationError: If the configuration does not validate.
        BuildError: If the file cannot be written.
    """
    output_path = output_path or DEFAULT_OUTPUT
    css = generate(config).to_css(minify=minify)
    size = _write(output_path, css)
    logger.info("Stylesheet built: %s (%.1f KB)", output_path, size / 1024)
    return output_path


def build_profile(
    profile: BuildProfile,
    output_dir: Path,
    base: Mapping[str, Any] | None = None,
    minify: bool = False,
) -> BuildResult:
    """Render one profile; its overrides are applied on top of ``base``."""
    logger.info("Building %s configuration...", profile.name)
    config = {**(base or {}), **profile.options}
    output_path = output_dir / profile.output
    css = generate(config).to_css(minify=minify)
    size = _write(output_path, css)
    logger.info("Built %s (%.1f KB)", profile.output, size / 1024)
    return BuildResult(config=profile.name, output=profile.output, size=size)


def build_all(
    output_dir: Path,
    base: Mapping[str, Any] | None = None,
    profiles: tuple[BuildProfile, ...] = BUILD_PROFILES,
    minify: bool = False,
) -> list[BuildResult]:
    """Render every build profile and write ``build-info.json`` next to them.

    Returns:
        One result per profile, in profile order.

    Raises:
        ConfigurationError: If a profile's configuration does not validate.
        BuildError: If any file cannot be written.
    """
    results = [build_profile(profile, output_dir, base, minify) for profile in profiles]

    build_info = {
        "timestamp": datetime.now(UTC).isoformat(),
        "version": get_version(),
        "builds": [asdict(result) for result in results],
    }
    info_path = output_dir / BUILD_INFO_FILE
    _write(info_path, json.dumps(build_info, indent=2) + "\n")
    logger.info("Build info written to %s", info_path)
    return results
