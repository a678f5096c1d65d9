"""
DelvForge CLI.

Commands:
  build      Generate one stylesheet (to a file or stdout)
  build-all  Generate every build profile plus build-info.json
  inspect    Rule counts per utility category
  themes     Resolved theme variants
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from delvforge._version import get_version
from delvforge.build import BUILD_PROFILES, build_all, build_stylesheet
from delvforge.cli_ui import print_error, print_header, print_info, print_success, print_table
from delvforge.core.config_loader import load_options, read_config
from delvforge.core.errors import DelvForgeError
from delvforge.core.options import Options
from delvforge.generator import generate, generate_with_stats, prepare_options
from delvforge.themes import ThemeResolver


def version_callback(value: bool) -> None:
    """Display the version and exit."""
    if value:
        typer.echo(f"DelvForge version {get_version()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load(config: Path | None) -> Options:
    try:
        return load_options(config)
    except DelvForgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="DelvForge: utility-first CSS generator",
    no_args_is_help=True,
)

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Config file (default: ./delvforge.yaml if present)"
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """DelvForge CLI main callback for global options."""
    pass


@app.command("build")
def build_command(
    config: Path | None = CONFIG_OPTION,
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write CSS here instead of stdout"
    ),
    minify: bool = typer.Option(False, "--minify", "-m", help="Minify the output"),
    verbose: bool = typer.Option(False, "--verbose", help="Log generation details"),
) -> None:
    """Generate the stylesheet."""
    _configure_logging(verbose)
    options = _load(config)
    try:
        if output is None:
            typer.echo(generate(options).to_css(minify=minify), nl=False)
            return
        path = build_stylesheet(options, output_path=output, minify=minify)
    except DelvForgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Built {path}")


@app.command("build-all")
def build_all_command(
    config: Path | None = CONFIG_OPTION,
    output_dir: Path = typer.Option(Path("dist"), "--output-dir", "-d", help="Output directory"),
    minify: bool = typer.Option(False, "--minify", "-m", help="Minify the output"),
    verbose: bool = typer.Option(False, "--verbose", help="Log generation details"),
) -> None:
    """Generate every build profile and build-info.json.

    Profile overrides are applied on top of the --config file, if given.
    """
    _configure_logging(verbose)
    try:
        base = read_config(config) if config is not None else None
        results = build_all(output_dir, base=base, minify=minify)
    except DelvForgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for result in results:
        print_success(f"{result.config}: {result.output} ({result.size / 1024:.1f} KB)")
    print_info(f"{len(BUILD_PROFILES)} profile(s) written to {output_dir}")


@app.command("inspect")
def inspect_command(config: Path | None = CONFIG_OPTION) -> None:
    """Show how many rules each utility category generates."""
    _configure_logging(False)
    options = _load(config)
    try:
        sheet, counts = generate_with_stats(options)
    except DelvForgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    rows = [[name, str(count)] for name, count in counts.items()]
    rows.append(["total", str(sheet.rule_count())])
    print_table("Rules per category", ["Category", "Rules"], rows)


@app.command("themes")
def themes_command(config: Path | None = CONFIG_OPTION) -> None:
    """List resolved theme variants and their selectors."""
    _configure_logging(False)
    options = prepare_options(_load(config))
    resolver = ThemeResolver.from_options(options)

    print_header("Themes", f"class prefix {options.class_prefix!r}")
    rows = [
        [
            key,
            variant or "(default)",
            theme.color_scheme or "",
            str(len(theme.colors)),
        ]
        for key, variant, theme in resolver.entries()
    ]
    print_table("Theme variants", ["Key", "Variant", "Color scheme", "Colors"], rows)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
