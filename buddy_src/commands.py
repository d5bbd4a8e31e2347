#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CLI commands for buddy packages.
"""

import sys
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .errors import BuddyError, RunnerError, ScaffoldError
from .models import BuddyContext, Mode, ToolSettings
from .runner import BuildRunner, discover_tool
from .scaffold import create_package
from .schema_utils import DEFAULT_SCHEMA_PATH, generate_manifest_schema
from .version import __version__

console = Console()
app = typer.Typer(
    name="buddy",
    help="Cargo-style front-end for Bazel C++ packages",
    add_completion=False,
)

# Let dash-prefixed Bazel flags through to the targets argument
PASSTHROUGH = {"ignore_unknown_options": True}


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]error[/red]: {escape(str(error))}", highlight=False)
    raise typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"buddy {__version__}")
        raise typer.Exit()


# ============================================================================
# Start-up
# ============================================================================


@app.callback()
def startup(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
):
    """Cargo-style front-end for Bazel C++ packages"""


def _load_context() -> BuddyContext:
    """Locate Bazel and load Buddy.toml.

    Every command calls this first, after its arguments have been parsed, so
    --help and usage errors never depend on Bazel or the descriptor file.
    """
    settings = ToolSettings()
    try:
        tool_path = discover_tool(settings.bazel)
        config = load_config(settings.manifest)
    except BuddyError as e:
        _fail(e)

    console.print(config)
    return BuddyContext(tool_path=tool_path, config=config, settings=settings)


# ============================================================================
# CLI Commands
# ============================================================================


@app.command()
def new(
    path: Annotated[str, typer.Argument(help="Directory and name of the package")],
):
    """Create a new buddy package"""
    _load_context()
    try:
        create_package(path)
    except (ScaffoldError, OSError) as e:
        _fail(e)


def _invoke(mode: Mode, targets: Optional[list[str]]) -> int:
    runner = BuildRunner(_load_context())
    try:
        return runner.invoke(mode, targets or [])
    except RunnerError as e:
        _fail(e)


@app.command(context_settings=PASSTHROUGH)
def build(
    targets: Annotated[
        Optional[list[str]],
        typer.Argument(help="Bazel targets and flags (default: //src/...)"),
    ] = None,
):
    """Compile the current package"""
    sys.exit(_invoke("build", targets))


@app.command(context_settings=PASSTHROUGH)
def run(
    targets: Annotated[
        Optional[list[str]],
        typer.Argument(help="Bazel targets and flags (default: //src:<name>)"),
    ] = None,
):
    """Run a binary or example of the local package"""
    sys.exit(_invoke("run", targets))


@app.command()
def schema(
    output: Annotated[
        Path,
        typer.Option(
            "-o", "--output", help="Schema path, relative to the Buddy.toml directory"
        ),
    ] = DEFAULT_SCHEMA_PATH,
):
    """Generate editor schema for Buddy.toml"""
    context = _load_context()
    project_root = context.settings.manifest.parent
    try:
        schema_path = generate_manifest_schema(project_root, output)
    except OSError as e:
        _fail(e)
    console.print(f"[green]✓[/green] Generated {escape(str(schema_path))}")


def main():
    """Main entry point"""
    app()
