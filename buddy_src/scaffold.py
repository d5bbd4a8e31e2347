#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2026 plumiume
# SPDX-License-Identifier: MIT
# License: MIT License (https://opensource.org/licenses/MIT)
# See LICENSE.txt for details.

"""
Package scaffolding from Jinja2 templates.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from rich.console import Console
from rich.markup import escape

from .errors import ScaffoldError
from .models import DEFAULT_EDITION, DEFAULT_VERSION

console = Console()

TEMPLATES_DIR = Path(__file__).parent / "templates"

# (template, path relative to the package root)
PACKAGE_FILES = [
    ("Buddy.toml.jinja2", Path("Buddy.toml")),
    ("BUILD.jinja2", Path("src") / "BUILD"),
    ("main.cc.jinja2", Path("src") / "main.cc"),
]


def _environment(templates_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def create_package(name: str, templates_dir: Path = TEMPLATES_DIR) -> Path:
    """Create a new binary package skeleton at ``name``.

    ``name`` is both the destination path and the package name written into
    Buddy.toml and src/BUILD. Raises ``ScaffoldError`` without touching the
    filesystem if the destination already exists; ``OSError`` from directory
    or file creation propagates unchanged.
    """
    root = Path(name)
    if root.exists():
        raise ScaffoldError(f"destination `{name}` already exists")

    env = _environment(templates_dir)
    context = {
        "name": name,
        "version": DEFAULT_VERSION,
        "edition": DEFAULT_EDITION,
    }

    root.mkdir()
    (root / "src").mkdir()
    (root / "WORKSPACE").write_text("", encoding="utf-8")

    for template_name, rel_path in PACKAGE_FILES:
        output = env.get_template(template_name).render(**context)
        with open(root / rel_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(output)

    console.print(
        f"    [green]Created[/green] binary (application) `{escape(name)}` package",
        highlight=False,
    )
    return root
