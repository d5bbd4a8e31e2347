#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2026 plumiume
# SPDX-License-Identifier: MIT
# License: MIT License (https://opensource.org/licenses/MIT)
# See LICENSE.txt for details.

"""
Bazel invocation for the build and run commands.
"""

import shutil
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .errors import RunnerError, ToolNotFoundError
from .models import BuddyContext, ExternalInvocation, Mode, ProjectConfig

console = Console()

INFO_PREFIX = "INFO: "
BAZEL_OUT = "bazel-out"


def discover_tool(name: str) -> Path:
    """Resolve the Bazel executable on PATH"""
    found = shutil.which(name)
    if found is None:
        raise ToolNotFoundError(
            f"Bazel binary `{name}` not found. See https://bazel.build/install"
        )
    return Path(found)


def default_target(mode: Mode, config: ProjectConfig) -> str:
    if mode == "build":
        return "//src/..."
    return f"//src:{config.package.name}"


def build_invocation(
    context: BuddyContext, mode: Mode, extra_args: Sequence[str]
) -> ExternalInvocation:
    """Assemble the Bazel command line.

    Caller arguments replace the default target entirely when given.
    """
    targets = tuple(extra_args) or (default_target(mode, context.config),)
    return ExternalInvocation(
        tool_path=context.tool_path,
        mode=mode,
        output_base=context.settings.output_base,
        symlink_prefix=context.settings.symlink_prefix,
        targets=targets,
    )


def format_line(line: str) -> tuple[Optional[Text], str]:
    """Split a Bazel stderr line into a highlighted marker and its verbatim rest.

    Only lines starting with ``INFO: `` get a marker; any other line comes
    back whole with no marker.
    """
    if line.startswith(INFO_PREFIX):
        return Text("INFO:", style="green"), line[len(INFO_PREFIX) :]
    return None, line


def relay_line(line: str) -> None:
    """Reprint one stderr line on stdout, keeping its text byte-for-byte"""
    marker, rest = format_line(line)
    if marker is not None:
        console.print(marker, end=" ", highlight=False)
    # raw write: rich would strip control codes and expand tabs
    console.file.write(rest + "\n")
    console.file.flush()


def cleanup_bazel_out(workdir: Path) -> bool:
    """Remove the bazel-out link Bazel leaves despite --symlink_prefix"""
    path = workdir / BAZEL_OUT
    if path.is_symlink():
        path.unlink()
        return True
    if path.exists():
        shutil.rmtree(path)
        return True
    return False


class BuildRunner:
    """Runs Bazel and relays its stderr"""

    def __init__(self, context: BuddyContext, workdir: Optional[Path] = None):
        self.context = context
        self.workdir = workdir if workdir is not None else Path.cwd()

    def invoke(self, mode: Mode, extra_args: Sequence[str] = ()) -> int:
        """Run ``bazel <mode>`` and return its exit status.

        stdout is inherited; stderr is read line by line until it closes and
        each line is reprinted through ``relay_line``.
        """
        invocation = build_invocation(self.context, mode, extra_args)
        cmd = invocation.argv
        console.print(f"\n[dim]Running: {escape(' '.join(cmd))}[/dim]\n")

        try:
            proc = subprocess.Popen(
                cmd,
                cwd=self.workdir,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise RunnerError(f"failed to execute {cmd[0]}: {e}") from e

        try:
            for line in proc.stderr:
                relay_line(line.rstrip("\r\n"))
            returncode = proc.wait()
        except KeyboardInterrupt:
            console.print("\n[yellow]Interrupted by user[/yellow]")
            proc.kill()
            proc.wait()
            returncode = 130

        cleanup_bazel_out(self.workdir)
        return returncode
