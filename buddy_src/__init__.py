#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2026 plumiume
# SPDX-License-Identifier: MIT
# License: MIT License (https://opensource.org/licenses/MIT)
# See LICENSE.txt for details.

"""
Buddy package management.
"""

from .commands import app, main
from .config import load_config
from .errors import (
    BuddyError,
    ConfigError,
    RunnerError,
    ScaffoldError,
    ToolNotFoundError,
)
from .models import (
    BuddyContext,
    DependencyConfig,
    ExternalInvocation,
    PackageConfig,
    ProjectConfig,
    ToolSettings,
)
from .runner import (
    BuildRunner,
    build_invocation,
    discover_tool,
    format_line,
    relay_line,
)
from .scaffold import create_package
from .version import __version__

__all__ = [
    "__version__",
    # Commands
    "app",
    "main",
    # Operations
    "load_config",
    "create_package",
    "BuildRunner",
    "build_invocation",
    "discover_tool",
    "format_line",
    "relay_line",
    # Errors
    "BuddyError",
    "ConfigError",
    "ScaffoldError",
    "ToolNotFoundError",
    "RunnerError",
    # Models
    "ProjectConfig",
    "PackageConfig",
    "DependencyConfig",
    "ToolSettings",
    "ExternalInvocation",
    "BuddyContext",
]
