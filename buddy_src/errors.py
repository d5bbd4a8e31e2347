#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2026 plumiume
# SPDX-License-Identifier: MIT
# License: MIT License (https://opensource.org/licenses/MIT)
# See LICENSE.txt for details.

"""
Error types raised by buddy operations.

Helpers raise these; only the CLI layer decides whether they are fatal.
"""


class BuddyError(RuntimeError):
    """Base class for all buddy errors"""


class ConfigError(BuddyError):
    """Descriptor file exists but could not be parsed or validated"""


class ScaffoldError(BuddyError):
    """Package destination already exists"""


class ToolNotFoundError(BuddyError):
    """External build tool is not on the search path"""


class RunnerError(BuddyError):
    """External build tool could not be started"""
