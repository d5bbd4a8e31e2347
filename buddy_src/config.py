#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2026 plumiume
# SPDX-License-Identifier: MIT
# License: MIT License (https://opensource.org/licenses/MIT)
# See LICENSE.txt for details.

"""
Descriptor file loading.
"""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigError
from .models import ProjectConfig


def load_config(path: Path) -> ProjectConfig:
    """Load Buddy.toml, or the built-in defaults when it does not exist.

    A file that exists but cannot be read or parsed, or does not match
    ``ProjectConfig``, raises ``ConfigError``.
    """
    if not path.exists():
        return ProjectConfig.default()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"failed to parse {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"failed to read {path}: {e}") from e

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid {path}: {e}") from e
