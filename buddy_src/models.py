#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2026 plumiume
# SPDX-License-Identifier: MIT
# License: MIT License (https://opensource.org/licenses/MIT)
# See LICENSE.txt for details.

"""
Configuration models for buddy packages.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NAME = "default"
DEFAULT_VERSION = "0.1.0"
DEFAULT_EDITION = "2021"

Mode = Literal["build", "run"]

# ============================================================================
# Descriptor File (Buddy.toml)
# ============================================================================


class PackageConfig(BaseModel):
    """[package] section"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Package name, also the default run target")
    version: str = Field(description="Package version")
    edition: str = Field(description="Package edition")


class DependencyConfig(BaseModel):
    """Entry of the [dependencies] section"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Dependency name")
    version: str = Field(description="Dependency version")


class ProjectConfig(BaseModel):
    """Buddy.toml contents"""

    model_config = ConfigDict(frozen=True)

    package: PackageConfig
    dependencies: dict[str, DependencyConfig] = Field(
        description="Dependencies keyed by name"
    )

    @classmethod
    def default(cls) -> "ProjectConfig":
        """Config used when no descriptor file is present"""
        return cls(
            package=PackageConfig(
                name=DEFAULT_NAME,
                version=DEFAULT_VERSION,
                edition=DEFAULT_EDITION,
            ),
            dependencies={},
        )


# ============================================================================
# Tool Settings
# ============================================================================


class ToolSettings(BaseSettings):
    """Environment overrides for the buddy tool itself"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BUDDY_",
        case_sensitive=False,
        extra="ignore",
    )

    bazel: str = Field(default="bazel", description="Bazel executable name or path")
    manifest: Path = Field(
        default=Path("Buddy.toml"), description="Descriptor file path"
    )
    output_base: str = Field(
        default="target/build", description="Value passed as --output_base"
    )
    symlink_prefix: str = Field(
        default="target/", description="Value passed as --symlink_prefix"
    )


# ============================================================================
# Per-invocation Values
# ============================================================================


class ExternalInvocation(BaseModel):
    """Argument vector for one call of the external build tool"""

    model_config = ConfigDict(frozen=True)

    tool_path: Path
    mode: Mode
    output_base: str
    symlink_prefix: str
    targets: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        # --output_base is a startup option and must precede the command
        return [
            str(self.tool_path),
            f"--output_base={self.output_base}",
            self.mode,
            f"--symlink_prefix={self.symlink_prefix}",
            *self.targets,
        ]


class BuddyContext(BaseModel):
    """State computed once at start-up and handed to each command"""

    model_config = ConfigDict(frozen=True)

    tool_path: Path
    config: ProjectConfig
    settings: ToolSettings
