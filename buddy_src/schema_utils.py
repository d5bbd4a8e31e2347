#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Buddy.toml schema export for editor completion."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models import ProjectConfig

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
DEFAULT_SCHEMA_PATH = Path(".vscode") / "buddy.schema.json"


def manifest_schema() -> dict[str, Any]:
    """JSON schema describing Buddy.toml, titled for TOML language servers."""
    schema = ProjectConfig.model_json_schema()
    schema["$schema"] = SCHEMA_DIALECT
    schema["title"] = "Buddy.toml"
    schema["description"] = "Package descriptor for buddy-managed Bazel packages"
    return schema


def generate_manifest_schema(
    project_root: Path, schema_path: Path = DEFAULT_SCHEMA_PATH
) -> Path:
    """Write the schema next to the package; relative paths are under project_root."""
    if not schema_path.is_absolute():
        schema_path = project_root / schema_path
    schema_path.parent.mkdir(parents=True, exist_ok=True)
    schema_path.write_text(
        json.dumps(manifest_schema(), indent=2, ensure_ascii=True) + "\n",
        encoding="utf-8",
    )
    return schema_path
