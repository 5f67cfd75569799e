"""Package manifest loading (data-driven).

Supports a JSON document of the form:
- {"packages": [{"name": ..., "package_dir": ..., "js_global_name": ..., ...}]}

The built-in package list stays the default; a manifest lets the same matrix
logic build any other distribution.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from core.domain.models import PackageSpec
from core.errors import ConfigurationError


class PackageManifest(BaseModel):
    packages: list[PackageSpec] = Field(default_factory=list)


def parse_package_manifest(data: object) -> tuple[PackageSpec, ...]:
    try:
        manifest = PackageManifest.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid package manifest:\n{exc}") from exc
    if not manifest.packages:
        raise ConfigurationError("package manifest declares no packages")
    return tuple(manifest.packages)


def load_package_manifest(path: Path) -> tuple[PackageSpec, ...]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"cannot read package manifest {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"package manifest {path} is not valid JSON: {exc}") from exc
    return parse_package_manifest(data)
