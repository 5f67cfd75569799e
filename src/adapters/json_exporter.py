"""JSON export of the build matrix.

Why JSON:
- Interoperability with other build tooling and CI pipelines.
- Lets the matrix be diffed between runs without rendering a rollup config.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from core.domain.models import BuildDescriptor


def descriptor_payload(descriptor: BuildDescriptor) -> dict[str, Any]:
    """Rollup-shaped dict for one descriptor (external as the list of ids)."""

    return {
        "package": descriptor.package,
        "target": descriptor.target.value,
        "input": descriptor.input.as_posix(),
        "external": list(descriptor.external.dependencies),
        "output": descriptor.output.to_bundler(),
        "plugins": [plugin.model_dump(mode="json") for plugin in descriptor.plugins],
    }


def export_descriptors_json(*, descriptors: Sequence[BuildDescriptor], output_path: Path) -> Path:
    """Write the descriptors to UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"descriptors": [descriptor_payload(d) for d in descriptors]}
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
