"""Rollup config export.

Why it lives in adapters:
- The JavaScript syntax of a rollup config is an infrastructure detail
  (Jinja2 template); the core only knows `BuildDescriptor`.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from core.domain.models import BuildDescriptor, PluginInvocation
from core.errors import ConfigurationError

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _tojs(value: Any) -> str:
    # JSON literals are valid JavaScript expressions.
    return json.dumps(value, ensure_ascii=False)


def _get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["tojs"] = _tojs
    return env


def collect_imports(descriptors: Sequence[BuildDescriptor]) -> list[PluginInvocation]:
    """One import per plugin factory, in order of first use.

    Two modules exporting the same binding name cannot share a config file.
    """

    seen: dict[str, PluginInvocation] = {}
    for descriptor in descriptors:
        for plugin in descriptor.plugins:
            known = seen.get(plugin.factory)
            if known is None:
                seen[plugin.factory] = plugin
            elif known.module != plugin.module:
                raise ConfigurationError(
                    f"plugin factory {plugin.factory!r} imported from both "
                    f"{known.module!r} and {plugin.module!r}"
                )
    return list(seen.values())


def render_rollup_config(descriptors: Sequence[BuildDescriptor]) -> str:
    """Render an ES-module rollup config exporting every descriptor."""

    template = _get_env().get_template("rollup.config.mjs.j2")
    return template.render(
        imports=collect_imports(descriptors),
        descriptors=descriptors,
    )


def export_rollup_config(*, descriptors: Sequence[BuildDescriptor], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_rollup_config(descriptors), encoding="utf-8")
    return output_path
