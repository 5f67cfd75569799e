"""Environment substitution for UMD bundles.

Why a single literal rule:
- UMD bundles are shipped to consumers without a bundler of their own, so the
  `process.env.NODE_ENV` check has to be resolved at build time.
- ESM/CJS outputs keep the expression so the consumer's bundler decides.
- Only this sentinel is replaced; nothing here is a general preprocessor.
"""

from __future__ import annotations

from collections.abc import Mapping

from core.domain.models import PluginInvocation
from core.domain.target import Environment

NODE_ENV_SENTINEL = "process.env.NODE_ENV"


def substitutions(env: Environment | str) -> dict[str, str]:
    """Return the one replacement rule for `env`."""

    env = Environment(env)
    return {NODE_ENV_SENTINEL: f'"{env.value}"'}


def replace_plugin(env: Environment | str) -> PluginInvocation:
    """`@rollup/plugin-replace` invocation applying `substitutions(env)`.

    Empty delimiters make the match purely textual; `preventAssignment` keeps
    `process.env.NODE_ENV = ...` statements untouched.
    """

    return PluginInvocation(
        name="replace",
        module="@rollup/plugin-replace",
        factory="replace",
        options={
            "values": substitutions(env),
            "delimiters": ["", ""],
            "preventAssignment": True,
        },
    )


def apply_substitutions(text: str, rules: Mapping[str, str]) -> str:
    """Apply literal replacement rules to `text` (no regex semantics).

    Mirrors what the replace plugin does to each module, including skipping
    assignments to the sentinel.
    """

    for pattern, replacement in rules.items():
        if not pattern:
            continue
        out: list[str] = []
        start = 0
        while True:
            idx = text.find(pattern, start)
            if idx < 0:
                out.append(text[start:])
                break
            end = idx + len(pattern)
            out.append(text[start:idx])
            out.append(pattern if _is_assignment(text, end) else replacement)
            start = end
        text = "".join(out)
    return text


def _is_assignment(text: str, end: int) -> bool:
    rest = text[end:].lstrip()
    return rest.startswith("=") and not rest.startswith("==")
