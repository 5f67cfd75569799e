"""External module classification.

Why here:
- The bundler asks, once per discovered import, whether a module id must be
  left unbundled. The answer depends only on the package's `globals` keys.
- Keeping the predicate a value object (instead of a closure) makes descriptors
  comparable by value and serializable.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def is_external(module_id: str, external_deps: Collection[str]) -> bool:
    """Return True iff `module_id` is exactly one of `external_deps`.

    No prefix or path matching: `react/jsx-runtime` is not external when only
    `react` is declared.
    """

    return module_id in external_deps


class ExternalPredicate(BaseModel):
    """Callable external predicate handed to the bundler."""

    model_config = ConfigDict(frozen=True)

    dependencies: tuple[str, ...] = Field(
        default=(),
        description="Module ids left unbundled, in `globals` declaration order.",
    )

    @classmethod
    def from_globals(cls, globals_map: Mapping[str, str]) -> "ExternalPredicate":
        return cls(dependencies=tuple(globals_map))

    def __call__(self, module_id: str) -> bool:
        return is_external(module_id, self.dependencies)
