"""Bundler collaborator contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The rollup CLI adapter and the test fakes are interchangeable.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from core.domain.models import BuildDescriptor


@dataclass(frozen=True)
class BundleOutcome:
    """What the bundler reported for one run."""

    descriptors: int
    output: str = ""


@runtime_checkable
class Bundler(Protocol):
    """Minimal contract for whatever consumes build descriptors.

    Design rules:
    - `bundle` consumes every descriptor exactly once.
    - Failures raise `core.errors.BundlerError` with the output unmodified;
      nothing is retried.
    """

    def bundle(self, descriptors: Sequence[BuildDescriptor]) -> BundleOutcome:
        ...
