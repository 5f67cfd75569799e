"""Build targets and environments.

This module centralizes the fixed enumerations of the build matrix. Keeping
them in the domain layer lets the builders, the CLI and the exporters share a
single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class Target(str, Enum):
    """The four output targets produced for every package."""

    ESM = "esm"
    CJS = "cjs"
    UMD_DEV = "umd-dev"
    UMD_PROD = "umd-prod"

    @classmethod
    def ordered(cls) -> tuple["Target", ...]:
        """Return the targets in the order descriptors are generated."""

        return (cls.ESM, cls.CJS, cls.UMD_DEV, cls.UMD_PROD)

    @property
    def is_umd(self) -> bool:
        return self in (Target.UMD_DEV, Target.UMD_PROD)

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return {
            Target.ESM: "ESM",
            Target.CJS: "CJS",
            Target.UMD_DEV: "UMD (Dev)",
            Target.UMD_PROD: "UMD (Prod)",
        }[self]


class Environment(str, Enum):
    """Runtime environment baked into UMD bundles."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class ReportNaming(str, Enum):
    """How the machine-readable bundle stats file is named.

    - `package`: `stats-<output_file_stem>.json` inside the package build dir.
    - `shared`: the historical `stats-react.json` for every package.
    """

    PACKAGE = "package"
    SHARED = "shared"
