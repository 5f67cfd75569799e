"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of the hand-declared package list at the edge, with
  self-documenting fields (Field) and no coupling to the bundler itself.
- Frozen models give value equality: two assemblies of the same package list
  compare equal field by field.

Note:
- These models describe *what* to build, not *how* the bundler builds it.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from core.domain.target import ReportNaming, Target
from core.externals import ExternalPredicate

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class PackageSpec(BaseModel):
    """One published package of the distribution.

    Why it exists:
    - It is the only hand-written input of the matrix; everything else is
      derived from it deterministically.
    - `globals` doubles as the external dependency declaration: its keys are
      exactly the modules this package leaves to the consumer.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        ...,
        min_length=1,
        max_length=214,
        description="Package identity (e.g. 'react-table').",
    )
    package_dir: Path = Field(
        ...,
        description="Package directory, relative to the repository root.",
    )
    js_global_name: str = Field(
        ...,
        min_length=1,
        description="Global variable the UMD bundle assigns (e.g. 'ReactTable').",
    )
    output_file_stem: str = Field(
        ...,
        min_length=1,
        description="Stem used to name per-package output files.",
    )
    entry_file: Path = Field(
        default=Path("src/index.ts"),
        description="Entry module, relative to `package_dir`.",
    )
    globals: dict[str, str] = Field(
        default_factory=dict,
        description="External module id -> UMD global variable name.",
    )
    display_name: str | None = Field(
        default=None,
        min_length=1,
        description="Name embedded in the license banner (defaults to `name`).",
    )

    @field_validator("name", "output_file_stem")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("js_global_name")
    @classmethod
    def _js_identifier(cls, value: str) -> str:
        if not _JS_IDENTIFIER.match(value):
            raise ValueError(f"{value!r} is not a valid JavaScript identifier")
        return value

    @field_validator("entry_file")
    @classmethod
    def _relative_entry(cls, value: Path) -> Path:
        if value.is_absolute():
            raise ValueError("entry_file must be relative to package_dir")
        return value

    @field_validator("globals")
    @classmethod
    def _valid_globals(cls, value: dict[str, str]) -> dict[str, str]:
        for module_id, global_name in value.items():
            if not module_id:
                raise ValueError("external module ids must not be empty")
            if not _JS_IDENTIFIER.match(global_name):
                raise ValueError(
                    f"global for {module_id!r} is not a valid JavaScript identifier: {global_name!r}"
                )
        return value

    @property
    def banner_name(self) -> str:
        return self.display_name or self.name


class BuildOptions(BaseModel):
    """Matrix-wide knobs shared by every package."""

    model_config = ConfigDict(frozen=True)

    source_extensions: tuple[str, ...] = Field(
        default=(".ts", ".tsx"),
        min_length=1,
        description="Source file extensions handled by the transpiler and resolver.",
    )
    report_naming: ReportNaming = Field(
        default=ReportNaming.PACKAGE,
        description="Naming policy for the machine-readable stats file.",
    )
    size_summary: bool = Field(
        default=False,
        description="Also print a size summary (rollup-plugin-size) for production UMD.",
    )

    @field_validator("source_extensions")
    @classmethod
    def _dotted(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for ext in value:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"invalid extension {ext!r} (expected e.g. '.ts')")
        return value


class ResolvedOptions(BaseModel):
    """Options derived from one PackageSpec, shared by its four builders."""

    model_config = ConfigDict(frozen=True)

    absolute_input: Path
    external: ExternalPredicate
    banner: str
    js_global_name: str
    output_file_stem: str
    package_dir: Path
    globals: dict[str, str] = Field(default_factory=dict)
    package_name: str
    build: BuildOptions = Field(default_factory=BuildOptions)

    def build_path(self, *parts: str) -> str:
        """Output location under `<package_dir>/build`, as a posix string."""

        return self.package_dir.joinpath("build", *parts).as_posix()


class OutputSpec(BaseModel):
    """Bundler output options; dumps with the bundler's camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    format: str
    sourcemap: bool = True
    dir: str | None = None
    file: str | None = None
    preserve_modules: bool | None = None
    exports: str | None = None
    name: str | None = None
    globals: dict[str, str] | None = None
    banner: str

    def to_bundler(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class PluginInvocation(BaseModel):
    """One entry of a plugin chain: which factory to call, with which options."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Short plugin name (e.g. 'babel').")
    module: str = Field(..., min_length=1, description="npm module providing the factory.")
    factory: str = Field(..., min_length=1, description="Imported binding to call.")
    named_export: bool = Field(
        default=False,
        description="Whether the factory is a named export instead of the default one.",
    )
    options: dict[str, Any] = Field(default_factory=dict)


class BuildDescriptor(BaseModel):
    """Complete specification of one bundler invocation."""

    model_config = ConfigDict(frozen=True)

    package: str
    target: Target
    input: Path
    external: ExternalPredicate
    output: OutputSpec
    plugins: tuple[PluginInvocation, ...]

    @property
    def plugin_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.plugins)

    @property
    def output_location(self) -> str:
        return self.output.file or self.output.dir or ""
