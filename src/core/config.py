"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the core: `assemble_all()` only ever sees explicit arguments.
- The CLI and the adapters read the same typed contract.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import BuildOptions
from core.domain.target import ReportNaming


class AppSettings(BaseSettings):
    """Central settings for the build-matrix tool.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars, `.env`) without polluting the
      core with lookups.
    - One configuration contract for the CLI and the bundler adapter.
    """

    model_config = SettingsConfigDict(
        env_prefix="BUNDLE_MATRIX_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    root_dir: Path = Field(
        default=Path("."),
        description="Repository root; package directories are relative to it.",
    )
    manifest_path: Path | None = Field(
        default=None,
        description="Optional JSON package manifest replacing the built-in package list.",
    )

    source_extensions: tuple[str, ...] = Field(
        default=(".ts", ".tsx"),
        min_length=1,
        description="Source extensions handled by babel and node-resolve.",
    )
    report_naming: ReportNaming = Field(
        default=ReportNaming.PACKAGE,
        description="Stats JSON naming: per package (default) or the shared legacy name.",
    )
    size_summary: bool = Field(
        default=False,
        description="Add rollup-plugin-size to the production UMD chain.",
    )

    rollup_command: tuple[str, ...] = Field(
        default=("npx", "rollup"),
        min_length=1,
        description="Command used to invoke rollup (config flag is appended).",
    )
    rollup_config_path: Path = Field(
        default=Path("rollup.config.mjs"),
        description="Where `build` writes the generated rollup config.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"unknown log level {value!r}")
        return level

    def build_options(self) -> BuildOptions:
        return BuildOptions(
            source_extensions=self.source_extensions,
            report_naming=self.report_naming,
            size_summary=self.size_summary,
        )
