"""Shared CLI state.

Lives apart from `cli.main` so sub-apps (doctor) can use it without importing
the main app.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from adapters.package_manifest import load_package_manifest
from core.config import AppSettings
from core.domain.models import BuildDescriptor, PackageSpec
from core.errors import BundleMatrixError
from core.packages import DEFAULT_PACKAGES
from core.services.matrix import assemble_all

console = Console()
err_console = Console(stderr=True)


@dataclass
class CliState:
    """Options of the root callback, handed to every command via `ctx.obj`."""

    settings: AppSettings = field(default_factory=AppSettings)

    def packages(self) -> tuple[PackageSpec, ...]:
        if self.settings.manifest_path is None:
            return DEFAULT_PACKAGES
        return load_package_manifest(self.settings.manifest_path)

    def descriptors(self, packages: tuple[PackageSpec, ...] | None = None) -> list[BuildDescriptor]:
        return assemble_all(
            self.packages() if packages is None else packages,
            root=self.settings.root_dir.resolve(),
            options=self.settings.build_options(),
        )


def get_state(ctx: typer.Context) -> CliState:
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState()
    return ctx.obj


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def fail(exc: BundleMatrixError) -> typer.Exit:
    """Report a user-facing error and return the exit to raise."""

    err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
    return typer.Exit(code=1)
