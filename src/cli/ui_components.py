"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables and panels are reused by several commands (matrix, doctor).
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import BuildDescriptor, PackageSpec


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Why here:
    - Avoids circular imports (main <-> doctor).
    - Can be skipped in non-interactive modes (exports, CI).
    """

    title = Text("bundle-matrix", style="bold cyan")
    subtitle = Text("ESM • CJS • UMD dev • UMD prod", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_packages_table(packages: Sequence[PackageSpec]) -> Table:
    table = Table(title="Packages")
    table.add_column("Package", style="cyan", no_wrap=True)
    table.add_column("Global", style="white", no_wrap=True)
    table.add_column("Entry", style="magenta")
    table.add_column("Externals", style="green")
    for spec in packages:
        externals = ", ".join(f"{k} → {v}" for k, v in spec.globals.items()) or "-"
        table.add_row(
            spec.name,
            spec.js_global_name,
            (spec.package_dir / spec.entry_file).as_posix(),
            externals,
        )
    return table


def build_matrix_table(descriptors: Sequence[BuildDescriptor]) -> Table:
    """One row per descriptor: package × target."""

    table = Table(title="Build Matrix")
    table.add_column("Package", style="cyan", no_wrap=True)
    table.add_column("Target", style="yellow", no_wrap=True)
    table.add_column("Output", style="magenta")
    table.add_column("Plugins", style="dim")
    for descriptor in descriptors:
        table.add_row(
            descriptor.package,
            descriptor.target.label(),
            descriptor.output_location,
            " → ".join(descriptor.plugin_names),
        )
    return table
