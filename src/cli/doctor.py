"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil

import typer
from rich.table import Table

from cli.context import console, fail, get_state
from core.errors import BundleMatrixError
from core.services.matrix import resolve_input, validate_packages

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")


@app.command()
def run(ctx: typer.Context) -> None:
    """Check the package list, entry files and bundler availability."""

    state = get_state(ctx)
    settings = state.settings
    root = settings.root_dir.resolve()

    try:
        packages = validate_packages(state.packages())
    except BundleMatrixError as exc:
        raise fail(exc) from exc

    table = Table(title="bundle-matrix Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")

    # Config
    source = str(settings.manifest_path) if settings.manifest_path else "built-in"
    table.add_row("Package list", "OK", f"{len(packages)} packages ({source})")
    table.add_row("Root", "OK" if root.is_dir() else "FAIL", str(root))

    # Entry files
    missing = 0
    for spec in packages:
        entry = resolve_input(spec, root)
        if entry.is_file():
            table.add_row(f"Entry {spec.name}", "OK", entry.as_posix())
        else:
            missing += 1
            table.add_row(f"Entry {spec.name}", "FAIL", f"missing: {entry.as_posix()}")

    # Bundler (best-effort)
    executable = settings.rollup_command[0]
    found = shutil.which(executable)
    table.add_row("Bundler", "OK" if found else "OPTIONAL", found or f"{executable} not on PATH")

    console.print(table)

    if missing:
        console.print(
            f"\n[yellow]Note:[/yellow] {missing} entry file(s) missing; rollup will fail for those packages."
        )
        raise typer.Exit(code=1)
