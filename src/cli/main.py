"""Command line interface (Typer).

Commands only wire settings, core and adapters together; tables live in
`cli.ui_components` and the matrix logic in `core.services.matrix`.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.text import Text

from adapters.json_exporter import export_descriptors_json
from adapters.rollup_exporter import export_rollup_config
from adapters.rollup_runner import RollupCliBundler
from cli import doctor
from cli.context import CliState, configure_logging, console, err_console, fail, get_state
from cli.ui_components import build_matrix_table, build_packages_table, print_banner
from core.config import AppSettings
from core.domain.models import BuildDescriptor
from core.domain.target import ReportNaming
from core.errors import BundleMatrixError, BundlerError

app = typer.Typer(
    no_args_is_help=True,
    help="Generate ESM, CJS and UMD build descriptors for every package of the distribution.",
)
export_app = typer.Typer(no_args_is_help=True, help="Write the build matrix to disk.")

app.add_typer(export_app, name="export")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    ctx: typer.Context,
    manifest: Optional[Path] = typer.Option(
        None,
        "--manifest",
        "-m",
        help="JSON package manifest, relative to the working directory (defaults to the built-in list).",
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Repository root that package directories are relative to."
    ),
    report_naming: Optional[ReportNaming] = typer.Option(
        None, "--report-naming", help="Stats JSON naming: per package or the shared legacy name."
    ),
    size_summary: Optional[bool] = typer.Option(
        None, "--size-summary/--no-size-summary", help="Add rollup-plugin-size to production UMD."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    overrides: dict[str, object] = {}
    if manifest is not None:
        overrides["manifest_path"] = manifest
    if root is not None:
        overrides["root_dir"] = root
    if report_naming is not None:
        overrides["report_naming"] = report_naming
    if size_summary is not None:
        overrides["size_summary"] = size_summary
    if verbose:
        overrides["log_level"] = "DEBUG"

    settings = AppSettings(**overrides)
    configure_logging(settings.log_level)
    ctx.obj = CliState(settings=settings)


def _descriptors(state: CliState, package: Optional[List[str]] = None) -> list[BuildDescriptor]:
    try:
        packages = state.packages()
        if package:
            unknown = sorted(set(package) - {p.name for p in packages})
            if unknown:
                raise typer.BadParameter(f"unknown package(s): {', '.join(unknown)}")
            packages = tuple(p for p in packages if p.name in package)
        return state.descriptors(packages)
    except BundleMatrixError as exc:
        raise fail(exc) from exc


@app.command()
def packages(ctx: typer.Context) -> None:
    """List the packages of the distribution."""

    state = get_state(ctx)
    try:
        declared = state.packages()
    except BundleMatrixError as exc:
        raise fail(exc) from exc
    console.print(build_packages_table(declared))


@app.command()
def matrix(
    ctx: typer.Context,
    package: Optional[List[str]] = typer.Option(None, "--package", "-p", help="Only these packages."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """Show every build descriptor (package × target)."""

    descriptors = _descriptors(get_state(ctx), package)
    if banner:
        print_banner(console)
    console.print(build_matrix_table(descriptors))


@export_app.command("json")
def export_json(
    ctx: typer.Context,
    output: Path = typer.Option(Path("build-matrix.json"), "--output", "-o", help="Destination file."),
    package: Optional[List[str]] = typer.Option(None, "--package", "-p", help="Only these packages."),
) -> None:
    """Write the descriptors as JSON."""

    descriptors = _descriptors(get_state(ctx), package)
    path = export_descriptors_json(descriptors=descriptors, output_path=output)
    console.print(f"[green]Wrote {len(descriptors)} descriptors to:[/green] {path}")


@export_app.command("rollup")
def export_rollup(
    ctx: typer.Context,
    output: Path = typer.Option(Path("rollup.config.mjs"), "--output", "-o", help="Destination file."),
    package: Optional[List[str]] = typer.Option(None, "--package", "-p", help="Only these packages."),
) -> None:
    """Write an ES-module rollup config for the descriptors."""

    descriptors = _descriptors(get_state(ctx), package)
    try:
        path = export_rollup_config(descriptors=descriptors, output_path=output)
    except BundleMatrixError as exc:
        raise fail(exc) from exc
    console.print(f"[green]Wrote rollup config to:[/green] {path}")


@app.command()
def build(
    ctx: typer.Context,
    package: Optional[List[str]] = typer.Option(None, "--package", "-p", help="Only these packages."),
) -> None:
    """Generate the rollup config and run rollup on it."""

    state = get_state(ctx)
    descriptors = _descriptors(state, package)
    bundler = RollupCliBundler(state.settings)
    try:
        outcome = bundler.bundle(descriptors)
    except BundlerError as exc:
        # Rollup's own report, untouched.
        if exc.output:
            err_console.print(Text(exc.output))
        err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
        raise typer.Exit(code=exc.returncode or 1) from exc
    except BundleMatrixError as exc:
        raise fail(exc) from exc

    if outcome.output:
        console.print(Text(outcome.output))
    console.print(f"[green]Built {outcome.descriptors} targets.[/green]")


def run() -> None:
    app()
