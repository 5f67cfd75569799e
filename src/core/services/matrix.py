"""Build matrix assembly.

This module turns the declared package list into the ordered sequence of
build descriptors handed to the bundler. It performs no I/O: entry paths are
joined and normalised, never checked for existence (missing files are the
bundler's to report). Side-effects such as printing stay in the CLI layer.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from core.banner import create_banner
from core.domain.models import BuildDescriptor, BuildOptions, PackageSpec, ResolvedOptions
from core.domain.target import Target
from core.errors import ConfigurationError
from core.externals import ExternalPredicate
from core.packages import DEFAULT_PACKAGES
from core.targets import BUILDERS

logger = logging.getLogger(__name__)


def resolve_input(spec: PackageSpec, root: Path | None = None) -> Path:
    """Absolute, normalised entry path of `spec` (relative to `root`, default cwd)."""

    base = Path(root) if root is not None else Path.cwd()
    return Path(os.path.abspath(base / spec.package_dir / spec.entry_file))


def resolve_options(
    spec: PackageSpec,
    *,
    root: Path | None = None,
    options: BuildOptions | None = None,
) -> ResolvedOptions:
    return ResolvedOptions(
        absolute_input=resolve_input(spec, root),
        external=ExternalPredicate.from_globals(spec.globals),
        banner=create_banner(spec.banner_name),
        js_global_name=spec.js_global_name,
        output_file_stem=spec.output_file_stem,
        package_dir=spec.package_dir,
        globals=dict(spec.globals),
        package_name=spec.name,
        build=options or BuildOptions(),
    )


def expand(
    spec: PackageSpec,
    *,
    root: Path | None = None,
    options: BuildOptions | None = None,
) -> list[BuildDescriptor]:
    """The four descriptors of one package, in [ESM, CJS, UMD-dev, UMD-prod] order."""

    resolved = resolve_options(spec, root=root, options=options)
    descriptors = [BUILDERS[target](resolved) for target in Target.ordered()]
    logger.debug(
        "expanded %s -> %s (externals: %s)",
        spec.name,
        ", ".join(d.target.value for d in descriptors),
        ", ".join(resolved.external.dependencies) or "none",
    )
    return descriptors


def validate_packages(packages: Iterable[PackageSpec]) -> list[PackageSpec]:
    """Reject duplicate package names, output stems and package directories."""

    packages = list(packages)
    seen_names: set[str] = set()
    seen_stems: set[str] = set()
    seen_dirs: set[str] = set()
    for spec in packages:
        if not isinstance(spec, PackageSpec):
            raise ConfigurationError(f"expected PackageSpec, got {type(spec).__name__}")
        if spec.name in seen_names:
            raise ConfigurationError(f"duplicate package name: {spec.name!r}")
        if spec.output_file_stem in seen_stems:
            raise ConfigurationError(
                f"duplicate output file stem {spec.output_file_stem!r} (package {spec.name!r})"
            )
        # Every output path lives under <package_dir>/build.
        package_dir = os.path.normpath(spec.package_dir.as_posix())
        if package_dir in seen_dirs:
            raise ConfigurationError(
                f"duplicate package dir {spec.package_dir.as_posix()!r} (package {spec.name!r})"
            )
        seen_names.add(spec.name)
        seen_stems.add(spec.output_file_stem)
        seen_dirs.add(package_dir)
    return packages


def assemble_all(
    packages: Sequence[PackageSpec] = DEFAULT_PACKAGES,
    *,
    root: Path | None = None,
    options: BuildOptions | None = None,
) -> list[BuildDescriptor]:
    """Every descriptor of the distribution, packages in declaration order.

    All-or-nothing: the package list is validated up front, so a bad entry
    aborts the assembly before any descriptor is produced.
    """

    packages = validate_packages(packages)
    descriptors: list[BuildDescriptor] = []
    for spec in packages:
        descriptors.extend(expand(spec, root=root, options=options))
    logger.debug("assembled %d descriptors for %d packages", len(descriptors), len(packages))
    return descriptors
