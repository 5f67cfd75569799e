"""Rollup CLI bundler.

Implements `core.interfaces.bundler.Bundler` by writing the generated config
and running `rollup --config` once for the whole matrix. Whatever rollup
prints is surfaced as-is; nothing is retried.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from adapters.rollup_exporter import export_rollup_config
from core.config import AppSettings
from core.domain.models import BuildDescriptor
from core.errors import BundlerError
from core.interfaces.bundler import BundleOutcome, Bundler

logger = logging.getLogger(__name__)

CommandRunner = Callable[..., subprocess.CompletedProcess]


class RollupCliBundler(Bundler):
    """Runs the rollup CLI on a generated config file."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        runner: CommandRunner = subprocess.run,
    ) -> None:
        self._settings = settings or AppSettings()
        self._runner = runner

    @property
    def config_path(self) -> Path:
        path = self._settings.rollup_config_path
        return path if path.is_absolute() else self._settings.root_dir / path

    def command(self) -> list[str]:
        return [*self._settings.rollup_command, "--config", str(self.config_path)]

    def bundle(self, descriptors: Sequence[BuildDescriptor]) -> BundleOutcome:
        export_rollup_config(descriptors=descriptors, output_path=self.config_path)
        cmd = self.command()
        logger.info("running %s", " ".join(cmd))
        try:
            completed = self._runner(
                cmd,
                cwd=str(self._settings.root_dir),
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise BundlerError(127, str(exc)) from exc

        output = (completed.stdout or "") + (completed.stderr or "")
        if completed.returncode != 0:
            raise BundlerError(completed.returncode, output)
        return BundleOutcome(descriptors=len(descriptors), output=output)
