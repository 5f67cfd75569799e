import subprocess
from pathlib import Path

import pytest

from adapters.rollup_runner import RollupCliBundler
from core.config import AppSettings
from core.errors import BundlerError
from core.interfaces.bundler import Bundler
from core.services.matrix import expand


class FakeRunner:
    def __init__(self, returncode=0, stdout="", stderr="", exc=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.exc = exc
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(cmd, self.returncode, stdout=self.stdout, stderr=self.stderr)


def test_is_a_bundler(tmp_path):
    assert isinstance(RollupCliBundler(AppSettings(root_dir=tmp_path)), Bundler)


def test_bundle_writes_config_and_runs_rollup(tmp_path, core_spec):
    runner = FakeRunner(stdout="created packages/core/build/esm\n")
    bundler = RollupCliBundler(AppSettings(root_dir=tmp_path), runner=runner)

    outcome = bundler.bundle(expand(core_spec, root=tmp_path))

    config = tmp_path / "rollup.config.mjs"
    assert config.is_file()
    ((cmd, kwargs),) = runner.calls
    assert cmd == ["npx", "rollup", "--config", str(config)]
    assert kwargs["cwd"] == str(tmp_path)
    assert outcome.descriptors == 4
    assert outcome.output == "created packages/core/build/esm\n"


def test_custom_command_and_config_path(tmp_path, core_spec):
    settings = AppSettings(
        root_dir=tmp_path,
        rollup_command=("node_modules/.bin/rollup",),
        rollup_config_path=Path("config/rollup.generated.mjs"),
    )
    runner = FakeRunner()
    RollupCliBundler(settings, runner=runner).bundle(expand(core_spec, root=tmp_path))
    cmd, _ = runner.calls[0]
    assert cmd[0] == "node_modules/.bin/rollup"
    assert (tmp_path / "config" / "rollup.generated.mjs").is_file()


def test_failure_output_is_surfaced_unmodified(tmp_path, core_spec):
    runner = FakeRunner(returncode=1, stdout="", stderr="[!] Error: Could not resolve entry module\n")
    bundler = RollupCliBundler(AppSettings(root_dir=tmp_path), runner=runner)
    with pytest.raises(BundlerError) as excinfo:
        bundler.bundle(expand(core_spec, root=tmp_path))
    assert excinfo.value.returncode == 1
    assert excinfo.value.output == "[!] Error: Could not resolve entry module\n"


def test_missing_executable(tmp_path, core_spec):
    runner = FakeRunner(exc=FileNotFoundError("npx"))
    bundler = RollupCliBundler(AppSettings(root_dir=tmp_path), runner=runner)
    with pytest.raises(BundlerError) as excinfo:
        bundler.bundle(expand(core_spec, root=tmp_path))
    assert excinfo.value.returncode == 127
