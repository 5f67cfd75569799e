from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.domain.models import PackageSpec


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith("BUNDLE_MATRIX_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def core_spec() -> PackageSpec:
    return PackageSpec(
        name="core",
        package_dir=Path("packages/core"),
        js_global_name="Core",
        output_file_stem="core",
        entry_file=Path("src/index.ts"),
        globals={},
    )


@pytest.fixture
def react_adapter_spec() -> PackageSpec:
    return PackageSpec(
        name="react-adapter",
        package_dir=Path("packages/react-adapter"),
        js_global_name="ReactAdapter",
        output_file_stem="react-adapter",
        entry_file=Path("src/index.tsx"),
        globals={"react": "React"},
    )
