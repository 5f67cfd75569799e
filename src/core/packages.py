"""Packages published by the distribution.

Declared once, in order; `assemble_all()` builds them in this order.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.models import PackageSpec

DEFAULT_PACKAGES: tuple[PackageSpec, ...] = (
    PackageSpec(
        name="table-core",
        package_dir=Path("packages/table-core"),
        js_global_name="TableCore",
        output_file_stem="table-core",
        entry_file=Path("src/index.ts"),
        globals={},
    ),
    PackageSpec(
        name="react-table",
        package_dir=Path("packages/react-table"),
        js_global_name="ReactTable",
        output_file_stem="react-table",
        entry_file=Path("src/index.tsx"),
        globals={"react": "React"},
    ),
    PackageSpec(
        name="solid-table",
        package_dir=Path("packages/solid-table"),
        js_global_name="SolidTable",
        output_file_stem="solid-table",
        entry_file=Path("src/index.tsx"),
        globals={
            "solid-js": "Solid",
            "solid-js/store": "SolidStore",
        },
    ),
    PackageSpec(
        name="vue-table",
        package_dir=Path("packages/vue-table"),
        js_global_name="VueTable",
        output_file_stem="vue-table",
        entry_file=Path("src/index.ts"),
        globals={"vue": "Vue"},
    ),
    PackageSpec(
        name="svelte-table",
        package_dir=Path("packages/svelte-table"),
        js_global_name="SvelteTable",
        output_file_stem="svelte-table",
        entry_file=Path("src/index.ts"),
        globals={
            "svelte": "Svelte",
            "svelte/internal": "SvelteInternal",
            "svelte/store": "SvelteStore",
        },
    ),
    PackageSpec(
        name="react-table-devtools",
        package_dir=Path("packages/react-table-devtools"),
        js_global_name="ReactTableDevtools",
        output_file_stem="react-table-devtools",
        entry_file=Path("src/index.tsx"),
        globals={
            "react": "React",
            "@tanstack/react-table": "ReactTable",
        },
    ),
    PackageSpec(
        name="match-sorter-utils",
        package_dir=Path("packages/match-sorter-utils"),
        js_global_name="MatchSorterUtils",
        output_file_stem="match-sorter-utils",
        entry_file=Path("src/index.ts"),
        globals={},
    ),
)
