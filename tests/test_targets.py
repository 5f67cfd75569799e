from pathlib import Path

from core.domain.models import BuildOptions
from core.domain.target import ReportNaming, Target
from core.services.matrix import expand, resolve_options
from core.targets import cjs, esm, umd_dev, umd_prod


def _by_target(descriptors):
    return {d.target: d for d in descriptors}


def test_esm_output(react_adapter_spec):
    d = esm(resolve_options(react_adapter_spec, root=Path("/repo")))
    assert d.target is Target.ESM
    assert d.output.to_bundler() == {
        "format": "esm",
        "sourcemap": True,
        "dir": "packages/react-adapter/build/esm",
        "preserveModules": True,
        "banner": d.output.banner,
    }
    assert d.plugin_names == ("svelte", "babel", "node-resolve")
    assert d.plugins[0].options == {"compilerOptions": {"hydratable": True}}


def test_cjs_output(react_adapter_spec):
    d = cjs(resolve_options(react_adapter_spec, root=Path("/repo")))
    out = d.output.to_bundler()
    assert out["format"] == "cjs"
    assert out["dir"] == "packages/react-adapter/build/cjs"
    assert out["preserveModules"] is True
    assert out["exports"] == "named"
    assert "file" not in out and "name" not in out
    assert d.plugins[0].options == {}


def test_shared_prefix_transpiles_sources_only(react_adapter_spec):
    d = cjs(resolve_options(react_adapter_spec, root=Path("/repo")))
    babel, resolver = d.plugins[1], d.plugins[2]
    assert babel.options["babelHelpers"] == "bundled"
    assert "node_modules" in babel.options["exclude"]
    assert babel.options["extensions"] == [".ts", ".tsx"]
    assert resolver.options == {"extensions": [".ts", ".tsx"]}


def test_source_extensions_flow_into_plugins(react_adapter_spec):
    options = BuildOptions(source_extensions=(".ts", ".tsx", ".svelte"))
    d = esm(resolve_options(react_adapter_spec, root=Path("/repo"), options=options))
    assert d.plugins[1].options["extensions"] == [".ts", ".tsx", ".svelte"]
    assert d.plugins[2].options["extensions"] == [".ts", ".tsx", ".svelte"]


def test_esm_and_cjs_share_plugin_prefix(react_adapter_spec):
    by = _by_target(expand(react_adapter_spec, root=Path("/repo")))
    e, c = by[Target.ESM], by[Target.CJS]
    assert e.plugin_names == c.plugin_names
    assert e.plugins[1:] == c.plugins[1:]
    assert e.plugins[0].options != c.plugins[0].options
    assert e.output.format != c.output.format
    assert e.input == c.input
    assert e.external == c.external


def test_umd_dev_output(react_adapter_spec):
    d = umd_dev(resolve_options(react_adapter_spec, root=Path("/repo")))
    out = d.output.to_bundler()
    assert out["format"] == "umd"
    assert out["file"] == "packages/react-adapter/build/umd/index.development.js"
    assert out["name"] == "ReactAdapter"
    assert out["globals"] == {"react": "React"}
    assert out["sourcemap"] is True
    assert "dir" not in out
    assert d.plugin_names == ("svelte", "babel", "node-resolve", "replace")
    assert d.plugins[3].options["values"] == {"process.env.NODE_ENV": '"development"'}


def test_umd_prod_chain(react_adapter_spec):
    d = umd_prod(resolve_options(react_adapter_spec, root=Path("/repo")))
    assert d.output.file == "packages/react-adapter/build/umd/index.production.js"
    assert d.plugin_names == (
        "svelte",
        "babel",
        "node-resolve",
        "replace",
        "terser",
        "visualizer",
        "visualizer",
    )
    replace, terser, html, stats = d.plugins[3:]
    assert replace.options["values"] == {"process.env.NODE_ENV": '"production"'}
    assert terser.options == {"mangle": True, "compress": True}
    assert terser.named_export is True
    assert html.options == {"filename": "packages/react-adapter/build/stats-html.html", "gzipSize": True}
    assert stats.options == {
        "filename": "packages/react-adapter/build/stats-react-adapter.json",
        "json": True,
        "gzipSize": True,
    }


def test_umd_prod_shared_report_name(react_adapter_spec):
    options = BuildOptions(report_naming=ReportNaming.SHARED)
    d = umd_prod(resolve_options(react_adapter_spec, root=Path("/repo"), options=options))
    assert d.plugins[-1].options["filename"] == "packages/react-adapter/build/stats-react.json"


def test_umd_prod_size_summary(react_adapter_spec):
    options = BuildOptions(size_summary=True)
    d = umd_prod(resolve_options(react_adapter_spec, root=Path("/repo"), options=options))
    assert d.plugin_names[4:6] == ("terser", "size")


def test_umd_dev_and_prod_differ_only_in_env_minifier_and_reports(react_adapter_spec):
    by = _by_target(expand(react_adapter_spec, root=Path("/repo")))
    dev, prod = by[Target.UMD_DEV], by[Target.UMD_PROD]

    assert dev.input == prod.input
    assert dev.external == prod.external
    assert dev.output.globals == prod.output.globals
    assert dev.output.banner == prod.output.banner
    assert dev.output.name == prod.output.name
    assert dev.output.format == prod.output.format == "umd"

    assert dev.plugins[:3] == prod.plugins[:3]
    assert dev.plugins[3].options["values"] != prod.plugins[3].options["values"]
    assert "terser" not in dev.plugin_names
    assert "visualizer" not in dev.plugin_names
    assert len(prod.plugins) - len(dev.plugins) == 3


def test_only_umd_targets_substitute_environment(react_adapter_spec):
    for d in expand(react_adapter_spec, root=Path("/repo")):
        assert ("replace" in d.plugin_names) is d.target.is_umd


def test_all_targets_share_banner_and_input(react_adapter_spec):
    descriptors = expand(react_adapter_spec, root=Path("/repo"))
    assert {d.output.banner for d in descriptors} == {descriptors[0].output.banner}
    assert {d.input for d in descriptors} == {Path("/repo/packages/react-adapter/src/index.tsx")}
