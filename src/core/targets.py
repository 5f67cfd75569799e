"""Per-target descriptor builders.

Each builder is a pure function of `ResolvedOptions`. They share the same
plugin prefix (template compiler, transpiler, resolver) and differ in output
shape and in what follows the prefix.
"""

from __future__ import annotations

from core.domain.models import (
    BuildDescriptor,
    OutputSpec,
    PluginInvocation,
    ResolvedOptions,
)
from core.domain.target import Environment, ReportNaming, Target
from core.substitution import replace_plugin

# Dependency files are never transpiled, only the package's own sources.
DEPENDENCY_EXCLUDE = "**/node_modules/**"
SHARED_STATS_JSON = "stats-react.json"


def svelte_plugin(*, hydratable: bool = False) -> PluginInvocation:
    options: dict = {}
    if hydratable:
        options["compilerOptions"] = {"hydratable": True}
    return PluginInvocation(
        name="svelte",
        module="rollup-plugin-svelte",
        factory="svelte",
        options=options,
    )


def babel_plugin(extensions: tuple[str, ...]) -> PluginInvocation:
    return PluginInvocation(
        name="babel",
        module="@rollup/plugin-babel",
        factory="babel",
        options={
            "babelHelpers": "bundled",
            "exclude": DEPENDENCY_EXCLUDE,
            "extensions": list(extensions),
        },
    )


def node_resolve_plugin(extensions: tuple[str, ...]) -> PluginInvocation:
    return PluginInvocation(
        name="node-resolve",
        module="@rollup/plugin-node-resolve",
        factory="nodeResolve",
        options={"extensions": list(extensions)},
    )


def terser_plugin() -> PluginInvocation:
    return PluginInvocation(
        name="terser",
        module="rollup-plugin-terser",
        factory="terser",
        named_export=True,
        options={"mangle": True, "compress": True},
    )


def size_plugin() -> PluginInvocation:
    return PluginInvocation(name="size", module="rollup-plugin-size", factory="size")


def visualizer_plugin(filename: str, *, json: bool = False) -> PluginInvocation:
    options: dict = {"filename": filename}
    if json:
        options["json"] = True
    options["gzipSize"] = True
    return PluginInvocation(
        name="visualizer",
        module="rollup-plugin-visualizer",
        factory="visualizer",
        options=options,
    )


def shared_plugins(opts: ResolvedOptions, *, hydratable: bool = False) -> list[PluginInvocation]:
    """Template compiler -> transpiler -> resolver, common to all targets."""

    extensions = opts.build.source_extensions
    return [
        svelte_plugin(hydratable=hydratable),
        babel_plugin(extensions),
        node_resolve_plugin(extensions),
    ]


def stats_json_filename(opts: ResolvedOptions) -> str:
    if opts.build.report_naming is ReportNaming.SHARED:
        return SHARED_STATS_JSON
    return f"stats-{opts.output_file_stem}.json"


def esm(opts: ResolvedOptions) -> BuildDescriptor:
    return BuildDescriptor(
        package=opts.package_name,
        target=Target.ESM,
        input=opts.absolute_input,
        external=opts.external,
        output=OutputSpec(
            format="esm",
            sourcemap=True,
            dir=opts.build_path("esm"),
            preserve_modules=True,
            banner=opts.banner,
        ),
        plugins=tuple(shared_plugins(opts, hydratable=True)),
    )


def cjs(opts: ResolvedOptions) -> BuildDescriptor:
    return BuildDescriptor(
        package=opts.package_name,
        target=Target.CJS,
        input=opts.absolute_input,
        external=opts.external,
        output=OutputSpec(
            format="cjs",
            sourcemap=True,
            dir=opts.build_path("cjs"),
            preserve_modules=True,
            exports="named",
            banner=opts.banner,
        ),
        plugins=tuple(shared_plugins(opts)),
    )


def _umd_output(opts: ResolvedOptions, env: Environment) -> OutputSpec:
    return OutputSpec(
        format="umd",
        sourcemap=True,
        file=opts.build_path("umd", f"index.{env.value}.js"),
        name=opts.js_global_name,
        globals=dict(opts.globals),
        banner=opts.banner,
    )


def umd_dev(opts: ResolvedOptions) -> BuildDescriptor:
    return BuildDescriptor(
        package=opts.package_name,
        target=Target.UMD_DEV,
        input=opts.absolute_input,
        external=opts.external,
        output=_umd_output(opts, Environment.DEVELOPMENT),
        plugins=(
            *shared_plugins(opts),
            replace_plugin(Environment.DEVELOPMENT),
        ),
    )


def umd_prod(opts: ResolvedOptions) -> BuildDescriptor:
    """Production UMD: the only minified and analysed artifact."""

    plugins = [
        *shared_plugins(opts),
        replace_plugin(Environment.PRODUCTION),
        terser_plugin(),
    ]
    if opts.build.size_summary:
        plugins.append(size_plugin())
    plugins.append(visualizer_plugin(opts.build_path("stats-html.html")))
    plugins.append(visualizer_plugin(opts.build_path(stats_json_filename(opts)), json=True))

    return BuildDescriptor(
        package=opts.package_name,
        target=Target.UMD_PROD,
        input=opts.absolute_input,
        external=opts.external,
        output=_umd_output(opts, Environment.PRODUCTION),
        plugins=tuple(plugins),
    )


BUILDERS = {
    Target.ESM: esm,
    Target.CJS: cjs,
    Target.UMD_DEV: umd_dev,
    Target.UMD_PROD: umd_prod,
}
