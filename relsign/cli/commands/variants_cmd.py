from __future__ import annotations

from relsign.cli.context import CLIContext, build_context
from relsign.output.console import Style
from relsign.services.variants import BuildVariant, configure_variants


def variants() -> None:
    """Show build variants and how each one is signed."""
    ctx = build_context()
    _print_app(ctx)

    for variant in configure_variants(ctx.project, ctx.console):
        ctx.console.header(variant.name)
        ctx.console.print(f"debuggable: {'yes' if variant.debuggable else 'no'}")
        ctx.console.print(f"signing: {_describe_signing(variant)}", _style_for(variant))


def _print_app(ctx: CLIContext) -> None:
    android = ctx.config.android
    if android.namespace:
        ctx.console.print(f"namespace: {android.namespace}", Style.DIM)
    if android.application_id:
        ctx.console.print(f"applicationId: {android.application_id}", Style.DIM)


def _describe_signing(variant: BuildVariant) -> str:
    if variant.uses_debug_identity:
        return "debug identity"
    source = variant.signing_source or "no properties file"
    if variant.signing is None:
        return f"none, nothing usable in {source} (release packaging will fail)"
    return f"{variant.signing.key_alias} @ {variant.signing.store_file} (from {source})"


def _style_for(variant: BuildVariant) -> Style:
    if variant.is_signable:
        return Style.SUCCESS
    return Style.ERROR
