from __future__ import annotations

import typer

from relsign.cli.context import build_context
from relsign.core.errors import ErrorCode
from relsign.output.console import Style
from relsign.services.signing import resolve_signing_config


def resolve(
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit non-zero when no release signing config can be resolved.",
    ),
) -> None:
    """Resolve the release signing config from key.properties."""
    ctx = build_context()
    path = ctx.project.key_properties_path

    ctx.console.print(f"project: {ctx.project.root}", Style.DIM)
    signing = resolve_signing_config(path, ctx.console)
    if signing is None:
        if strict or ctx.config.signing.strict:
            raise typer.Exit(code=int(ErrorCode.BUILD_ERROR))
        return

    ctx.console.success(f"release signing resolved from {path}")
    for key, value in signing.redacted().items():
        ctx.console.print(f"  {key}: {value}")
