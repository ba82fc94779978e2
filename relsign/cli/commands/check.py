from __future__ import annotations

import typer

from relsign.cli.context import build_context
from relsign.core.result import Err
from relsign.output.errors import print_signing_error, signing_error_exit_code
from relsign.services.variants import configure_variants, require_release_signing


def check() -> None:
    """Fail unless the release variant can be signed."""
    ctx = build_context()

    release = configure_variants(ctx.project, ctx.console).release
    result = require_release_signing(release, ctx.project.app_module_dir)
    if isinstance(result, Err):
        print_signing_error(result.error, ctx.console)
        raise typer.Exit(code=signing_error_exit_code(result.error))

    keystore = result.value.resolve_store_file(ctx.project.app_module_dir)
    ctx.console.success(f"{release.name}: signing ready ({keystore})")
