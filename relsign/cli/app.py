from __future__ import annotations

import os
from pathlib import Path

import typer

from relsign import __version__
from relsign.cli.commands.check import check
from relsign.cli.commands.resolve_cmd import resolve
from relsign.cli.commands.variants_cmd import variants
from relsign.core.errors import ErrorCode
from relsign.core.project import is_project_root


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    invoke_without_command=True,
    rich_markup_mode="rich",
)


app.command()(resolve)
app.command()(variants)
app.command()(check)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    project: Path | None = typer.Option(
        None,
        "--project",
        help="Flutter project root (overrides auto detection)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if project is not None:
        try:
            root = project.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --project: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not is_project_root(root):
            typer.echo(
                f"error: --project '{root}' is not a Flutter project (missing pubspec.yaml or android/)",
                err=True,
            )
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

        os.environ["RELSIGN_PROJECT_ROOT"] = str(root)


def main() -> None:
    app()
