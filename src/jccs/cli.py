from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from jccs import __version__
from jccs.audit import AuditCallbacks, audit_path
from jccs.config import ConfigError, build_config
from jccs.engine.types import FileResult
from jccs.languages.registry import DEFAULT_EXTENSION
from jccs.logging_utils import configure_logging
from jccs.reporters.json_reporter import render_json
from jccs.reporters.terminal import TerminalReporter

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="jccs: find Java classes and interfaces without a class-level comment.",
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def _main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose logs (printed to stderr)."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log warnings and errors."),
    ] = False,
) -> None:
    """jccs CLI."""

    if verbose and quiet:
        raise typer.BadParameter("Choose at most one: --verbose or --quiet.")
    configure_logging(verbose=verbose, quiet=quiet)
    ctx.obj = {"verbose": verbose, "quiet": quiet}


def _cli_settings(ctx: typer.Context | None) -> dict[str, bool]:
    # The command context inherits `obj` from the callback; walk up in case it does not.
    while ctx is not None and not isinstance(ctx.obj, dict):
        ctx = ctx.parent
    if ctx is None:
        return {"verbose": False, "quiet": False}
    return {"verbose": bool(ctx.obj.get("verbose", False)), "quiet": bool(ctx.obj.get("quiet", False))}


@app.command()
def scan(
    ctx: typer.Context,
    path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=True,
            help="Root directory (or single file) to scan.",
        ),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: terminal, json.", show_default=True),
    ] = "terminal",
    extension: Annotated[
        str,
        typer.Option("--extension", help="File name suffix to scan (case-insensitive).", show_default=True),
    ] = DEFAULT_EXTENSION,
    workers: Annotated[
        str | None,
        typer.Option("--workers", help="Worker threads: a positive integer or 'auto' (default: 1)."),
    ] = None,
    skip_dirs: Annotated[
        list[str] | None,
        typer.Option("--skip-dir", help="Directory name to prune from traversal (repeatable)."),
    ] = None,
    follow_symlinks: Annotated[
        bool,
        typer.Option("--follow-symlinks/--no-follow-symlinks", help="Descend into symlinked directories.", show_default=True),
    ] = True,
    fail: Annotated[
        bool,
        typer.Option("--fail/--no-fail", help="Exit 1 when any file has an undocumented class.", show_default=True),
    ] = False,
) -> None:
    """
    Report class and interface declarations that have no comment right above them.
    """

    normalized = output_format.strip().lower()
    if normalized not in {"terminal", "json"}:
        raise typer.BadParameter("Unsupported format. Use: terminal, json.")

    try:
        config = build_config(
            extension=extension,
            workers=workers,
            skip_dirs=skip_dirs or (),
            follow_symlinks=follow_symlinks,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    settings = _cli_settings(ctx)

    def _on_file_scanned(result: FileResult) -> None:
        logger.debug("%s: %d undocumented declaration(s)", result.path, len(result.diagnostics))

    reporter = TerminalReporter(console=console, err_console=err_console)
    callbacks = AuditCallbacks(
        on_diagnostic=reporter.diagnostic if normalized == "terminal" else None,
        on_file_scanned=_on_file_scanned if settings["verbose"] else None,
    )

    result = audit_path(path, config=config, callbacks=callbacks)

    if normalized == "json":
        typer.echo(render_json(result, root=path))
    else:
        reporter.summary(result.totals)

    if fail and result.totals.files_with_error > 0:
        raise typer.Exit(code=1)
