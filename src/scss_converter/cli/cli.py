#!/usr/bin/env python3
"""
scss_converter.cli.cli

Typer-based CLI for compiling SCSS stylesheets to CSS.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Compile a stylesheet, resolving imports from a vendor directory:

    scss2css compile styles/main.scss build/main.css -I vendor/scss

Compile from stdin to stdout:

    cat main.scss | scss2css compile - --filename main.scss
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from dataclasses import dataclass
from pathlib import Path

import typer

from scss_converter.errors import ConversionError

app = typer.Typer(
    name="scss2css",
    help="Compile SCSS stylesheets to CSS.",
    no_args_is_help=True,
)

STDIN_MARKER = "-"
INPUT_HELP = "Path to an .scss file, or '-' to read from stdin."
INCLUDE_PATH_HELP = "Directory searched to resolve @import (repeatable)."
FILENAME_HELP = "Label used in error messages. Defaults to the input file name."
OUTPUT_STYLE_HELP = "libsass output style: nested, expanded, compact or compressed."


# -----------------------------
# Dependency checks / utilities
# -----------------------------
@dataclass(frozen=True)
class EngineStatus:
    """Availability of the compiler engine."""

    import_name: str
    available: bool
    version: str | None = None


def _is_importable(module: str) -> bool:
    """Check whether a module can be resolved.

    Parameters
    ----------
    module : str
        Module name to resolve.

    Returns
    -------
    bool
        ``True`` if the module can be imported, otherwise ``False``.
    """
    try:
        import importlib.util

        return importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        return False


def _engine_status() -> EngineStatus:
    """Report whether libsass can be used."""
    if not _is_importable("sass"):
        return EngineStatus(import_name="sass", available=False)

    import sass

    version = getattr(sass, "libsass_version", None) or getattr(sass, "__version__", None)
    return EngineStatus(import_name="sass", available=True, version=version)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _compile(
    input_path: str,
    include_paths: list[str] | None,
    filename: str | None,
    output_style: str,
) -> tuple[str, dict[str, object]]:
    """Compile CLI input and return CSS plus stats."""
    from scss_converter.api import (
        build_conversion_options,
        build_file_conversion_options,
        convert,
        read_scss_file,
    )

    if input_path == STDIN_MARKER:
        source = typer.get_text_stream("stdin").read()
        options = build_conversion_options(
            include_paths=include_paths,
            filename=filename,
            output_style=output_style,  # type: ignore[arg-type]
        )
    else:
        path = Path(input_path)
        source = read_scss_file(path)
        options = build_file_conversion_options(
            path,
            include_paths=include_paths,
            filename=filename,
            output_style=output_style,  # type: ignore[arg-type]
        )
    css = convert(source, options)
    return css, dict(options.stats or {})


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", help="Log compiler activity to stderr."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    verbose : bool, default=False
        Whether to enable DEBUG logging.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("compile")
def compile_cmd(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help=INPUT_HELP),
    output_path: Path | None = typer.Argument(
        None, help="Where to write the .css file. Prints to stdout when omitted."
    ),
    include_paths: list[str] | None = typer.Option(
        None, "--include-path", "-I", help=INCLUDE_PATH_HELP
    ),
    filename: str | None = typer.Option(None, "--filename", help=FILENAME_HELP),
    output_style: str = typer.Option("nested", "--output-style", help=OUTPUT_STYLE_HELP),
    stats: bool = typer.Option(
        False, "--stats", help="Print compilation statistics as JSON to stderr."
    ),
) -> None:
    """Compile an SCSS stylesheet to CSS.

    Notes
    -----
    - The input file's directory is searched after any ``--include-path``.
    - Errors located in the source are reported with the offending line.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        css, compile_stats = _compile(input_path, include_paths, filename, output_style)
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if output_path is None:
        typer.echo(css, nl=False)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(css, encoding="utf-8")
        typer.echo(f"[green]✓ Saved:[/green] {output_path}", err=True)
    if stats:
        typer.echo(json.dumps(compile_stats, default=str), err=True)


@app.command("check")
def check_cmd(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help=INPUT_HELP),
    include_paths: list[str] | None = typer.Option(
        None, "--include-path", "-I", help=INCLUDE_PATH_HELP
    ),
    filename: str | None = typer.Option(None, "--filename", help=FILENAME_HELP),
) -> None:
    """Compile an SCSS stylesheet and discard the output."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        _compile(input_path, include_paths, filename, "nested")
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    typer.echo(f"[green]✓[/green] {input_path}")


@app.command("doctor")
def doctor_cmd() -> None:
    """Report whether the libsass engine is available."""
    status = _engine_status()
    if not status.available:
        typer.echo(
            f"[red]✗ {status.import_name}:[/red] not installed. "
            'Install with: pip install "scss-converter"',
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo(f"[green]✓ {status.import_name}:[/green] libsass {status.version or 'unknown'}")


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
