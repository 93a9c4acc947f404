"""Top-level API for SCSS-to-CSS conversion."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from scss_converter.application.options import ConversionOptions
from scss_converter.application.ports import CompilerEngine
from scss_converter.application.results import ConversionResult
from scss_converter.diagnostics import extract_line, format_error
from scss_converter.errors import (
    ConversionError,
    LineOutOfRangeError,
    ScssSyntaxError,
)
from scss_converter.types import OutputStyle

__version__ = "0.1.0"


def convert(
    source: str,
    options: ConversionOptions,
    *,
    engine: CompilerEngine | None = None,
) -> str:
    """Convert SCSS text to CSS.

    Parameters
    ----------
    source : str
        SCSS source text.
    options : ConversionOptions
        Include paths and optional filename label. Receives the compiler
        statistics in ``stats`` on success.
    engine : CompilerEngine, optional
        Compiler to use instead of libsass.

    Returns
    -------
    str
        Compiled CSS.

    Raises
    ------
    ScssSyntaxError
        If the compiler reported an error at a line of ``source``.
    ConversionError
        For any other compile failure; the message is the compiler's own.
    """
    from .api import convert as _impl

    return _impl(source, options, engine=engine)


def convert_file_to_css(
    input_path: Path,
    output_path: Path | None = None,
    *,
    include_paths: Iterable[str] | None = None,
    filename: str | None = None,
    output_style: OutputStyle = "nested",
    engine: CompilerEngine | None = None,
) -> ConversionResult:
    """Convert an SCSS file to CSS.

    Parameters
    ----------
    input_path : Path
        SCSS file to compile.
    output_path : Path | None, default=None
        Where to write the CSS. Nothing is written when omitted.
    include_paths : Iterable[str], optional
        Extra directories searched before the file's own directory.
    filename : str, optional
        Label used in error messages. Defaults to ``input_path.name``.
    output_style : str, default="nested"
        libsass output style.
    engine : CompilerEngine, optional
        Compiler to use instead of libsass.
    """
    from .api import convert_file_to_css as _impl

    return _impl(
        input_path,
        output_path,
        include_paths=include_paths,
        filename=filename,
        output_style=output_style,
        engine=engine,
    )


__all__ = [
    "ConversionError",
    "ConversionOptions",
    "ConversionResult",
    "LineOutOfRangeError",
    "ScssSyntaxError",
    "convert",
    "convert_file_to_css",
    "extract_line",
    "format_error",
]
