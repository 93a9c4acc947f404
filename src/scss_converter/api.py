"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from scss_converter.application.options import ConversionOptions
from scss_converter.application.ports import CompilerEngine
from scss_converter.application.results import ConversionResult
from scss_converter.application.use_cases import build_conversion_options
from scss_converter.application.use_cases import compile_scss
from scss_converter.errors import ConversionError
from scss_converter.types import OutputStyle


def convert(
    source: str,
    options: ConversionOptions,
    *,
    engine: Optional[CompilerEngine] = None,
) -> str:
    """Compile SCSS text and return the CSS verbatim.

    On success the compiler statistics are written to ``options.stats``.
    On failure the error built by ``diagnostics.format_error`` is raised.
    """
    result = compile_scss(source, options, engine=engine)
    options.stats = result.stats
    return result.css


def read_scss_file(input_path: Path) -> str:
    """Read an SCSS file as UTF-8 text."""
    try:
        return input_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConversionError(f"Cannot read SCSS file {input_path}: {exc}") from exc


def build_file_conversion_options(
    input_path: Path,
    *,
    include_paths: Optional[Iterable[str]] = None,
    filename: Optional[str] = None,
    output_style: OutputStyle = "nested",
) -> ConversionOptions:
    """Build options for compiling ``input_path``.

    The file's directory is searched after ``include_paths`` so relative
    imports resolve as they would for a file-based compile. ``filename``
    defaults to the input file name and only labels error messages.
    """
    return build_conversion_options(
        include_paths=[*(include_paths or ()), str(input_path.parent)],
        filename=filename or input_path.name,
        output_style=output_style,
    )


def convert_file_to_css(
    input_path: Path,
    output_path: Optional[Path] = None,
    *,
    include_paths: Optional[Iterable[str]] = None,
    filename: Optional[str] = None,
    output_style: OutputStyle = "nested",
    engine: Optional[CompilerEngine] = None,
) -> ConversionResult:
    """Compile an SCSS file, optionally writing the CSS to ``output_path``.

    Options are built by ``build_file_conversion_options``.
    """
    source = read_scss_file(input_path)
    options = build_file_conversion_options(
        input_path,
        include_paths=include_paths,
        filename=filename,
        output_style=output_style,
    )
    result = compile_scss(source, options, engine=engine)
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.css, encoding="utf-8")
    return result
