"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from os import PathLike

from scss_converter.application.options import ConversionOptions
from scss_converter.application.ports import (
    CompilerEngine,
    DiagnosticParser,
    ParsedDiagnostic,
)
from scss_converter.application.results import ConversionResult, EngineOutput
from scss_converter.types import OutputStyle


def build_conversion_options(
    *,
    include_paths: Iterable[str | PathLike[str]] | None = None,
    filename: str | None = None,
    output_style: OutputStyle = "nested",
) -> ConversionOptions:
    """Build conversion options via lazy use-case import."""
    from scss_converter.application.use_cases import build_conversion_options as _impl

    return _impl(
        include_paths=include_paths,
        filename=filename,
        output_style=output_style,
    )


def compile_scss(
    source: str,
    options: ConversionOptions,
    *,
    engine: CompilerEngine | None = None,
    parsers: Sequence[DiagnosticParser] | None = None,
) -> ConversionResult:
    """Compile SCSS text via lazy use-case import."""
    from scss_converter.application.use_cases import compile_scss as _impl

    if parsers is None:
        return _impl(source, options, engine=engine)
    return _impl(source, options, engine=engine, parsers=parsers)


__all__ = [
    "CompilerEngine",
    "ConversionOptions",
    "ConversionResult",
    "DiagnosticParser",
    "EngineOutput",
    "ParsedDiagnostic",
    "build_conversion_options",
    "compile_scss",
]
