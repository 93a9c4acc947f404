"""Application use-cases orchestrating SCSS conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from os import PathLike

from pydantic import ValidationError

from scss_converter.adapters.engines import LibsassEngine
from scss_converter.application.options import ConversionOptions
from scss_converter.application.ports import CompilerEngine, DiagnosticParser
from scss_converter.application.results import ConversionResult
from scss_converter.diagnostics import DEFAULT_PARSERS, format_error
from scss_converter.errors import ConversionError, EngineDiagnostic
from scss_converter.schemas import ScssConversionConfig
from scss_converter.types import OutputStyle

logger = logging.getLogger(__name__)


def compile_scss(
    source: str,
    options: ConversionOptions,
    *,
    engine: CompilerEngine | None = None,
    parsers: Sequence[DiagnosticParser] = DEFAULT_PARSERS,
) -> ConversionResult:
    """Use-case: compile SCSS text into CSS.

    ``options`` is read but never modified; statistics come back on the
    result.
    """
    if not isinstance(source, str):
        raise ConversionError(
            f"SCSS source must be text, got {type(source).__name__}."
        )
    try:
        config = ScssConversionConfig(
            include_paths=options.include_paths,
            filename=options.filename,
            output_style=options.output_style,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid SCSS conversion parameters: {exc}") from exc

    engine = engine or LibsassEngine()
    logger.debug(
        "Compiling %s (%d include path(s), style=%s)",
        config.filename or "<inline source>",
        len(config.include_paths),
        config.output_style,
    )
    try:
        output = engine.compile(source, config.include_paths, config.output_style)
    except EngineDiagnostic as exc:
        raise format_error(exc.diagnostic, source, options, parsers) from exc

    return ConversionResult(
        css=output.css,
        stats=output.stats,
        filename=config.filename,
    )


def build_conversion_options(
    *,
    include_paths: Iterable[str | PathLike[str]] | None = None,
    filename: str | None = None,
    output_style: OutputStyle = "nested",
) -> ConversionOptions:
    """Build option object from command/API params."""
    return ConversionOptions(
        include_paths=[str(path) for path in include_paths or ()],
        filename=filename,
        output_style=output_style,
    )
