"""Turn compiler diagnostics into errors that point at the offending line.

Compiler messages are unversioned free text, so every assumption about their
wording lives in the parsers below. Callers only see ``format_error``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from scss_converter.application.options import ConversionOptions
from scss_converter.application.ports import DiagnosticParser, ParsedDiagnostic
from scss_converter.errors import (
    ConversionError,
    LineOutOfRangeError,
    ScssSyntaxError,
)

logger = logging.getLogger(__name__)

TITLE_PREFIX = "An error occurred while parsing the (generated) SCSS"

_SOURCE_STRING_PATTERN = re.compile(
    r"([\w\s]+):(\d+): error: ([\s\S]+)", re.ASCII
)
_STDIN_PATTERN = re.compile(
    r"Error: ([^\n]+)\n[ \t]*on line (\d+)(?::\d+)? of (stdin)(?=,|\s|$)"
)
_LINE_BREAK = re.compile(r"\r\n|\n|\r|\f")


class SourceStringParser:
    """Parse ``source string:<line>: error: <message>`` diagnostics.

    Only the literal ``source string`` label counts: any other label names a
    file on disk or an engine-internal location, and its line number says
    nothing about the inline source.
    """

    label = "source string"

    def parse(self, diagnostic: str) -> ParsedDiagnostic | None:
        match = _SOURCE_STRING_PATTERN.search(diagnostic)
        if match is None or match.group(1) != self.label:
            return None
        return ParsedDiagnostic(
            label=match.group(1),
            line_nr=match.group(2),
            message=match.group(3),
        )


class StdinParser:
    """Parse ``Error: <message>\\n on line <n>:<col> of stdin`` diagnostics.

    This is how libsass 3.5+ reports errors in in-memory sources. Only the
    first location counts, and only when it is ``stdin`` itself: a partial
    named ``stdin.scss`` is a file, not the inline source. The message is
    the single line after ``Error:``.

    libsass numbers lines by LF only while ``extract_line`` also breaks on
    CR and form feed, so for sources using those separators the quoted line
    can differ from the one libsass meant.
    """

    label = "stdin"

    def parse(self, diagnostic: str) -> ParsedDiagnostic | None:
        match = _STDIN_PATTERN.search(diagnostic)
        if match is None:
            return None
        return ParsedDiagnostic(
            label=match.group(3),
            line_nr=match.group(2),
            message=match.group(1),
        )


DEFAULT_PARSERS: tuple[DiagnosticParser, ...] = (SourceStringParser(), StdinParser())


def extract_line(source: str, line_number: str | int) -> str:
    """Return the trimmed 1-based ``line_number`` of ``source``.

    Lines break on LF, CR, CRLF and form feed.

    Raises
    ------
    ValueError
        If ``line_number`` is not an integer token.
    LineOutOfRangeError
        If the source has no such line.
    """
    lines = _LINE_BREAK.split(source)
    index = int(line_number) - 1
    if index < 0 or index >= len(lines):
        raise LineOutOfRangeError(line_number, len(lines))
    return lines[index].strip()


def build_title(line_nr: str, filename: str | None = None) -> str:
    """Build the summary line shown above the offending source line."""
    title = TITLE_PREFIX
    if filename:
        title += f" for {filename}"
    return f"{title} (line: {line_nr}):"


def parse_diagnostic(
    diagnostic: str,
    parsers: Sequence[DiagnosticParser] = DEFAULT_PARSERS,
) -> ParsedDiagnostic | None:
    """Run ``parsers`` in order and return the first match."""
    for parser in parsers:
        parsed = parser.parse(diagnostic)
        if parsed is not None:
            logger.debug(
                "Diagnostic recognized by %s (line %s)",
                type(parser).__name__,
                parsed.line_nr,
            )
            return parsed
    logger.debug("Diagnostic not recognized; passing it through unchanged")
    return None


def format_error(
    diagnostic: str,
    source: str,
    options: ConversionOptions,
    parsers: Sequence[DiagnosticParser] = DEFAULT_PARSERS,
) -> ConversionError:
    """Build the error reported for a failed compile.

    Parameters
    ----------
    diagnostic : str
        Diagnostic text as produced by the compiler.
    source : str
        SCSS source that was compiled.
    options : ConversionOptions
        Request options; only ``filename`` is read.
    parsers : Sequence[DiagnosticParser], optional
        Recognized diagnostic shapes, tried in order.

    Returns
    -------
    ConversionError
        A ``ScssSyntaxError`` when the diagnostic points into the inline
        source, otherwise a plain ``ConversionError`` carrying the diagnostic
        verbatim.

    Raises
    ------
    LineOutOfRangeError
        If a recognized diagnostic points past the end of ``source``; the
        diagnostic is kept on ``original``.
    """
    parsed = parse_diagnostic(diagnostic, parsers)
    if parsed is None:
        return ConversionError(diagnostic)

    try:
        line = extract_line(source, parsed.line_nr)
    except LineOutOfRangeError as exc:
        raise LineOutOfRangeError(
            parsed.line_nr, exc.line_count, original=diagnostic
        ) from exc
    return ScssSyntaxError(
        original=diagnostic,
        processed=parsed.message.strip(),
        title=build_title(parsed.line_nr, options.filename),
        line=line,
        line_nr=parsed.line_nr,
        file=options.filename or "",
    )
