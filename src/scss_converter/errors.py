"""Exception hierarchy for SCSS conversion failures."""

from __future__ import annotations


class ConversionError(Exception):
    """Base error raised when SCSS cannot be converted to CSS.

    A plain ``ConversionError`` carries the compiler diagnostic verbatim; it is
    what callers receive when the diagnostic could not be tied to a line of the
    inline source.
    """

    exit_code = 1


class ScssSyntaxError(ConversionError):
    """Compile error enriched with the offending source line.

    Attributes
    ----------
    original : str
        Diagnostic text exactly as produced by the compiler.
    processed : str
        Trimmed message portion of the diagnostic.
    title : str
        Summary line naming the file label and line number.
    line : str
        Trimmed source line the diagnostic points at.
    line_nr : str
        Line number token as captured from the diagnostic (not an ``int``).
    file : str
        Filename label, or an empty string when none was supplied.
    """

    def __init__(
        self,
        *,
        original: str,
        processed: str,
        title: str,
        line: str,
        line_nr: str,
        file: str = "",
    ) -> None:
        super().__init__(f"{title}\n\t{line}\n{processed}")
        self.original = original
        self.processed = processed
        self.title = title
        self.line = line
        self.line_nr = line_nr
        self.file = file


class LineOutOfRangeError(ConversionError, IndexError):
    """A diagnostic referenced a line the source text does not have.

    This signals a mismatch between the compiler and the source handed to it,
    not a problem in the stylesheet itself.
    """

    def __init__(
        self,
        line_nr: str | int,
        line_count: int,
        original: str | None = None,
    ) -> None:
        message = (
            f"Diagnostic refers to line {line_nr} but the source has "
            f"{line_count} line(s)."
        )
        if original:
            message += f"\nCompiler reported:\n{original}"
        super().__init__(message)
        self.line_nr = line_nr
        self.line_count = line_count
        self.original = original


class EngineDiagnostic(ConversionError):
    """Raw failure reported by a compiler engine adapter."""

    def __init__(self, diagnostic: str) -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
