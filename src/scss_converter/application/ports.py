"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from scss_converter.application.results import EngineOutput


class CompilerEngine(Protocol):
    """Compile SCSS text into CSS."""

    def compile(
        self,
        source: str,
        include_paths: Sequence[str],
        output_style: str,
    ) -> EngineOutput:
        """Compile source, raising ``EngineDiagnostic`` on failure."""


@dataclass(frozen=True)
class ParsedDiagnostic:
    """Location and message pulled out of a compiler diagnostic."""

    label: str
    line_nr: str
    message: str


class DiagnosticParser(Protocol):
    """Recognize one diagnostic shape emitted for inline sources."""

    def parse(self, diagnostic: str) -> ParsedDiagnostic | None:
        """Return the parsed diagnostic, or ``None`` when the shape differs."""
