"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from scss_converter.types import CompilationStats


@dataclass(frozen=True)
class EngineOutput:
    """Raw output of a compiler engine."""

    css: str
    stats: CompilationStats


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    css: str
    stats: CompilationStats
    filename: str | None = None
