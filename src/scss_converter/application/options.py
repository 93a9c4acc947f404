"""Option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass, field

from scss_converter.types import CompilationStats, OutputStyle


@dataclass
class ConversionOptions:
    """Per-request conversion options.

    Not frozen: ``api.convert`` writes the compiler statistics back onto
    ``stats`` after a successful compile. Callers sharing one instance across
    threads must synchronize themselves.
    """

    include_paths: list[str] = field(default_factory=list)
    filename: str | None = None
    output_style: OutputStyle = "nested"
    stats: CompilationStats | None = None
