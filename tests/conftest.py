"""Shared pytest configuration, marker assignment and engine doubles."""

from __future__ import annotations

from pathlib import Path

import pytest

from scss_converter.application.results import EngineOutput
from scss_converter.errors import EngineDiagnostic


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeEngine:
    """Compiler engine double that records calls."""

    def __init__(
        self,
        css: str = "a b {\n  color: red; }\n",
        diagnostic: str | None = None,
    ) -> None:
        self.css = css
        self.diagnostic = diagnostic
        self.calls: list[tuple[str, list[str], str]] = []

    def compile(
        self, source: str, include_paths: list[str], output_style: str
    ) -> EngineOutput:
        self.calls.append((source, list(include_paths), output_style))
        if self.diagnostic is not None:
            raise EngineDiagnostic(self.diagnostic)
        return EngineOutput(
            css=self.css,
            stats={"entry": "data", "start": 1, "end": 3, "duration": 2},
        )


@pytest.fixture
def fake_engine() -> FakeEngine:
    """Engine that succeeds with a fixed stylesheet."""
    return FakeEngine()


@pytest.fixture
def failing_engine() -> FakeEngine:
    """Engine that rejects line 2 of the source."""
    return FakeEngine(diagnostic="source string:2: error: Undefined variable: \"$missing\".\n")


@pytest.fixture
def make_engine() -> type[FakeEngine]:
    """Factory for engines with a custom stylesheet or diagnostic."""
    return FakeEngine
