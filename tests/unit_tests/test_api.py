"""Unit tests for the public conversion API."""

from __future__ import annotations

from pathlib import Path

import pytest

import scss_converter
from scss_converter.api import (
    build_conversion_options,
    build_file_conversion_options,
    convert,
    convert_file_to_css,
)
from scss_converter.errors import ConversionError, ScssSyntaxError


def test_convert_returns_css_and_writes_stats(fake_engine) -> None:
    """Ensure stats are written back onto the caller's options."""
    options = build_conversion_options(include_paths=["vendor"])

    css = convert("a { b { color: red; } }", options, engine=fake_engine)

    assert css == fake_engine.css
    assert options.stats == {"entry": "data", "start": 1, "end": 3, "duration": 2}


def test_convert_failure_leaves_stats_unset(failing_engine) -> None:
    """Ensure a failed compile raises and does not write stats."""
    options = build_conversion_options()

    with pytest.raises(ScssSyntaxError):
        convert("a {}\np { color: $missing; }", options, engine=failing_engine)

    assert options.stats is None


def test_package_level_convert_delegates(fake_engine) -> None:
    """Ensure the top-level wrapper forwards to the API layer."""
    options = scss_converter.ConversionOptions()

    css = scss_converter.convert("a {}", options, engine=fake_engine)

    assert css == fake_engine.css
    assert options.stats is not None


def test_convert_file_reads_labels_and_writes(tmp_path: Path, fake_engine) -> None:
    """Ensure file conversion adds the file's directory and writes output."""
    src = tmp_path / "styles" / "main.scss"
    src.parent.mkdir()
    src.write_text("a { b { color: red; } }", encoding="utf-8")
    out = tmp_path / "build" / "main.css"

    result = convert_file_to_css(
        src, out, include_paths=["vendor"], engine=fake_engine
    )

    assert out.read_text(encoding="utf-8") == fake_engine.css
    assert result.filename == "main.scss"
    assert fake_engine.calls[0][1] == ["vendor", str(src.parent)]


def test_convert_file_error_uses_file_name(tmp_path: Path, failing_engine) -> None:
    """Ensure errors from file conversion name the file."""
    src = tmp_path / "theme.scss"
    src.write_text("a {}\np { color: $missing; }\n", encoding="utf-8")

    with pytest.raises(ScssSyntaxError) as info:
        convert_file_to_css(src, engine=failing_engine)

    assert info.value.file == "theme.scss"
    assert "for theme.scss" in str(info.value)


def test_convert_file_missing_input(tmp_path: Path, fake_engine) -> None:
    """Ensure unreadable input surfaces as ``ConversionError``."""
    with pytest.raises(ConversionError, match="Cannot read SCSS file"):
        convert_file_to_css(tmp_path / "absent.scss", engine=fake_engine)


def test_file_options_append_file_directory(tmp_path: Path) -> None:
    """Ensure file options search extra paths first, then the file's directory."""
    src = tmp_path / "scss" / "site.scss"

    options = build_file_conversion_options(
        src, include_paths=["vendor"], output_style="expanded"
    )

    assert options.include_paths == ["vendor", str(src.parent)]
    assert options.filename == "site.scss"
    assert options.output_style == "expanded"
    assert build_file_conversion_options(src, filename="label.scss").filename == "label.scss"


def test_package_level_file_conversion_accepts_engine(
    tmp_path: Path, fake_engine
) -> None:
    """Ensure the top-level file wrapper forwards a custom engine."""
    src = tmp_path / "main.scss"
    src.write_text("a {}", encoding="utf-8")

    result = scss_converter.convert_file_to_css(src, engine=fake_engine)

    assert result.css == fake_engine.css
    assert fake_engine.calls[0][1] == [str(tmp_path)]
