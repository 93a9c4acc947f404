"""Compiler engine adapters."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from types import ModuleType

from scss_converter.application.results import EngineOutput
from scss_converter.errors import ConversionError, EngineDiagnostic

logger = logging.getLogger(__name__)


def _load_sass() -> ModuleType:
    try:
        import sass
    except ImportError as exc:
        raise ConversionError(
            "SCSS compilation requires libsass to be installed (pip install libsass)."
        ) from exc
    return sass


def _now_ms() -> int:
    return int(time.time() * 1000)


class LibsassEngine:
    """Compile SCSS text with libsass."""

    def compile(
        self,
        source: str,
        include_paths: Sequence[str],
        output_style: str,
    ) -> EngineOutput:
        """Compile ``source`` synchronously.

        Parameters
        ----------
        source : str
            SCSS text, compiled as an in-memory source.
        include_paths : Sequence[str]
            Directories searched, in order, to resolve ``@import``.
        output_style : str
            One of libsass' output styles.

        Returns
        -------
        EngineOutput
            CSS text and node-sass style statistics (``entry``, ``start``,
            ``end``, ``duration`` in milliseconds, ``include_paths``).

        Raises
        ------
        EngineDiagnostic
            If libsass rejects the source.
        """
        sass = _load_sass()
        start = _now_ms()
        try:
            css = sass.compile(
                string=source,
                include_paths=list(include_paths),
                output_style=output_style,
            )
        except sass.CompileError as exc:
            raise EngineDiagnostic(str(exc)) from exc
        end = _now_ms()
        logger.debug(
            "libsass compiled %d chars of SCSS into %d chars of CSS in %d ms",
            len(source),
            len(css),
            end - start,
        )
        return EngineOutput(
            css=css,
            stats={
                "entry": "data",
                "start": start,
                "end": end,
                "duration": end - start,
                "include_paths": tuple(include_paths),
            },
        )
