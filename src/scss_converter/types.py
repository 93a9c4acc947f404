"""Shared type aliases for converter modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, TypeAlias

OutputStyle: TypeAlias = Literal["nested", "expanded", "compact", "compressed"]

StatsScalar: TypeAlias = str | int | float | bool | None
StatsValue: TypeAlias = StatsScalar | tuple[str, ...] | list[str]
CompilationStats: TypeAlias = Mapping[str, StatsValue]
