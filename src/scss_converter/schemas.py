"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scss_converter.types import OutputStyle


class ScssConversionConfig(BaseModel):
    """Validated input for in-memory SCSS conversion."""

    model_config = ConfigDict(extra="forbid")

    include_paths: list[str] = Field(default_factory=list)
    filename: str | None = None
    output_style: OutputStyle = "nested"

    @field_validator("include_paths", mode="before")
    @classmethod
    def _normalize_include_paths(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, (str, bytes)):
            raise ValueError(
                "include_paths must be a sequence of paths, not a single string."
            )
        if isinstance(value, (list, tuple)):
            return [
                os.fspath(item) if isinstance(item, os.PathLike) else item
                for item in value
            ]
        return value
