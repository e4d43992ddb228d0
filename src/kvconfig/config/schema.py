"""Pydantic schema for reader configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReaderConfig(BaseModel):
    """How the reader splits raw bytes into entries."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    line_separator: str = Field(default="\n", min_length=1, max_length=1)
    key_separator: str = Field(default="=", min_length=1, max_length=1)
    max_size: int | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _separators_differ(self) -> ReaderConfig:
        if self.line_separator == self.key_separator:
            raise ValueError("line_separator and key_separator must differ.")
        return self

    @property
    def line_separator_bytes(self) -> bytes:
        return self.line_separator.encode("utf-8")

    @property
    def key_separator_bytes(self) -> bytes:
        return self.key_separator.encode("utf-8")


DEFAULT_CONFIG = ReaderConfig()
