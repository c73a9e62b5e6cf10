"""Outline (callout extraction) configuration."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ._constants import (
    CALLOUT_HEADING_LEVEL,
    DEFAULT_ELLIPSIS,
    DEFAULT_EXTENSIONS,
    DEFAULT_MAX_HEADING_LENGTH,
    DEFAULT_ROLE_TAGS,
)

_ROLE_TAG_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class OutlineConfig(BaseModel):
    """Callout extraction configuration."""

    model_config = ConfigDict(extra="forbid")

    role_tags: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ROLE_TAGS), description="Callout role tags that open a heading block"
    )
    max_heading_length: int = Field(DEFAULT_MAX_HEADING_LENGTH, description="Longest heading text before truncation")
    ellipsis: str = Field(DEFAULT_ELLIPSIS, description="Marker appended to truncated heading text")
    heading_level: int = Field(CALLOUT_HEADING_LEVEL, ge=1, le=6, description="Level given to callout headings")
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS), description="File extensions treated as text documents"
    )

    @field_validator("role_tags")
    @classmethod
    def _validate_role_tags(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("role_tags must not be empty")
        for tag in v:
            if not _ROLE_TAG_PATTERN.match(tag):
                raise ValueError(f"Invalid role tag {tag!r}: use letters, digits, '-' or '_'")
        return v

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    @model_validator(mode="after")
    def _validate_length(self) -> "OutlineConfig":
        if self.max_heading_length <= len(self.ellipsis):
            raise ValueError(
                f"max_heading_length ({self.max_heading_length}) must exceed the ellipsis length ({len(self.ellipsis)})"
            )
        return self
