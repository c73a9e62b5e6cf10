"""Output schemas for outline commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class OutlineExtractOutput(BaseOutputSchema):
    """Output schema for outline extract command."""
    path: str = Field(..., description="Path of the document that was scanned")
    headings: list[dict[str, Any]] = Field(..., description="Callout headings in document order")
    count: int = Field(..., description="Number of callout headings found")
    success: bool = Field(..., description="Whether extraction completed successfully")


class OutlineShowOutput(BaseOutputSchema):
    """Output schema for outline show command."""
    path: str = Field(..., description="Path of the document that was outlined")
    headings: list[dict[str, Any]] = Field(..., description="Native and callout headings merged in document order")
    native_count: int = Field(..., description="Number of native markdown headings")
    callout_count: int = Field(..., description="Number of callout headings")
    frontmatter: dict[str, Any] = Field(..., description="Document frontmatter, empty if none")
    success: bool = Field(..., description="Whether the outline was built successfully")


register_output_schema("outline", "extract", OutlineExtractOutput)
register_output_schema("outline", "show", OutlineShowOutput)
