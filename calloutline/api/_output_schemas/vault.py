"""Output schemas for vault commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class VaultWatchOutput(BaseOutputSchema):
    """Output schema for vault watch command."""
    base_dir: str = Field(..., description="Vault root directory that was watched")
    cycles: int = Field(..., description="Number of sync cycles completed")
    documents_updated: list[str] = Field(..., description="Documents whose callout headings were re-extracted")
    documents_forgotten: list[str] = Field(..., description="Documents dropped from the heading cache")
    success: bool = Field(..., description="Whether the watch ended cleanly")


register_output_schema("vault", "watch", VaultWatchOutput)
