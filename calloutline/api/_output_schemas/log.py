"""Output schemas for log commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LogStatusOutput(BaseOutputSchema):
    """Output schema for log status command."""
    log_path: str = Field(..., description="Path to the unified logfile")
    size_bytes: int = Field(..., description="Logfile size after pruning")
    entry_counts: dict[str, int] = Field(..., description="Retained entries per level")
    oldest_entry: str | None = Field(None, description="Timestamp of the oldest retained entry")
    newest_entry: str | None = Field(None, description="Timestamp of the newest retained entry")


register_output_schema("log", "status", LogStatusOutput)
