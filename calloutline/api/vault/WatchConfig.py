"""Vault watch configuration (simple, required fields only)."""

from pydantic import BaseModel, ConfigDict, Field


class WatchConfig(BaseModel):
    """Vault watch configuration."""

    model_config = ConfigDict(extra="forbid")

    sync_interval_secs: float = Field(..., gt=0, description="Interval to poll/flush filesystem events")
