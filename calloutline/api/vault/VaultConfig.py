"""Vault configuration management."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    base_dir: str = Field(..., description="Path to vault root directory")

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from ..config.normalize_path import normalize_path

        return str(normalize_path(v))
