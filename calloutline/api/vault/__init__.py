"""Vault API module."""

from .._output_schemas.vault import VaultWatchOutput

__all__ = ["VaultWatchOutput"]
