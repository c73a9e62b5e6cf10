"""Outline API module."""

from .._output_schemas.outline import OutlineExtractOutput, OutlineShowOutput

__all__ = ["OutlineExtractOutput", "OutlineShowOutput"]
