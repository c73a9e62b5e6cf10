"""Log module - centralized logging."""

from .._output_schemas.log import LogStatusOutput

__all__ = ["LogStatusOutput"]
