"""Logging helpers scoped to the ``textsub`` logger namespace."""
from .helpers import get_logger, setup_base_logger, trace

__all__ = ["get_logger", "setup_base_logger", "trace"]
