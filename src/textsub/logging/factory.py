from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, TextIO

from textsub.logging.helpers import setup_base_logger, get_logger

if TYPE_CHECKING:
    from textsub.runtime.config import EngineConfig


class DefaultLoggerFactory:
    """Hand out 'textsub.*' loggers, configuring the base logger on first use."""

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_config(cls, cfg: 'EngineConfig', *, verbose: bool = False, json_logs: bool = False) -> 'DefaultLoggerFactory':
        """Build a factory from an EngineConfig; *verbose* forces DEBUG."""
        return cls(json_logs=json_logs or cfg.json_logs, level=logging.DEBUG if verbose else cfg.log_level)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True
        return get_logger(name)
