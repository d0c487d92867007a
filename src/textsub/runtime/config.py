from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from textsub.constants import DEFAULT_TEMPLATE_CACHE_SIZE
from textsub.logging.helpers import get_logger

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration blob used to seed the EngineBuilder.

    Environment variables read by :meth:`from_env`:

        TEXTSUB_TEMPLATE_CACHE  compiled-template cache size (0 disables it)
        TEXTSUB_TRACE           '1' enables per-call debug tracing
        TEXTSUB_JSON_LOGS       '1' selects the JSON log formatter
        TEXTSUB_LOG_LEVEL       level name or number for the base logger
    """
    template_cache_size: int = DEFAULT_TEMPLATE_CACHE_SIZE
    trace: bool = False
    json_logs: bool = False
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        if self.template_cache_size < 0:
            raise ValueError('template_cache_size must be >= 0')

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> 'EngineConfig':
        env = os.environ if environ is None else environ
        log = logger or get_logger('config')

        cache_size = DEFAULT_TEMPLATE_CACHE_SIZE
        raw_cache = (env.get('TEXTSUB_TEMPLATE_CACHE') or '').strip()
        if raw_cache:
            try:
                cache_size = int(raw_cache)
                if cache_size < 0:
                    raise ValueError(raw_cache)
            except ValueError:
                log.warning('⚠  invalid TEXTSUB_TEMPLATE_CACHE %r, using %d', raw_cache, DEFAULT_TEMPLATE_CACHE_SIZE)
                cache_size = DEFAULT_TEMPLATE_CACHE_SIZE

        level = logging.WARNING
        raw_level = (env.get('TEXTSUB_LOG_LEVEL') or '').strip()
        if raw_level:
            if raw_level.isdigit():
                level = int(raw_level)
            else:
                resolved = logging.getLevelName(raw_level.upper())
                if isinstance(resolved, int):
                    level = resolved
                else:
                    log.warning('⚠  unknown TEXTSUB_LOG_LEVEL %r, using WARNING', raw_level)

        return cls(
            template_cache_size=cache_size,
            trace=(env.get('TEXTSUB_TRACE') or '').strip().lower() in _TRUE_VALUES,
            json_logs=(env.get('TEXTSUB_JSON_LOGS') or '').strip().lower() in _TRUE_VALUES,
            log_level=level,
        )
