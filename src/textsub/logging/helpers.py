from __future__ import annotations

"""Small logging helpers to standardize textsub logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'textsub' logger.
    - get_logger: Namespaced logger factory ('textsub.*').
    - trace utilities gated by TEXTSUB_TRACE.

The library itself never configures handlers on import; only the CLI (or an
explicit DefaultLoggerFactory) calls setup_base_logger.
"""

import logging
import os
from typing import Optional, TextIO


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'textsub.driver').
        - msg: Formatted message string.
        - version: textsub.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import, the package __init__ imports this module.
            from textsub import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("TEXTSUB_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return JsonLogFormatter()
    return logging.Formatter("%(levelname)s: %(message)s")


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'textsub' logger and return it.

    A second call re-applies *level* and *json_logs* to the handler installed
    by the first one; handlers attached by other code are left untouched.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger("textsub")
    base.setLevel(level)

    owned = [h for h in base.handlers if getattr(h, "_textsub_base", False)]
    if owned:
        for handler in owned:
            handler.setFormatter(_make_formatter(json_logs))
        return base
    if base.handlers:
        return base

    import sys as _sys

    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    handler.setFormatter(_make_formatter(json_logs))
    handler._textsub_base = True  # type: ignore[attr-defined]
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'textsub'."""
    if not name or name == "textsub":
        return logging.getLogger("textsub")
    if name.startswith("textsub."):
        return logging.getLogger(name)
    return logging.getLogger(f"textsub.{name}")


def is_trace_enabled() -> bool:
    """Check if match tracing is enabled via env flag."""
    return os.getenv("TEXTSUB_TRACE") == "1"


def trace(logger: logging.Logger, message: str, *, enabled: bool | None = None, **ctx) -> None:
    """Emit debug-verbosity trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        enabled: Explicit switch; falls back to the TEXTSUB_TRACE env flag.
        **ctx: Optional structured context appended in debug format.
    """
    if not (is_trace_enabled() if enabled is None else enabled):
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
