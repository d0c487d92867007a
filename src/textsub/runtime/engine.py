from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from textsub.core.models import ReplacementSpec
from textsub.logging.helpers import get_logger
from textsub.processing.replace_driver import MatchArg, ReplaceDriver
from textsub.processing.template_compiler import TemplateCompiler
from textsub.processing.template_renderer import TemplateRenderer
from textsub.runtime.config import EngineConfig


class ReplaceEngine:
    """Façade bundling a template compiler and a replace driver."""

    def __init__(self, *, config: EngineConfig, compiler: TemplateCompiler, driver: ReplaceDriver) -> None:
        self.config = config
        self.compiler = compiler
        self.driver = driver

    def compile_template(self, raw: str) -> ReplacementSpec:
        return self.compiler.compile(raw)

    def replace(self, subject: str, match: MatchArg, replacement: object) -> str:
        return self.driver.replace(subject, match, replacement)

    def replace_first(self, subject: str, match: MatchArg, replacement: object) -> str:
        return self.driver.replace_first(subject, match, replacement)

    def split(self, subject: str, pattern: MatchArg, limit: Optional[int] = None) -> List[str]:
        return self.driver.split(subject, pattern, limit)


@dataclass
class EngineBuilder:
    """Composable builder that wires default components into a ReplaceEngine."""
    config: EngineConfig = field(default_factory=EngineConfig)
    logger: Optional[logging.Logger] = None
    compiler_factory: Optional[Callable[[EngineConfig, logging.Logger], TemplateCompiler]] = None
    renderer: Optional[TemplateRenderer] = None

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> 'EngineBuilder':
        return cls(config=cfg)

    def with_logger(self, logger: logging.Logger) -> 'EngineBuilder':
        self.logger = logger
        return self

    def build(self) -> ReplaceEngine:
        cfg = self.config
        log = self.logger or get_logger('engine')
        if self.compiler_factory is not None:
            compiler = self.compiler_factory(cfg, log)
        else:
            compiler = TemplateCompiler(cache_size=cfg.template_cache_size, logger=log, trace_enabled=cfg.trace)
        driver = ReplaceDriver(
            compiler=compiler,
            renderer=self.renderer or TemplateRenderer(),
            logger=log,
            trace_enabled=cfg.trace,
        )
        return ReplaceEngine(config=cfg, compiler=compiler, driver=driver)


_DEFAULT_ENGINE: Optional[ReplaceEngine] = None
_DEFAULT_LOCK = threading.Lock()


def get_default_engine() -> ReplaceEngine:
    """Return the process-wide engine, built from the environment on first use."""
    global _DEFAULT_ENGINE
    engine = _DEFAULT_ENGINE
    if engine is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_ENGINE is None:
                _DEFAULT_ENGINE = EngineBuilder.from_config(EngineConfig.from_env()).build()
            engine = _DEFAULT_ENGINE
    return engine


def reset_default_engine(engine: Optional[ReplaceEngine] = None) -> None:
    """Replace (or drop, when *engine* is None) the process-wide engine."""
    global _DEFAULT_ENGINE
    with _DEFAULT_LOCK:
        _DEFAULT_ENGINE = engine
