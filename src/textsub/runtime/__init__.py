"""Configuration and wiring of the replace engine."""
from .config import EngineConfig
from .engine import EngineBuilder, ReplaceEngine, get_default_engine, reset_default_engine

__all__ = ["EngineConfig", "EngineBuilder", "ReplaceEngine", "get_default_engine", "reset_default_engine"]
