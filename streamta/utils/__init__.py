"""Utility modules."""

from .logger import EngineLogger, get_logger, setup_logger

__all__ = ["EngineLogger", "get_logger", "setup_logger"]
