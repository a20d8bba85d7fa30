"""
Engine logging.

All records go through the "streamta" logger, which does not propagate to
the root logger. Console output is colored by level unless disabled; a
plain-text daily file is added when a log directory is configured.

Indicators log at configuration time only (init accepted or rejected,
config loaded). Per-bar next() calls never log.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Iterator, Optional

from ..config.config import get_config

LOGGER_NAME = "streamta"

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name with ANSI codes."""

    RESET = "\033[0m"
    PALETTE = {
        logging.DEBUG: "\033[96m",            # cyan
        logging.INFO: "\033[92m",             # green
        logging.WARNING: "\033[93m",          # yellow
        logging.ERROR: "\033[91m",            # red
        logging.CRITICAL: "\033[1m\033[91m",  # bold red
    }

    def format(self, record):
        # Color a copy; other handlers share the original record
        colored = logging.makeLogRecord(record.__dict__)
        code = self.PALETTE.get(record.levelno, "")
        colored.levelname = f"{code}[{record.levelname}]{self.RESET}"
        return super().format(colored)


class EngineLogger:
    """
    Process-wide logger for the indicator engine.

    Standard logging calls (info, debug, warning, error, exception) are
    forwarded to the underlying "streamta" logger; indicator() adds a
    structured lifecycle record on top.
    """

    _instance: Optional['EngineLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "", log_level: str = "INFO", colors: bool = True):
        if EngineLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        self.colors = colors
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(log_level.upper())
        self.logger.propagate = False
        self.logger.handlers.clear()
        for handler in self._handlers():
            self.logger.addHandler(handler)

        EngineLogger._initialized = True

    def _handlers(self) -> Iterator[logging.Handler]:
        console = logging.StreamHandler()
        console_formatter = ColoredFormatter if self.colors else logging.Formatter
        console.setFormatter(console_formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        yield console

        if self.log_dir is None:
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)
        path = self.log_dir / f"{LOGGER_NAME}_{date.today():%Y%m%d}.log"
        daily = logging.FileHandler(path, encoding="utf-8")
        daily.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        yield daily

    def __getattr__(self, name: str):
        # Only reached for names not set on the instance
        if name in ("debug", "info", "warning", "error", "exception", "critical"):
            return getattr(self.logger, name)
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def indicator(self, action: str, name: str, params: Optional[dict] = None, **fields):
        """
        Log an indicator lifecycle event.

        Rendered as "[ACTION] | name=<name> | key=value | ...". REJECTED is a
        warning; INIT and LOADED are debug records.

        Args:
            action: INIT, REJECTED or LOADED
            name: Registered indicator name
            params: Config params in their string form
            **fields: Extra key/value pairs, e.g. path
        """
        items = {**(params or {}), **fields}
        msg = " | ".join([f"[{action}]", f"name={name}"] + [f"{k}={v}" for k, v in items.items()])
        level = logging.WARNING if action == "REJECTED" else logging.DEBUG
        self.logger.log(level, msg)


_logger: Optional[EngineLogger] = None


def get_logger() -> EngineLogger:
    """Return the engine logger, building it from get_config().log on first use."""
    global _logger
    if _logger is None:
        settings = get_config().log
        _logger = EngineLogger(settings.log_dir, settings.level, settings.colors)
    return _logger


def setup_logger(log_dir: str = "", log_level: str = "INFO", colors: bool = True) -> EngineLogger:
    """Rebuild the engine logger with explicit settings, replacing its handlers."""
    global _logger
    EngineLogger._instance = None
    EngineLogger._initialized = False
    _logger = EngineLogger(log_dir, log_level, colors)
    return _logger
