"""
Engine settings read from STREAMTA_* environment variables.
A .env file in the working directory fills in variables that are unset.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class LogConfig:
    """Console/file logging settings (STREAMTA_LOG_*)."""
    level: str = "INFO"
    log_dir: str = ""        # Empty = console only
    colors: bool = True

    def __post_init__(self):
        self.level = self.level.upper()
        if not isinstance(logging.getLevelName(self.level), int):
            raise ValueError(
                f"STREAMTA_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, "
                f"got '{self.level}'"
            )


@dataclass
class IndicatorsConfig:
    """
    Where indicator YAML configs live.

    load_indicator_configs() scans this directory when no explicit
    directory is passed.
    """
    config_dir: Path = Path("configs/indicators")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """
    Process-wide settings singleton.

    Built once from the environment; reload() rebuilds it, e.g. after a
    test changes variables.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.log = self._load_log_config()
        self.indicators = self._load_indicators_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """STREAMTA_LOG_LEVEL, STREAMTA_LOG_DIR, STREAMTA_LOG_COLORS."""
        return LogConfig(
            level=os.getenv("STREAMTA_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("STREAMTA_LOG_DIR", ""),
            colors=_env_bool("STREAMTA_LOG_COLORS", True),
        )

    def _load_indicators_config(self) -> IndicatorsConfig:
        """Load indicator config locations from environment."""
        return IndicatorsConfig(
            config_dir=Path(os.getenv("STREAMTA_INDICATOR_DIR", "configs/indicators")),
        )

    @classmethod
    def reload(cls, env_file: str = ".env") -> 'Config':
        """Drop the cached instance and read the environment again."""
        cls._instance = None
        return cls(env_file)


def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
