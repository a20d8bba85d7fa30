"""
Indicator config loader.

Indicator configs can be kept as YAML files:

    indicator: CoppockCurve
    params:
      ma1: wma-10
      period2: 14
      source: close

Every param goes through IndicatorConfig.set(), so a file accepts exactly
the string forms config tooling does. Omitted params keep their defaults.

Architecture Principle: Pure Data
- load_indicator_config is a pure function (path -> config)
- Only save_indicator_config touches the filesystem for writing
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..config.config import get_config
from ..core.indicator import IndicatorConfig
from ..core.registry import create_indicator_config
from ..utils.logger import get_logger

YAML_SUFFIXES = (".yml", ".yaml")


class IndicatorConfigNotFoundError(Exception):
    """Raised when an indicator config file cannot be found."""

    def __init__(self, path: Path, searched_paths: list[Path] | None = None):
        self.path = path
        self.searched_paths = searched_paths or [path]
        paths_str = ", ".join(str(p) for p in self.searched_paths)
        super().__init__(f"Indicator config '{path}' not found. Searched: {paths_str}")


def _resolve_dir(directory: Path | str | None) -> Path:
    if directory is None:
        return get_config().indicators.config_dir
    return Path(directory)


def config_from_dict(data: dict[str, Any], origin: str = "<dict>") -> IndicatorConfig:
    """
    Build a config from a parsed YAML document.

    Raises:
        ValueError: If the document shape is wrong
        IndicatorNotFoundError: If the indicator name is not registered
        ParameterParseError: If a param is unknown or unparsable
    """
    if not isinstance(data, dict):
        raise ValueError(f"Indicator config must be a mapping: {origin}")
    if "indicator" not in data:
        raise ValueError(f"Indicator config is missing 'indicator': {origin}")

    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"Indicator config 'params' must be a mapping: {origin}")

    return create_indicator_config(str(data["indicator"]), params)


def load_indicator_config(path: Path | str) -> IndicatorConfig:
    """
    Load one indicator config from a YAML file.

    Args:
        path: File to read

    Returns:
        Config with every listed param applied

    Raises:
        IndicatorConfigNotFoundError: If the file does not exist
        ValueError: If the file is empty or malformed
        IndicatorNotFoundError: If the indicator name is not registered
        ParameterParseError: If a param is unknown or unparsable
    """
    path = Path(path)
    if not path.is_file():
        raise IndicatorConfigNotFoundError(path)

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Indicator config file is empty: {path}")

    cfg = config_from_dict(data, str(path))
    get_logger().indicator("LOADED", cfg.NAME, cfg.to_params(), path=path)
    return cfg


def list_indicator_configs(directory: Path | str | None = None) -> list[Path]:
    """
    List indicator config files in a directory.

    Files starting with an underscore are skipped.
    Defaults to the configured indicator directory.
    """
    directory = _resolve_dir(directory)
    if not directory.is_dir():
        return []

    return sorted(
        p for p in directory.iterdir()
        if p.suffix in YAML_SUFFIXES and not p.stem.startswith("_")
    )


def load_indicator_configs(directory: Path | str | None = None) -> dict[str, IndicatorConfig]:
    """
    Load every indicator config in a directory, keyed by file stem.

    Raises:
        IndicatorConfigNotFoundError: If the directory does not exist
    """
    directory = _resolve_dir(directory)
    if not directory.is_dir():
        raise IndicatorConfigNotFoundError(directory)

    return {p.stem: load_indicator_config(p) for p in list_indicator_configs(directory)}


def dump_indicator_config(cfg: IndicatorConfig) -> dict[str, Any]:
    """Document form of a config; config_from_dict() reverses it."""
    return {"indicator": cfg.NAME, "params": cfg.to_params()}


def save_indicator_config(cfg: IndicatorConfig, path: Path | str) -> Path:
    """
    Save a config to a YAML file, creating parent directories.

    Returns:
        Path to saved file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="\n") as f:
        yaml.dump(
            dump_indicator_config(cfg),
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    return path
