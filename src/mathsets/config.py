"""
mathsets Configuration.

Holds the process-wide settings that gate expensive enumeration, and
helpers to load them from TOML and to set up logging.

Example mathsets.toml:
    [mathsets]
    power_set_limit = 20
    log_level = "DEBUG"

The same keys are accepted under [tool.mathsets] in a pyproject.toml.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from mathsets.errors import ConfigError

logger = logging.getLogger(__name__)

# Largest power set origin whose subset masks still fit a signed 64-bit word.
MAX_POWER_SET_LIMIT = 62

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class MathSetsConfig:
    """Configuration for the set engine."""

    power_set_limit: int = 30
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if isinstance(self.power_set_limit, bool) or not isinstance(self.power_set_limit, int):
            raise ConfigError(f"power_set_limit must be an integer, got {self.power_set_limit!r}")
        if not 0 <= self.power_set_limit <= MAX_POWER_SET_LIMIT:
            raise ConfigError(
                f"power_set_limit must be between 0 and {MAX_POWER_SET_LIMIT}, "
                f"got {self.power_set_limit}"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"unknown log_level {self.log_level!r}")

    def with_overrides(self, **overrides: Any) -> MathSetsConfig:
        """Return a copy with the given fields replaced."""
        _check_keys(overrides)
        return replace(self, **overrides)


_active_config = MathSetsConfig()


def get_config() -> MathSetsConfig:
    """Return the active configuration."""
    return _active_config


def set_config(config: MathSetsConfig) -> MathSetsConfig:
    """
    Install a new active configuration.

    Returns:
        The previously active configuration, so callers can restore it.
    """
    global _active_config
    previous = _active_config
    _active_config = config
    logger.debug(f"Active configuration set to {config}")
    return previous


def load_config(path: str | Path) -> MathSetsConfig:
    """
    Load configuration from a TOML file.

    Reads the [mathsets] table of a mathsets.toml, or the [tool.mathsets]
    table of a pyproject.toml. Missing tables yield the defaults.

    Raises:
        ConfigError: If the file cannot be parsed or holds unknown keys
    """
    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(f"configuration file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    if path.name == "pyproject.toml":
        table = data.get("tool", {}).get("mathsets", {})
    else:
        table = data.get("mathsets", {})

    if not isinstance(table, dict):
        raise ConfigError(f"mathsets settings in {path} must be a table")

    _check_keys(table)
    config = MathSetsConfig(**table)
    logger.info(f"Loaded configuration from {path}")
    return config


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure the root logger for applications using mathsets.

    The library itself never calls this on import.
    """
    if level is None:
        level = get_config().log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("mathsets").setLevel(level)


def _check_keys(values: dict[str, Any]) -> None:
    known = {f.name for f in fields(MathSetsConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")
