"""Configuration loading for svg-markup2tspan.

Settings come from a YAML file and can be overridden through environment
variables:

    font_family: "Helvetica, Arial, sans"   # M2T_FONT_FAMILY
    font_size: 10.0                         # M2T_FONT_SIZE (points)
    length_unit: mm                         # M2T_LENGTH_UNIT
    escape_text: false
    log_level: WARNING                      # M2T_LOG_LEVEL
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from svg_markup2tspan.exceptions import ConfigError
from svg_markup2tspan.units import POINTS_PER_UNIT

DEFAULT_CONFIG_PATH = Path("~/.config/svg-markup2tspan/config.yaml")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_OVERRIDES = {
    "M2T_FONT_FAMILY": "font_family",
    "M2T_FONT_SIZE": "font_size",
    "M2T_LENGTH_UNIT": "length_unit",
    "M2T_LOG_LEVEL": "log_level",
}


@dataclass
class Config:
    font_family: str = "sans-serif"
    font_size: float = 12.0
    length_unit: str = "mm"
    escape_text: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        try:
            self.font_size = float(self.font_size)
        except (TypeError, ValueError):
            raise ConfigError(f"font_size must be a number, got {self.font_size!r}") from None
        if self.font_size <= 0:
            raise ConfigError(f"font_size must be positive, got {self.font_size}")
        if self.length_unit not in POINTS_PER_UNIT:
            raise ConfigError(
                f"length_unit must be one of {sorted(POINTS_PER_UNIT)}, got {self.length_unit!r}"
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if not isinstance(self.escape_text, bool):
            raise ConfigError(f"escape_text must be true or false, got {self.escape_text!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration.

        Args:
            path: YAML file. Defaults to ``$M2T_CONFIG`` or
                ``~/.config/svg-markup2tspan/config.yaml`` when those exist.

        Returns:
            Config with environment overrides applied.

        Raises:
            ConfigError: If the file is unreadable or holds invalid values.
        """
        data: dict[str, Any] = {}

        if path is None:
            env_path = os.environ.get("M2T_CONFIG")
            candidate = Path(env_path) if env_path else DEFAULT_CONFIG_PATH.expanduser()
            path = candidate if candidate.exists() else None
        elif not Path(path).exists():
            raise ConfigError(f"Config file not found: {path}")

        if path is not None:
            try:
                loaded = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Failed to read config {path}: {e}") from e
            if loaded is not None and not isinstance(loaded, dict):
                raise ConfigError(f"Config {path} must be a mapping")
            data.update(loaded or {})

        for env_var, key in _ENV_OVERRIDES.items():
            if env_var in os.environ:
                data[key] = os.environ[env_var]

        return cls.from_dict(data)
