"""
TOML configuration for the converter and its command-line wrapper.

    [converter]
    ignore_error = false

    [logging]
    level = "WARNING"
    format = "pretty"    # or "json"

Every key is optional; missing keys keep their defaults.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from manchu_converter.log import LOG_FORMATS

DEFAULT_CONFIG_NAME = "manchu_converter.toml"


@dataclass(slots=True)
class ConverterConfig:
    ignore_error: bool = False
    log_level: str = "WARNING"
    log_format: str = "pretty"

    @classmethod
    def from_dict(cls, cfg: dict[str, Any]) -> ConverterConfig:
        """Build a config from parsed TOML, validating value types."""
        conv_cfg = cfg.get("converter", {})
        log_cfg = cfg.get("logging", {})

        ignore_error = conv_cfg.get("ignore_error", False)
        if not isinstance(ignore_error, bool):
            raise ValueError(
                f"[converter] ignore_error must be a boolean, got {ignore_error!r}"
            )

        level = log_cfg.get("level", "WARNING")
        if not isinstance(level, str):
            raise ValueError(f"[logging] level must be a string, got {level!r}")

        fmt = log_cfg.get("format", "pretty")
        if fmt not in LOG_FORMATS:
            raise ValueError(
                f"[logging] format must be one of {LOG_FORMATS}, got {fmt!r}"
            )

        return cls(ignore_error=ignore_error, log_level=level.upper(), log_format=fmt)

    @classmethod
    def from_file(cls, config_path: str | Path) -> ConverterConfig:
        """Load a config from a TOML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)
        return cls.from_dict(cfg)


def find_default_config() -> Path | None:
    """Look for manchu_converter.toml in CWD."""
    candidate = Path(DEFAULT_CONFIG_NAME)
    if candidate.exists():
        return candidate
    return None
