"""Grid configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ttygrid.config.schema import DEFAULT_DELIMITER, DEFAULT_WIDTH, GridConfig, GridStyle
from ttygrid.errors import ConfigurationError


def load_config(data: dict[str, Any] | None = None) -> GridConfig:
    """Build a validated grid configuration.

    Args:
        data: Raw configuration mapping. ``None`` yields the defaults.

    Returns:
        Validated configuration.

    Raises:
        ConfigurationError: If any value is invalid.
    """
    try:
        return GridConfig.model_validate(data or {})
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigurationError(f"Invalid configuration: {first['msg']}", field=field) from e


def load_config_file(path: Path) -> GridConfig:
    """Load grid configuration from a YAML file.

    Example file::

        fallback_width: 100
        delimiter_char: "="
        style:
          header: bold cyan
          primary: white
          secondary: grey70

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or holds
            invalid values.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return load_config(data)


__all__ = [
    "DEFAULT_DELIMITER",
    "DEFAULT_WIDTH",
    "GridConfig",
    "GridStyle",
    "load_config",
    "load_config_file",
]
