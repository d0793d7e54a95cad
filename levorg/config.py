"""User configuration for the editor.

Settings are read from a JSON file in the user's config directory (or the
file named by the LEVORG_CONFIG environment variable). A missing or broken
file never stops the editor from starting; defaults are used instead.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    override = os.environ.get(EditorConstants.CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path(platformdirs.user_config_dir(EditorConstants.APP_NAME)) / EditorConstants.CONFIG_FILENAME


def default_log_file() -> Path:
    return Path(platformdirs.user_log_dir(EditorConstants.APP_NAME)) / EditorConstants.LOG_FILENAME


@dataclass
class EditorConfig:
    """Editor settings with their defaults."""
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    horizontal_scroll: bool = False
    dialog_width_ratio: float = EditorConstants.DIALOG_WIDTH_RATIO
    dialog_height_ratio: float = EditorConstants.DIALOG_HEIGHT_RATIO

    @property
    def log_path(self) -> Path:
        if self.log_file:
            return Path(self.log_file).expanduser()
        return default_log_file()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Build a config from parsed JSON, skipping unknown or invalid values."""
        config = cls()
        for field in fields(cls):
            if field.name not in data:
                continue
            value = _validate(field.name, data[field.name])
            if value is None:
                logger.warning(f"Ignoring invalid value for {field.name}: {data[field.name]!r}")
                continue
            setattr(config, field.name, value)
        return config


def _validate(name: str, value: Any) -> Any:
    """Return the cleaned value, or None if it is not acceptable."""
    if name == "log_level":
        if isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int):
            return value.upper()
        return None
    if name == "log_file":
        return value if isinstance(value, str) and value else None
    if name == "horizontal_scroll":
        return value if isinstance(value, bool) else None
    if name in ("dialog_width_ratio", "dialog_height_ratio"):
        if isinstance(value, (int, float)) and not isinstance(value, bool) and 0 < value <= 1:
            return float(value)
        return None
    return None


def load_config(path: Optional[Path] = None) -> EditorConfig:
    """Load the editor configuration.

    Args:
        path: Config file to read. Defaults to the user config location.

    Returns:
        The loaded configuration, or defaults if the file is missing or
        cannot be parsed.
    """
    config_path = path or default_config_path()
    if not config_path.exists():
        return EditorConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config from {config_path}: {e}")
        return EditorConfig()

    if not isinstance(data, dict):
        logger.warning("Config file has invalid format (not a dict), ignoring")
        return EditorConfig()

    return EditorConfig.from_dict(data)
