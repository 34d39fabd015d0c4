"""YAML settings loader."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from webhook_service.config.settings import DispatcherSettings
from webhook_service.exceptions import SettingsLoadError

logger = logging.getLogger(__name__)


def load_settings(path: Path | str) -> DispatcherSettings:
    """Load dispatcher settings from a YAML file.

    An empty file yields the default settings.

    Args:
        path: Path to the YAML settings file

    Returns:
        Validated dispatcher settings

    Raises:
        SettingsLoadError: If the file cannot be read, parsed, or validated
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)  # pyright: ignore[reportAny] # yaml.safe_load returns Any
    except (OSError, yaml.YAMLError) as e:
        raise SettingsLoadError(f"Failed to load {path}: {e}", file_path=str(path)) from e

    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise SettingsLoadError(
            f"Settings file {path} must contain a mapping, got {type(content).__name__}",  # pyright: ignore[reportAny]
            file_path=str(path),
        )

    try:
        settings = DispatcherSettings.model_validate(content)
    except ValidationError as e:
        raise SettingsLoadError(f"Invalid settings in {path}: {e}", file_path=str(path)) from e

    logger.debug("Loaded dispatcher settings from %s", path)
    return settings
