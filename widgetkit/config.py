"""Run configuration: platform selection and demo settings."""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .platforms import Platform
from .abstract_factory.factory import detect_host_platform
from .builder.client import DEFAULT_CUSTOM_TITLE

logger = logging.getLogger('widgetkit')

DEFAULT_CONFIG_FILE = "widgetkit.yml"
DEFAULT_PLATFORM = Platform.WINDOWS
AUTO_PLATFORM = "auto"

TRUTHY_VALUES = {"1", "true", "yes", "on"}


@dataclass
class DemoConfig:
    """Settings resolved once at startup and passed to the demos."""
    platform: Platform = DEFAULT_PLATFORM
    window_title: str = DEFAULT_CUSTOM_TITLE
    debug: bool = False


def resolve_platform(value: Any) -> Platform:
    """Turn a configured platform value into a Platform.

    ``auto`` picks the family matching the host operating system.
    """
    if isinstance(value, Platform):
        return value
    if str(value).strip().lower() == AUTO_PLATFORM:
        detected = detect_host_platform()
        logger.debug(f"Auto-detected platform: {detected.value}")
        return detected
    return Platform.parse(value)


def _first_set(*values: Any) -> Any:
    """Return the first value that is not None; empty strings count as set."""
    for value in values:
        if value is not None:
            return value
    return None


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY_VALUES


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load settings from a YAML file.

    Args:
        config_path: Explicit file to read. Without it, ``widgetkit.yml`` in the
            working directory is used when present.

    Returns:
        Mapping of setting name to raw value (empty if no file is used)

    Raises:
        FileNotFoundError: If an explicit config file does not exist
        ValueError: If the file is not valid YAML or not a mapping
    """
    if config_path is None:
        default_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not default_path.exists():
            return {}
        config_path = default_path
    elif not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file {config_path}: {e}")

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(content).__name__}")

    logger.debug(f"Loaded config file: {config_path}")
    return content


def load_config(
    platform: Optional[str] = None,
    config_path: Optional[Path] = None,
    title: Optional[str] = None,
    debug: bool = False
) -> DemoConfig:
    """Resolve the run configuration.

    Each setting comes from the first source that defines it: explicit
    arguments, then environment variables (a ``.env`` file is loaded first),
    then the YAML config file, then the defaults.

    Raises:
        ValueError: If a platform value is not recognized
        FileNotFoundError: If an explicit config file does not exist
    """
    load_dotenv()
    file_settings = load_config_file(config_path)

    raw_platform = _first_set(
        platform,
        os.getenv("WIDGETKIT_PLATFORM"),
        file_settings.get("platform"),
        DEFAULT_PLATFORM
    )
    window_title = _first_set(
        title,
        os.getenv("WIDGETKIT_WINDOW_TITLE"),
        file_settings.get("window_title"),
        DEFAULT_CUSTOM_TITLE
    )

    if debug:
        debug_enabled = True
    elif os.getenv("WIDGETKIT_DEBUG") is not None:
        debug_enabled = _parse_bool(os.getenv("WIDGETKIT_DEBUG"))
    else:
        debug_enabled = _parse_bool(file_settings.get("debug", False))

    return DemoConfig(
        platform=resolve_platform(raw_platform),
        window_title=str(window_title),
        debug=debug_enabled
    )
