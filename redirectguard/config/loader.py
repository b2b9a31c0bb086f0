# redirectguard/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .redirect import RedirectConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".redirectguard" / "config.yml"


def _load_yaml(config_path: Optional[Union[str, Path]] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config {path}, using defaults: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Config {path} is not a mapping, using defaults")
        return None
    return data


def _merge_config(
    default_instance: RedirectConfig,
    yaml_data: Dict[str, Any],
    path: Optional[Union[str, Path]] = None,
) -> RedirectConfig:
    """Merge YAML data into default config instance, ignoring unknown keys"""
    merged = {**default_instance.to_dict(), **yaml_data}
    fields = RedirectConfig.__dataclass_fields__
    try:
        return RedirectConfig(**{k: v for k, v in merged.items() if k in fields})
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Invalid redirects section in {path or DEFAULT_CONFIG_PATH}, using defaults: {e}")
        return default_instance


def load_config(config_path: Optional[Union[str, Path]] = None) -> RedirectConfig:
    """
    Load redirect configuration.

    Args:
        config_path: Optional path to YAML file. Defaults to
            ~/.redirectguard/config.yml

    Returns:
        RedirectConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - Settings are read from the top-level `redirects:` mapping
    """
    config = RedirectConfig.default()

    yaml_data = _load_yaml(config_path)
    if not yaml_data:
        return config

    section = yaml_data.get("redirects")
    if not isinstance(section, dict):
        return config

    return _merge_config(config, section, config_path)


__all__ = ["DEFAULT_CONFIG_PATH", "load_config"]
