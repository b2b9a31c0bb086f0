# redirectguard/config/__init__.py
"""
redirectguard Configuration

Design principles:
1. Code has defaults, YAML only overrides (YAML can be deleted)
2. Configuration objects are frozen
"""

from .redirect import RedirectConfig
from .loader import DEFAULT_CONFIG_PATH, load_config
from .validator import ConfigIssue, validate_config

__all__ = [
    "RedirectConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "ConfigIssue",
    "validate_config",
]
