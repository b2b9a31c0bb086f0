# redirectguard/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from redirectguard.core.redirect.resolver import DEFAULT_MAX_REDIRECTS
from .redirect import RedirectConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "redirects.max_redirects"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: RedirectConfig) -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if isinstance(config.max_redirects, bool) or not isinstance(config.max_redirects, int):
        issues.append(ConfigIssue(
            level="error",
            path="redirects.max_redirects",
            message=f"max_redirects must be an integer, got {config.max_redirects!r}",
        ))
    elif config.max_redirects < 0:
        issues.append(ConfigIssue(
            level="error",
            path="redirects.max_redirects",
            message=f"max_redirects={config.max_redirects} is negative",
            hint="Use 0 to refuse every redirect, or a positive bound",
        ))

    if not config.sensitive_headers:
        issues.append(ConfigIssue(
            level="warn",
            path="redirects.sensitive_headers",
            message="no headers are stripped on cross-origin redirects",
            hint="Keep at least 'cookie' and 'authorization'",
        ))

    if not config.follow_redirects and config.max_redirects != DEFAULT_MAX_REDIRECTS:
        issues.append(ConfigIssue(
            level="warn",
            path="redirects.max_redirects",
            message="max_redirects has no effect when follow_redirects=false",
            hint="Set redirects.follow_redirects=true to follow redirects",
        ))

    if isinstance(config.timeout_s, bool) or not isinstance(config.timeout_s, (int, float)):
        issues.append(ConfigIssue(
            level="error",
            path="redirects.timeout_s",
            message=f"timeout_s must be a number, got {config.timeout_s!r}",
        ))
    elif config.timeout_s <= 0:
        issues.append(ConfigIssue(
            level="error",
            path="redirects.timeout_s",
            message=f"timeout_s={config.timeout_s} must be positive",
        ))

    return issues


__all__ = ["ConfigIssue", "validate_config"]
