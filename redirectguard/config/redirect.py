# redirectguard/config/redirect.py
"""
Redirect configuration
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from redirectguard.core.redirect.policy import DEFAULT_SENSITIVE_HEADERS
from redirectguard.core.redirect.resolver import DEFAULT_MAX_REDIRECTS


@dataclass(frozen=True)
class RedirectConfig:
    """
    Redirect-following configuration.

    All fields have code defaults; YAML only overrides them.
    """

    # Upper bound on transport calls per chain
    max_redirects: int = DEFAULT_MAX_REDIRECTS

    # Dropped from the next hop when it leaves the original origin
    sensitive_headers: Tuple[str, ...] = field(default=DEFAULT_SENSITIVE_HEADERS)

    # When false, RedirectClient hands every response straight back
    follow_redirects: bool = True

    # Per-request timeout for the default httpx transport
    timeout_s: float = 30.0

    def __post_init__(self) -> None:
        headers = self.sensitive_headers
        if isinstance(headers, str):
            headers = (headers,)
        object.__setattr__(self, "sensitive_headers", tuple(h.lower() for h in headers))

    @classmethod
    def default(cls) -> "RedirectConfig":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "max_redirects": self.max_redirects,
            "sensitive_headers": list(self.sensitive_headers),
            "follow_redirects": self.follow_redirects,
            "timeout_s": self.timeout_s,
        }


__all__ = ["RedirectConfig"]
