# redirectguard/core/errors/__init__.py
"""
Error types for redirectguard.

No side effects on import.
"""

from . import codes
from .exceptions import (
    RedirectGuardError,
    MaxRedirectsExceeded,
    LocationResolutionError,
)

__all__ = [
    "codes",
    "RedirectGuardError",
    "MaxRedirectsExceeded",
    "LocationResolutionError",
]
