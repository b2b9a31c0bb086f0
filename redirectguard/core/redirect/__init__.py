# redirectguard/core/redirect/__init__.py
"""
Redirect core

Status classification, hop construction policy and the resolver loop.
"""

from .types import RedirectClass, RedirectDecision, RedirectEvent, classify_status
from .policy import (
    DEFAULT_SENSITIVE_HEADERS,
    origin_of,
    is_cross_origin,
    resolve_location,
    build_redirect_request,
)
from .resolver import (
    DEFAULT_MAX_REDIRECTS,
    RedirectObserver,
    RedirectResolver,
    never_confirm,
    redirects,
)

__all__ = [
    "RedirectClass",
    "RedirectDecision",
    "RedirectEvent",
    "classify_status",
    "DEFAULT_SENSITIVE_HEADERS",
    "origin_of",
    "is_cross_origin",
    "resolve_location",
    "build_redirect_request",
    "DEFAULT_MAX_REDIRECTS",
    "RedirectObserver",
    "RedirectResolver",
    "never_confirm",
    "redirects",
]
