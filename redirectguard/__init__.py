# redirectguard/__init__.py
"""
redirectguard - redirect-following middleware for async HTTP transports

User-facing API (recommended):
- redirects(): wrap any `(request, next) -> response` transport
- RedirectClient: httpx-backed client with redirect following built in
- load_config(): YAML configuration with code defaults

Basic usage:

Wrapping a transport:
    >>> from redirectguard import Request, redirects
    >>> follow = redirects(transport, max_redirects=5)
    >>> response = await follow(Request("GET", "http://example.com/"), done)

Client:
    >>> from redirectguard import RedirectClient
    >>> async with RedirectClient() as client:
    ...     response = await client.get("http://example.com/")

Confirming 307/308 for unsafe methods:
    >>> follow = redirects(transport, confirm_redirect=lambda req, res: True)

Observing hops:
    >>> follow = redirects(transport, on_redirect=lambda event: print(event.url))
"""

__version__ = "0.1.0"

# Core
from .core.errors import RedirectGuardError, MaxRedirectsExceeded, LocationResolutionError
from .core.http import Request, Response
from .core.redirect import (
    RedirectClass,
    RedirectDecision,
    RedirectEvent,
    RedirectResolver,
    classify_status,
    never_confirm,
    redirects,
)

# Configuration
from .config import RedirectConfig, load_config, validate_config, ConfigIssue

# IO
from .infra.transport import HttpxTransport
from .api import RedirectClient

__all__ = [
    # Version
    "__version__",

    # Core
    "redirects",
    "RedirectResolver",
    "RedirectClass",
    "RedirectDecision",
    "RedirectEvent",
    "classify_status",
    "never_confirm",
    "Request",
    "Response",

    # Errors
    "RedirectGuardError",
    "MaxRedirectsExceeded",
    "LocationResolutionError",

    # Configuration
    "RedirectConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",

    # IO
    "HttpxTransport",
    "RedirectClient",
]
