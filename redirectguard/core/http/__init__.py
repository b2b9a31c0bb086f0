# redirectguard/core/http/__init__.py
"""
HTTP message layer

Abstract interfaces consumed by the redirect core, plus the default
Request/Response values built on httpx header and URL types.
"""

from .interfaces import (
    HeadersLike,
    RedirectableRequest,
    DisposableResponse,
    Next,
    Transport,
    ConfirmRedirect,
)
from .message import Request, Response

__all__ = [
    "HeadersLike",
    "RedirectableRequest",
    "DisposableResponse",
    "Next",
    "Transport",
    "ConfirmRedirect",
    "Request",
    "Response",
]
