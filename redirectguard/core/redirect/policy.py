# redirectguard/core/redirect/policy.py
"""
Redirect safety policy

- Location resolution against the request that produced the response
- Origin comparison (scheme, host, port)
- Construction of the next hop from the original request, dropping
  credentials when the hop leaves the original origin
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple, Union

import httpx

from ..errors import LocationResolutionError

logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}

DEFAULT_SENSITIVE_HEADERS: Tuple[str, ...] = ("cookie", "authorization")

Origin = Tuple[str, str, Optional[int]]


def origin_of(url: Union[str, httpx.URL]) -> Origin:
    """Return the (scheme, host, port) triple, default ports made explicit."""
    u = url if isinstance(url, httpx.URL) else httpx.URL(str(url))
    scheme = u.scheme.lower()
    port = u.port if u.port is not None else DEFAULT_PORTS.get(scheme)
    return scheme, u.host.lower(), port


def is_cross_origin(a: Union[str, httpx.URL], b: Union[str, httpx.URL]) -> bool:
    return origin_of(a) != origin_of(b)


def location_of(headers: Any) -> Optional[str]:
    """First Location value; repeated headers are not joined."""
    get_list = getattr(headers, "get_list", None)
    if get_list is not None:
        values = get_list("location")
        return values[0] if values else None
    return headers.get("location")


def resolve_location(location: str, base_url: Union[str, httpx.URL]) -> str:
    """
    Resolve a Location header value against base_url.

    Raises:
        LocationResolutionError: value cannot be parsed, or the result is not
            an absolute URL with a host
    """
    base = str(base_url)
    try:
        target = httpx.URL(base).join(location)
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise LocationResolutionError(location, base, reason=str(e), cause=e) from e

    if not target.is_absolute_url or not target.host:
        raise LocationResolutionError(location, base, reason="not an absolute URL")
    return str(target)


def build_redirect_request(
    original: Any,
    url: str,
    method: str,
    *,
    drop_body: bool = False,
    sensitive_headers: Iterable[str] = DEFAULT_SENSITIVE_HEADERS,
) -> Tuple[Any, Tuple[str, ...]]:
    """
    Derive the next hop from the original request.

    The original request is never modified. Origins are compared against the
    original request, so credentials come back if a later hop returns home.

    Returns:
        (new request, names of the headers that were stripped)
    """
    headers = original.headers.copy()
    body = original.body

    if drop_body:
        body = None
        headers.pop("transfer-encoding", None)
        headers["Content-Length"] = "0"

    stripped: Tuple[str, ...] = ()
    if is_cross_origin(original.url, url):
        stripped = tuple(
            name for name in sensitive_headers
            if headers.pop(name, None) is not None
        )
        if stripped:
            logger.info(f"Cross-origin redirect to {url}: dropped {', '.join(stripped)}")

    return original.evolve(url=url, method=method, headers=headers, body=body), stripped


__all__ = [
    "DEFAULT_SENSITIVE_HEADERS",
    "Origin",
    "origin_of",
    "is_cross_origin",
    "location_of",
    "resolve_location",
    "build_redirect_request",
]
