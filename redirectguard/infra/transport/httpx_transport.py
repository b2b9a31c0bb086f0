# redirectguard/infra/transport/httpx_transport.py
"""
httpx transport

Sends one Request through httpx.AsyncClient and wraps the streamed result
in a disposable Response. Redirects are never followed here; that is the
resolver's job.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from redirectguard.core.http.interfaces import Next
from redirectguard.core.http.message import Request, Response

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Transport `(request, next) -> Response` backed by httpx.

    The terminal fallback is not used: this transport is always the
    innermost layer.

    Usage:
        >>> async with HttpxTransport() as transport:
        ...     response = await transport(Request("GET", url), next)
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, *, timeout_s: float = 30.0) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_s, follow_redirects=False)

    async def __call__(self, request: Request, next: Next) -> Response:
        http_request = self._client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )
        logger.debug(f"{request.method} {request.url}")
        raw = await self._client.send(http_request, stream=True, follow_redirects=False)
        return _wrap_response(raw)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _wrap_response(raw: httpx.Response) -> Response:
    return Response(
        status=raw.status_code,
        headers=raw.headers,
        url=str(raw.url),
        reader=raw.aread,
        on_dispose=raw.aclose,
        raw=raw,
    )


__all__ = ["HttpxTransport"]
