# redirectguard/api/client.py
"""
RedirectClient - composition root for the default stack

HttpxTransport at the bottom, RedirectResolver on top, configured from a
RedirectConfig.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from redirectguard.config import RedirectConfig
from redirectguard.core.errors import RedirectGuardError, codes
from redirectguard.core.http.interfaces import ConfirmRedirect, Transport
from redirectguard.core.http.message import Request, Response
from redirectguard.core.redirect.resolver import RedirectObserver, RedirectResolver, never_confirm
from redirectguard.infra.transport import HttpxTransport


async def _no_fallback() -> Response:
    raise RedirectGuardError(
        message="Terminal fallback reached: no transport produced a response",
        error_code=codes.NO_TRANSPORT,
    )


class RedirectClient:
    """
    Minimal async client that follows redirects safely.

    Usage:
        >>> async with RedirectClient() as client:
        ...     response = await client.get("https://example.com/")
        ...     body = await response.read()
        ...     await response.dispose()

    The caller owns every returned Response and must dispose it.
    """

    def __init__(
        self,
        config: Optional[RedirectConfig] = None,
        *,
        transport: Optional[Transport] = None,
        confirm_redirect: ConfirmRedirect = never_confirm,
        on_redirect: Optional[RedirectObserver] = None,
    ) -> None:
        self.config = config or RedirectConfig.default()
        self._owned_transport: Optional[HttpxTransport] = None
        if transport is None:
            self._owned_transport = HttpxTransport(timeout_s=self.config.timeout_s)
            transport = self._owned_transport

        self._send: Transport = transport
        if self.config.follow_redirects:
            self._send = RedirectResolver.from_config(
                transport,
                self.config,
                confirm_redirect,
                on_redirect=on_redirect,
            )

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> Response:
        req = Request(method=method, url=url, headers=headers or {}, body=body)
        return await self._send(req, _no_fallback)

    async def get(self, url: str, *, headers: Optional[Mapping[str, str]] = None) -> Response:
        return await self.request("GET", url, headers=headers)

    async def aclose(self) -> None:
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> "RedirectClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["RedirectClient"]
