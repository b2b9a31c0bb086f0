# redirectguard/core/redirect/resolver.py
"""
Redirect resolver - follows redirects on behalf of a transport

RedirectResolver wraps a transport `(request, next) -> response` and is
itself a transport of the same shape, so it can be stacked under other
layers. `next` is handed unchanged to the wrapped transport.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Iterable, Optional, Tuple

from ..errors import MaxRedirectsExceeded, RedirectGuardError
from ..http.interfaces import ConfirmRedirect, Next, Transport
from .policy import (
    DEFAULT_SENSITIVE_HEADERS,
    build_redirect_request,
    is_cross_origin,
    location_of,
    resolve_location,
)
from .types import RedirectClass, RedirectDecision, RedirectEvent, classify_status

logger = logging.getLogger(__name__)

RedirectObserver = Callable[[RedirectEvent], Any]

DEFAULT_MAX_REDIRECTS = 5


def never_confirm(request: Any, response: Any) -> bool:
    """Default confirmation callback: 307/308 on unsafe methods are not followed."""
    return False


def _is_safe_method(method: str) -> bool:
    return method.upper() in ("GET", "HEAD")


class RedirectResolver:
    """
    Redirect-following transport wrapper.

    Holds configuration only; every call keeps its chain state in locals, so
    one instance can serve concurrent calls.

    Per hop:
      - 301/302/303: follow with GET (HEAD stays HEAD), body dropped
      - 307/308: GET/HEAD follow as-is, other methods need confirm_redirect()
      - anything else, or no Location: returned to the caller
    """

    def __init__(
        self,
        transport: Transport,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        confirm_redirect: ConfirmRedirect = never_confirm,
        *,
        on_redirect: Optional[RedirectObserver] = None,
        sensitive_headers: Iterable[str] = DEFAULT_SENSITIVE_HEADERS,
    ) -> None:
        if isinstance(max_redirects, bool) or not isinstance(max_redirects, int) or max_redirects < 0:
            raise RedirectGuardError.invalid_argument(
                f"max_redirects must be a non-negative integer, got {max_redirects!r}",
                details={"max_redirects": repr(max_redirects)},
            )
        self._transport = transport
        self._max_redirects = max_redirects
        self._confirm_redirect = confirm_redirect
        self._on_redirect = on_redirect
        self._sensitive_headers: Tuple[str, ...] = tuple(h.lower() for h in sensitive_headers)

    @classmethod
    def from_config(
        cls,
        transport: Transport,
        config: Any,
        confirm_redirect: ConfirmRedirect = never_confirm,
        *,
        on_redirect: Optional[RedirectObserver] = None,
    ) -> "RedirectResolver":
        """Build a resolver from a RedirectConfig."""
        return cls(
            transport,
            max_redirects=config.max_redirects,
            confirm_redirect=confirm_redirect,
            on_redirect=on_redirect,
            sensitive_headers=config.sensitive_headers,
        )

    @property
    def max_redirects(self) -> int:
        return self._max_redirects

    # =========================================================
    # Transport interface
    # =========================================================

    async def __call__(self, request: Any, next: Next) -> Any:
        original = request.clone()
        current = sent = original
        attempt = 0
        next_url: Optional[str] = None

        while attempt < self._max_redirects:
            attempt += 1
            sent = current
            response = await self._transport(current, next)

            try:
                plan = await self._plan(original, current, response)
            except BaseException:
                await response.dispose()
                raise
            if plan is None:
                return response

            # Only one live response per chain: release it before the next hop
            await response.dispose()

            redirect_class, location, method = plan
            decision = RedirectDecision(
                url=resolve_location(location, current.url),
                redirect_class=redirect_class,
                method=method,
            )
            next_url = decision.url
            current, stripped = build_redirect_request(
                original,
                decision.url,
                decision.method,
                drop_body=decision.redirect_class is RedirectClass.FOLLOW_WITH_GET,
                sensitive_headers=self._sensitive_headers,
            )
            logger.debug(
                f"Redirect hop {attempt}: {response.status} -> {decision.method} {decision.url}"
            )
            self._notify(RedirectEvent(
                url=decision.url,
                status=response.status,
                method=decision.method,
                hop=attempt,
                cross_origin=is_cross_origin(original.url, decision.url),
                stripped_headers=stripped,
            ))

        logger.warning(f"Redirect chain exceeded {self._max_redirects} hops (next: {next_url})")
        raise MaxRedirectsExceeded(sent, self._max_redirects, next_url=next_url)

    # =========================================================
    # Internal
    # =========================================================

    async def _plan(
        self, original: Any, current: Any, response: Any
    ) -> Optional[Tuple[RedirectClass, str, str]]:
        """
        Return (class, Location, method) for the next hop, or None if
        `response` is the final result.

        Runs before disposal, so a response handed back to the caller is
        still readable.
        """
        redirect_class = classify_status(response.status)
        if not redirect_class.is_redirect:
            return None

        location = location_of(response.headers)
        if not location:
            logger.debug(f"{response.status} without Location, returning response")
            return None

        if redirect_class is RedirectClass.FOLLOW_WITH_GET:
            method = "HEAD" if original.method.upper() == "HEAD" else "GET"
        else:
            method = current.method
            if not _is_safe_method(method) and not await self._confirm(current, response):
                logger.debug(f"{response.status} for {method} not confirmed, returning response")
                return None

        return redirect_class, location, method

    async def _confirm(self, request: Any, response: Any) -> bool:
        result = self._confirm_redirect(request, response)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    def _notify(self, event: RedirectEvent) -> None:
        if self._on_redirect is None:
            return
        try:
            self._on_redirect(event)
        except Exception:
            logger.warning(f"Redirect observer failed for {event.url}", exc_info=True)


def redirects(
    transport: Transport,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    confirm_redirect: ConfirmRedirect = never_confirm,
    *,
    on_redirect: Optional[RedirectObserver] = None,
    sensitive_headers: Iterable[str] = DEFAULT_SENSITIVE_HEADERS,
) -> RedirectResolver:
    """
    Wrap `transport` with redirect following.

    Example:
        >>> follow = redirects(transport, max_redirects=3)
        >>> response = await follow(Request("GET", "http://example.com/"), done)
    """
    return RedirectResolver(
        transport,
        max_redirects,
        confirm_redirect,
        on_redirect=on_redirect,
        sensitive_headers=sensitive_headers,
    )


__all__ = [
    "DEFAULT_MAX_REDIRECTS",
    "RedirectObserver",
    "RedirectResolver",
    "never_confirm",
    "redirects",
]
