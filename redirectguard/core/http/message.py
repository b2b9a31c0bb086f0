# redirectguard/core/http/message.py
"""
Default request/response values

Header storage and URL parsing are delegated to httpx; these types only add
the copy and dispose semantics the redirect core relies on.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

# Sentinel for "keep the current value" in evolve(); None is a valid body
_UNSET: Any = object()


# =========================
# Request
# =========================

@dataclass(frozen=True)
class Request:
    """
    Outgoing HTTP request.

    Treat this object as immutable after creation.

    Rules:
    - Headers are copied on construction, two Requests never share a header map.
    - Use evolve() to derive a new request.
    """

    method: str
    url: str
    headers: httpx.Headers = field(default_factory=httpx.Headers, repr=False)
    body: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", str(self.url))
        object.__setattr__(self, "headers", httpx.Headers(self.headers))

    def evolve(
        self,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
        headers: Any = None,
        body: Any = _UNSET,
    ) -> "Request":
        """Return a new Request with the given fields replaced."""
        changes: Dict[str, Any] = {}
        if method is not None:
            changes["method"] = method
        if url is not None:
            changes["url"] = str(url)
        if headers is not None:
            changes["headers"] = headers
        if body is not _UNSET:
            changes["body"] = body
        return replace(self, **changes)

    def clone(self) -> "Request":
        return self.evolve()


# =========================
# Response
# =========================

@dataclass(eq=False)
class Response:
    """
    Incoming HTTP response.

    Semantics:
    - content: in-memory body, used when no reader is attached
    - reader: async body loader (e.g. httpx.Response.aread)
    - on_dispose: async resource release (e.g. httpx.Response.aclose)
    - raw: transport object (debug ONLY)
    """

    status: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    url: Optional[str] = None
    content: bytes = field(default=b"", repr=False)
    reader: Optional[Callable[[], Awaitable[bytes]]] = field(default=None, repr=False)
    on_dispose: Optional[Callable[[], Awaitable[None]]] = field(default=None, repr=False)
    raw: Any = field(default=None, repr=False)
    disposed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.status = int(self.status)
        self.headers = httpx.Headers(self.headers)

    @property
    def location(self) -> Optional[str]:
        values = self.headers.get_list("location")
        return values[0] if values else None

    async def read(self) -> bytes:
        if self.disposed:
            raise RuntimeError("Cannot read a disposed response")
        if self.reader is not None:
            return await self.reader()
        return self.content

    async def dispose(self) -> None:
        """Release held resources. Calling it again is a no-op."""
        if self.disposed:
            return
        self.disposed = True
        if self.on_dispose is not None:
            await self.on_dispose()


__all__ = ["Request", "Response"]
