# redirectguard/core/http/interfaces.py
"""
HTTP abstract interfaces

Structural types the redirect core depends on. Anything with the right
shape can be used; the concrete defaults live in message.py.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Iterator, Optional, Protocol, runtime_checkable


class HeadersLike(Protocol):
    """Case-insensitive, multi-valued header collection"""

    def get(self, key: str, default: Any = None) -> Any: ...

    def copy(self) -> "HeadersLike": ...

    def pop(self, key: str, default: Any = None) -> Any: ...

    def __setitem__(self, key: str, value: str) -> None: ...

    def __contains__(self, key: object) -> bool: ...

    def __iter__(self) -> Iterator[str]: ...


@runtime_checkable
class RedirectableRequest(Protocol):
    """
    Request capability set

    evolve() must return a new value; it never touches self.
    """

    method: str
    url: str
    headers: HeadersLike
    body: Optional[bytes]

    def clone(self) -> "RedirectableRequest": ...

    def evolve(
        self,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
        headers: Optional[HeadersLike] = None,
        body: Any = ...,
    ) -> "RedirectableRequest": ...


@runtime_checkable
class DisposableResponse(Protocol):
    """
    Response capability set

    dispose() releases sockets/streams; it is called at most once by the resolver.
    """

    status: int
    headers: HeadersLike

    async def dispose(self) -> None: ...


# Terminal fallback continuation, passed through untouched to the innermost transport
Next = Callable[[], Awaitable[Any]]

# (request, next) -> response
Transport = Callable[[Any, Next], Awaitable[Any]]

# (current request, redirect response) -> bool, sync or async
ConfirmRedirect = Callable[[Any, Any], Any]


__all__ = [
    "HeadersLike",
    "RedirectableRequest",
    "DisposableResponse",
    "Next",
    "Transport",
    "ConfirmRedirect",
]
