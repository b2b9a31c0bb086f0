# redirectguard/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Codes we do not define are downgraded to UNKNOWN.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass(eq=False)
class RedirectGuardError(Exception):
    """
    Base exception for everything raised by redirectguard itself.

    Transport failures are never wrapped in this type; they propagate as-is.
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_redirect_error(self) -> bool:
        return self.error_code in codes.REDIRECT_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def invalid_argument(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> "RedirectGuardError":
        return cls(
            message=message,
            error_code=codes.INVALID_ARGUMENT,
            details=details or {},
        )


class MaxRedirectsExceeded(RedirectGuardError):
    """
    Raised when a chain keeps redirecting after max_redirects transport calls.

    `request` is the last request handed to the transport.
    """

    def __init__(self, request: Any, max_redirects: int, *, next_url: Optional[str] = None) -> None:
        self.request = request
        self.max_redirects = max_redirects
        details: Dict[str, Any] = {
            "max_redirects": max_redirects,
            "last_url": _safe_str(getattr(request, "url", None)),
        }
        if next_url is not None:
            details["next_url"] = next_url
        super().__init__(
            message=f"Maximum redirects exceeded: {max_redirects}",
            error_code=codes.MAX_REDIRECTS_EXCEEDED,
            details=details,
        )


class LocationResolutionError(RedirectGuardError):
    """A Location header that does not resolve to an absolute URL."""

    def __init__(
        self,
        location: str,
        base_url: str,
        *,
        reason: str = "",
        cause: Optional[BaseException] = None,
    ) -> None:
        self.location = location
        self.base_url = base_url
        msg = f"Cannot resolve Location {location!r} against {base_url}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(
            message=msg,
            error_code=codes.INVALID_LOCATION,
            details={"location": location, "base_url": base_url},
            cause=cause,
        )


__all__ = [
    "RedirectGuardError",
    "MaxRedirectsExceeded",
    "LocationResolutionError",
]
