# redirectguard/core/redirect/types.py
"""
Redirect classification and hop records
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class RedirectClass(str, Enum):
    """How a response status is handled by the resolver"""
    NOT_A_REDIRECT = "not_a_redirect"
    FOLLOW_WITH_GET = "follow_with_get"
    FOLLOW_WITH_CONFIRMATION = "follow_with_confirmation"

    @property
    def is_redirect(self) -> bool:
        return self is not RedirectClass.NOT_A_REDIRECT


def classify_status(status: int) -> RedirectClass:
    """
    Map a status code to its RedirectClass.

    Exact integer match; any other 3xx is NOT_A_REDIRECT.
    """
    if status in (301, 302, 303):
        return RedirectClass.FOLLOW_WITH_GET
    if status in (307, 308):
        return RedirectClass.FOLLOW_WITH_CONFIRMATION
    return RedirectClass.NOT_A_REDIRECT


@dataclass(frozen=True)
class RedirectDecision:
    """Where and how the next hop goes"""
    url: str
    redirect_class: RedirectClass
    method: str


@dataclass(frozen=True)
class RedirectEvent:
    """
    Observer payload, one per followed hop.

    url is the resolved target of the hop; method is the method it will be
    requested with. hop is 1-based.
    """
    url: str
    status: int
    method: str
    hop: int
    cross_origin: bool = False
    stripped_headers: Tuple[str, ...] = ()


__all__ = [
    "RedirectClass",
    "classify_status",
    "RedirectDecision",
    "RedirectEvent",
]
