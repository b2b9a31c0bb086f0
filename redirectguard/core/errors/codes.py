# redirectguard/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"

# redirect chain
MAX_REDIRECTS_EXCEEDED: Final[str] = "MAX_REDIRECTS_EXCEEDED"
INVALID_LOCATION: Final[str] = "INVALID_LOCATION"

# composition
NO_TRANSPORT: Final[str] = "NO_TRANSPORT"


# ---- semantic groups (internal helpers) ----

REDIRECT_CODES: Final[set[str]] = {
    MAX_REDIRECTS_EXCEEDED,
    INVALID_LOCATION,
}

DEFAULT_FALLBACK_CODES: Final[set[str]] = {
    UNKNOWN,
    INVALID_ARGUMENT,
    NO_TRANSPORT,
}

KNOWN_CODES: Final[set[str]] = REDIRECT_CODES | DEFAULT_FALLBACK_CODES
