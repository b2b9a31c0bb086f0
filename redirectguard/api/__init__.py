# redirectguard/api/__init__.py
"""
User-facing API
"""

from .client import RedirectClient

__all__ = ["RedirectClient"]
