# redirectguard/infra/transport/__init__.py
from .httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
