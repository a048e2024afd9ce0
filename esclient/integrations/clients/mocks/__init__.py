"""
Mock transports.

These return fake (but realistic) search service answers without calling
any external API. Mock transports follow the SAME interface as the real
HTTP transport (see integrations/contracts/transport.py).
"""

from .root_responses import available_flavours, get_root_builder
from .transport import MockTransport

__all__ = ["MockTransport", "available_flavours", "get_root_builder"]
