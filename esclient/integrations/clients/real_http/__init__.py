"""
Real HTTP transports.

These talk to a real search service over HTTP and must implement the same
interface as the mock transports (integrations/contracts/transport.py).
"""

from .transport import HttpxTransport

__all__ = ["HttpxTransport"]
