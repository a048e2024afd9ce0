"""
Integrations layer.

This package contains all code used to communicate with the search service:
- contracts: the Transport interface, decoded responses, probe view
- policy: normalization of raw responses into contracts
- clients: the real httpx transport and the mock transport

Key rule:
- The verifying client MUST NOT talk HTTP directly; it goes through a
  Transport from clients/.
"""

from .contracts import (
    DelegationCall,
    ProbeResponse,
    ProbeStatus,
    Response,
    Transport,
    VerificationState,
    VersionRecord,
)
from .policy import classify_status, normalize_probe_response

__all__ = [
    "DelegationCall", "ProbeResponse", "ProbeStatus", "Response",
    "Transport", "VerificationState", "VersionRecord",
    "classify_status", "normalize_probe_response",
]
