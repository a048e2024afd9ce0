"""
Contracts (data models).

This folder defines the shapes exchanged with the transport layer:
- the Transport interface and decoded Response
- the bootstrap probe view and the verification outcome

Both mock and real HTTP transports should use these contracts.
"""

from .probe import ProbeResponse, ProbeStatus, VerificationState, VersionRecord
from .transport import DelegationCall, Response, Transport

__all__ = [
    "DelegationCall", "Response", "Transport",
    "ProbeResponse", "ProbeStatus", "VerificationState", "VersionRecord",
]
