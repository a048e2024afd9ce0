"""
Transport contract.

The verifying client only needs two things from a transport:
- perform_request(method, path, ...) for the bootstrap probe
- arbitrary named operations it can forward calls to untouched

Both the httpx-backed client (clients/real_http) and the mock client
(clients/mocks) implement this interface.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple, runtime_checkable

import httpx


@dataclass
class Response:
    """A decoded HTTP response: status, case-insensitive headers and body."""

    status: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers or {})

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def dig(self, path: str, default: Any = None) -> Any:
        """Nested body lookup by dotted path, e.g. dig("version.number")."""
        node = self.body
        for key in path.split("."):
            if not isinstance(node, Mapping) or key not in node:
                return default
            node = node[key]
        return node


@runtime_checkable
class Transport(Protocol):
    def perform_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        ...


@dataclass(frozen=True)
class DelegationCall:
    """A named transport operation and the arguments it was called with."""

    name: str
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def apply(self, transport: Any) -> Any:
        operation = getattr(transport, self.name)
        return operation(*self.args, **self.kwargs)
