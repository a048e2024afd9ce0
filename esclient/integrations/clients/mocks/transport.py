"""
Mock Transport.

Purpose:
- Provides a fake search service for development/testing.
- Does NOT make network calls.
- Answers `GET /` with a canned root response for the chosen server flavour
  and records every request and every named operation it receives.

Swap:
Replace with HttpxTransport (clients/real_http/transport.py) to talk to a
real cluster.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from esclient.exceptions import error_for_status
from esclient.integrations.clients.mocks.root_responses import get_root_builder
from esclient.integrations.contracts.transport import Response

logger = logging.getLogger(__name__)


class MockTransport:
    def __init__(self, flavour: str = "8", root: Optional[Dict[str, Any]] = None) -> None:
        """
        Args:
            flavour: Key into the root response registry ("6", "7", "8", ...).
            root: Explicit root response {"status", "headers", "body"}; wins
                over `flavour`.
        """
        self.flavour = flavour
        self.root = root if root is not None else get_root_builder(flavour)()
        self.requests: List[Tuple[str, str, Any]] = []
        self.operations: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []
        self.closed = False

    @property
    def probe_count(self) -> int:
        return sum(1 for method, path, _ in self.requests if (method, path) == ("GET", "/"))

    def perform_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        self.requests.append((method, path, body))
        logger.info("[MOCK] %s %s", method, path)

        if (method, path) == ("GET", "/"):
            status = self.root.get("status", 200)
            if status >= 400:
                raise error_for_status(status)(
                    f"{method} {path} returned {status}",
                    status_code=status,
                    body=self.root.get("body"),
                )
            return Response(status=status, headers=self.root.get("headers") or {}, body=self.root.get("body"))

        return Response(status=200, headers={}, body={"acknowledged": True, "path": path})

    def close(self) -> None:
        self.closed = True

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        def operation(*args: Any, **kwargs: Any) -> Dict[str, Any]:
            self.operations.append((name, args, kwargs))
            logger.info("[MOCK] %s args=%s kwargs=%s", name, args, kwargs)
            return {"operation": name, "args": list(args), "kwargs": dict(kwargs)}

        return operation

    def __repr__(self) -> str:
        return f"MockTransport(flavour={self.flavour!r})"
