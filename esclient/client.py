"""
Verifying client.

Client wraps a transport and forwards every operation it does not define
itself. Before the first forwarded call it confirms, once per instance,
that the server is Elasticsearch:

1. Probe `GET /` through the transport.
2. 401/403 on the probe: the identity can't be checked with these
   credentials. Warn once and trust the server.
3. Otherwise classify the response with ProductVerifier. Only positive
   outcomes are cached; a rejected server is probed again on the next call.
"""

from __future__ import annotations

import logging
import threading
import warnings
from typing import Any, Callable, Optional

from esclient.config import (
    BOOTSTRAP_METHOD,
    BOOTSTRAP_PATH,
    SECURITY_PRIVILEGES_VALIDATION_WARNING,
    ClientConfig,
    load_client_config,
)
from esclient.exceptions import AuthenticationException, AuthorizationException, ElasticsearchWarning
from esclient.integrations.clients.real_http.transport import HttpxTransport
from esclient.integrations.contracts.probe import ProbeStatus, VerificationState
from esclient.integrations.contracts.transport import DelegationCall, Transport
from esclient.integrations.policy.response_wrappers import normalize_probe_response
from esclient.verifier import ProductVerifier

logger = logging.getLogger(__name__)


class Client:
    def __init__(
        self,
        transport: Optional[Transport] = None,
        config: Optional[ClientConfig] = None,
        verifier: Optional[ProductVerifier] = None,
        **overrides: Any,
    ) -> None:
        """
        Args:
            transport: Transport to verify and forward to. When omitted an
                HttpxTransport is built from `config`.
            config: Connection settings. Loaded from the environment when
                omitted; keyword `overrides` (url=..., api_key=...) that are
                not None win. Passing either together with `transport` raises
                TypeError.
            verifier: Product verification policy.
        """
        if transport is None:
            overrides = {key: value for key, value in overrides.items() if value is not None}
            if config is None:
                config = load_client_config(**overrides)
            elif overrides:
                config = config.model_copy(update=overrides)
            transport = HttpxTransport(config)
        elif config is not None or overrides:
            raise TypeError("config and connection overrides only apply when no transport is given")
        self._transport = transport
        self._verifier = verifier or ProductVerifier()
        self._state = VerificationState.UNVERIFIED
        self._lock = threading.Lock()

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def verification_state(self) -> VerificationState:
        return self._state

    @property
    def verified(self) -> bool:
        return self._state is not VerificationState.UNVERIFIED

    def verify(self) -> VerificationState:
        """
        Run product verification unless it already succeeded.

        Raises:
            NotElasticsearchError: the server is reachable but not Elasticsearch.
            TransportError: the probe failed for any reason other than 401/403.
        """
        return self._verify(stacklevel=3)

    def _verify(self, stacklevel: int) -> VerificationState:
        # stacklevel points the privilege warning at the caller's frame.
        if self._state is not VerificationState.UNVERIFIED:
            return self._state

        with self._lock:
            if self._state is not VerificationState.UNVERIFIED:
                return self._state

            logger.debug("Verifying server with %s %s", BOOTSTRAP_METHOD, BOOTSTRAP_PATH)
            try:
                response = self._transport.perform_request(BOOTSTRAP_METHOD, BOOTSTRAP_PATH)
            except (AuthenticationException, AuthorizationException) as exc:
                logger.debug("Bootstrap probe denied: %s", exc)
                return self._trust_without_confirmation(stacklevel + 1)

            probe = normalize_probe_response(response)
            if probe.status in (ProbeStatus.UNAUTHORIZED, ProbeStatus.FORBIDDEN):
                logger.debug("Bootstrap probe returned %s", response.status)
                return self._trust_without_confirmation(stacklevel + 1)

            self._state = self._verifier.verify(probe)
            logger.info("Server verified as Elasticsearch")
            return self._state

    def _trust_without_confirmation(self, stacklevel: int) -> VerificationState:
        self._state = VerificationState.VERIFIED_WITH_PRIVILEGE_WARNING
        logger.warning(SECURITY_PRIVILEGES_VALIDATION_WARNING)
        warnings.warn(SECURITY_PRIVILEGES_VALIDATION_WARNING, ElasticsearchWarning, stacklevel=stacklevel)
        return self._state

    def forward(self, call: DelegationCall) -> Any:
        """Verify if needed, then hand `call` to the transport unchanged."""
        return self._forward(call, stacklevel=4)

    def _forward(self, call: DelegationCall, stacklevel: int) -> Any:
        self._verify(stacklevel)
        logger.debug("Forwarding %s to transport", call.name)
        return call.apply(self._transport)

    def close(self) -> None:
        """Close the transport. Never triggers verification."""
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached for names Client doesn't define.
        if name.startswith("__") or name in ("_transport", "_verifier", "_state", "_lock"):
            raise AttributeError(name)
        if not callable(getattr(self._transport, name, None)):
            raise AttributeError(
                f"{type(self).__name__!r} object and its transport have no operation {name!r}"
            )

        def operation(*args: Any, **kwargs: Any) -> Any:
            return self._forward(DelegationCall(name, args, kwargs), stacklevel=4)

        operation.__name__ = name
        return operation

    def __repr__(self) -> str:
        return f"Client(transport={self._transport!r}, state={self._state.value})"
