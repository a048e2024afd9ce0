"""
Real HTTP transport.

Sends requests to an Elasticsearch-compatible server with httpx and returns
decoded Response contracts. Error statuses are raised as the matching
TransportError subclass so callers (and the verifying client) can tell
401/403 apart from other failures.

Important:
- This is the only place HTTP calls to the search service are made.
- No retries or pooling policy here; httpx.Client defaults apply.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Mapping, Optional

import httpx

from esclient.config import CLIENT_META_HEADER, ClientConfig
from esclient.exceptions import ConnectionError, TransportError, error_for_status
from esclient.integrations.contracts.transport import Response
from esclient.version import ELASTICSEARCH_SERVICE_VERSION, __version__

logger = logging.getLogger(__name__)


def _meta_header_value() -> str:
    service, version = ELASTICSEARCH_SERVICE_VERSION
    py_version = "%d.%d.%d" % sys.version_info[:3]
    return f"{service}={version},py={py_version},hx={httpx.__version__}"


class HttpxTransport:
    def __init__(self, config: ClientConfig, client: Optional[httpx.Client] = None) -> None:
        self.config = config
        self.base_url = config.url.rstrip("/")
        self._client = client or httpx.Client(
            timeout=config.timeout,
            verify=config.verify_certs,
            auth=self._basic_auth(config),
        )

    @staticmethod
    def _basic_auth(config: ClientConfig) -> Optional[httpx.BasicAuth]:
        if config.username and config.password and not config.api_key:
            return httpx.BasicAuth(config.username, config.password)
        return None

    def _headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": f"esclient-py/{__version__}",
            CLIENT_META_HEADER: _meta_header_value(),
        }
        if self.config.api_key:
            headers["Authorization"] = f"ApiKey {self.config.api_key}"
        headers.update(self.config.headers)
        if extra:
            headers.update(extra)
        return headers

    def perform_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(
                method,
                url,
                params=dict(params) if params else None,
                json=body,
                headers=self._headers(headers),
            )
        except httpx.TransportError as e:
            logger.error("Request error connecting to %s: %s", url, e)
            raise ConnectionError(f"{method} {url} failed: {e}") from e

        decoded = self._decode_body(resp)
        if resp.status_code >= 400:
            error_cls = error_for_status(resp.status_code)
            logger.error("HTTP error from %s: %s", url, resp.status_code)
            raise error_cls(
                f"{method} {path} returned {resp.status_code}",
                status_code=resp.status_code,
                body=decoded,
                headers=dict(resp.headers),
            )
        return Response(status=resp.status_code, headers=resp.headers, body=decoded)

    @staticmethod
    def _decode_body(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        if "json" in resp.headers.get("content-type", ""):
            try:
                return resp.json()
            except ValueError:
                logger.debug("Response declared JSON but did not decode")
        return resp.text

    # --- API operations --------------------------------------------------------

    def info(self) -> Any:
        return self.perform_request("GET", "/").body

    def ping(self) -> bool:
        try:
            self.perform_request("HEAD", "/")
        except TransportError:
            return False
        return True

    def search(self, index: Optional[str] = None, body: Any = None, **params: Any) -> Any:
        path = f"/{index}/_search" if index else "/_search"
        return self.perform_request("POST", path, params=params or None, body=body).body

    def close(self) -> None:
        self._client.close()

    def __repr__(self) -> str:
        return f"HttpxTransport(url={self.base_url!r})"
