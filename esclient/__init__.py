"""
esclient: a verifying client for Elasticsearch.

Every call made on a Client is forwarded to its transport, but only after
the client has confirmed, once, that the server really is Elasticsearch.
"""

from esclient.client import Client
from esclient.config import ClientConfig, load_client_config
from esclient.exceptions import (
    ApiError,
    AuthenticationException,
    AuthorizationException,
    ConnectionError,
    ElasticsearchClientError,
    ElasticsearchWarning,
    NotElasticsearchError,
    NotTrustedProduct,
    TransportError,
)
from esclient.integrations.contracts import DelegationCall, Response, VerificationState
from esclient.verifier import ProductVerifier
from esclient.version import ELASTICSEARCH_SERVICE_VERSION, __version__, client_meta_version
from esclient.versioning import VersionSpec

__all__ = [
    "Client",
    "ClientConfig",
    "load_client_config",
    "ProductVerifier",
    "VersionSpec",
    "VerificationState",
    "DelegationCall",
    "Response",
    # Errors
    "ElasticsearchClientError",
    "ElasticsearchWarning",
    "NotElasticsearchError",
    "NotTrustedProduct",
    "TransportError",
    "ConnectionError",
    "ApiError",
    "AuthenticationException",
    "AuthorizationException",
    # Version helpers
    "__version__",
    "client_meta_version",
    "ELASTICSEARCH_SERVICE_VERSION",
]
