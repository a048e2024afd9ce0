"""
Client exception hierarchy.

Everything raised by the client derives from ElasticsearchClientError.
Transport failures carry the HTTP status (when there is one) and the
decoded response body.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type

from esclient.config import NOT_ELASTICSEARCH_MESSAGE


class ElasticsearchClientError(Exception):
    """Base exception for all client errors."""


class ElasticsearchWarning(UserWarning):
    """Issued when the client proceeds without confirming the server identity."""


class NotElasticsearchError(ElasticsearchClientError):
    """The server answered the bootstrap probe but is not Elasticsearch."""

    def __init__(self) -> None:
        super().__init__(NOT_ELASTICSEARCH_MESSAGE)


NotTrustedProduct = NotElasticsearchError


class TransportError(ElasticsearchClientError):
    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ConnectionError(TransportError):
    """The request never produced an HTTP response (DNS, refused, timeout...)."""


class ApiError(TransportError):
    """The server answered with an error status."""


class BadRequestError(ApiError):
    pass


class AuthenticationException(ApiError):
    """401: credentials missing or rejected."""


class AuthorizationException(ApiError):
    """403: authenticated but not allowed."""


class NotFoundError(ApiError):
    pass


class ConflictError(ApiError):
    pass


Unauthorized = AuthenticationException
Forbidden = AuthorizationException

_STATUS_ERRORS: Dict[int, Type[ApiError]] = {
    400: BadRequestError,
    401: AuthenticationException,
    403: AuthorizationException,
    404: NotFoundError,
    409: ConflictError,
}


def error_for_status(status_code: int) -> Type[ApiError]:
    """Return the ApiError subclass for an HTTP error status."""
    return _STATUS_ERRORS.get(status_code, ApiError)
