"""Exceptions raised by the BigCommerce API client."""

from __future__ import annotations


class BigCommerceError(Exception):
    """Base exception for the BigCommerce client."""


class TransportError(BigCommerceError):
    """The request never produced an HTTP response."""


class APIError(BigCommerceError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, title: str = "", body: str = "") -> None:
        self.status_code = status_code
        self.title = title
        self.body = body
        super().__init__(message)


class NotFoundError(APIError):
    """404 from the API."""


class AuthenticationError(APIError):
    """401/403: credentials missing, invalid, or lacking the webhooks scope."""


class UnprocessableEntityError(APIError):
    """422: the API rejected the request body."""


class InvalidResponseError(BigCommerceError):
    """A 2xx response whose payload does not describe a webhook."""
