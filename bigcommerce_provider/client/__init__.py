"""BigCommerce REST API client."""

from bigcommerce_provider.client.client import App, BigCommerceClient, WebhookService
from bigcommerce_provider.client.errors import (
    APIError,
    AuthenticationError,
    BigCommerceError,
    InvalidResponseError,
    NotFoundError,
    TransportError,
    UnprocessableEntityError,
)
from bigcommerce_provider.client.models import Webhook

__all__ = [
    "App",
    "BigCommerceClient",
    "WebhookService",
    "APIError",
    "AuthenticationError",
    "BigCommerceError",
    "InvalidResponseError",
    "NotFoundError",
    "TransportError",
    "UnprocessableEntityError",
    "Webhook",
]
