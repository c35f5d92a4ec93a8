"""Webhook resource, data source and attribute mapping."""

from bigcommerce_provider.webhooks.data_source import data_source_webhook
from bigcommerce_provider.webhooks.headers import flatten_headers, format_headers
from bigcommerce_provider.webhooks.resource import resource_webhook

__all__ = [
    "data_source_webhook",
    "flatten_headers",
    "format_headers",
    "resource_webhook",
]
