"""Configured provider value passed to every lifecycle callback."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from bigcommerce_provider.client import App, BigCommerceClient
from bigcommerce_provider.config import DEFAULT_API_URL


@dataclass(frozen=True)
class ProviderMeta:
    store_hash: str
    api_url: str = DEFAULT_API_URL
    timeout: float | None = None
    transport: httpx.BaseTransport | None = None


def create_client(meta: ProviderMeta, client_id: str, access_token: str) -> BigCommerceClient:
    """Build a fresh client for one call; credentials belong to the resource, not the provider."""
    app = App(client_id=client_id, store_hash=meta.store_hash, access_token=access_token)
    return app.new_client(api_url=meta.api_url, timeout=meta.timeout, transport=meta.transport)
