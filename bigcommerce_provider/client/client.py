"""Blocking client for the BigCommerce v3 webhooks API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from bigcommerce_provider.client.errors import (
    APIError,
    AuthenticationError,
    InvalidResponseError,
    NotFoundError,
    TransportError,
    UnprocessableEntityError,
)
from bigcommerce_provider.client.models import Webhook
from bigcommerce_provider.config import DEFAULT_API_URL
from bigcommerce_provider.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class App:
    """API account credentials for one store."""

    client_id: str
    store_hash: str
    access_token: str

    def new_client(
        self,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> BigCommerceClient:
        return BigCommerceClient(self, api_url=api_url, timeout=timeout, transport=transport)


class BigCommerceClient:
    """Authenticated session against one store. Close it after use."""

    def __init__(
        self,
        app: App,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._app = app
        self._http = httpx.Client(
            base_url=f"{api_url.rstrip('/')}/stores/{app.store_hash}/v3",
            headers={
                "X-Auth-Client": app.client_id,
                "X-Auth-Token": app.access_token,
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )
        self.webhooks = WebhookService(self)

    def request(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Send a request and return the ``data`` member of the response envelope."""
        try:
            resp = self._http.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path}: {e}") from e

        log.debug("bigcommerce_request", method=method, path=path, status=resp.status_code)
        _raise_for_status(method, path, resp)

        if not resp.content:
            return None
        try:
            body = resp.json()
        except ValueError as e:
            raise APIError(resp.status_code, f"{method} {path}: invalid JSON in response", body=resp.text) from e
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> BigCommerceClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class WebhookService:
    """``/hooks`` endpoints."""

    def __init__(self, client: BigCommerceClient) -> None:
        self._client = client

    def get(self, webhook_id: int) -> Webhook:
        path = f"/hooks/{webhook_id}"
        return _parse_webhook("GET", path, self._client.request("GET", path))

    def create(self, webhook: Webhook) -> Webhook:
        data = self._client.request("POST", "/hooks", json=webhook.to_request())
        return _parse_webhook("POST", "/hooks", data)

    def update(self, webhook: Webhook) -> Webhook:
        path = f"/hooks/{webhook.id}"
        data = self._client.request("PUT", path, json=webhook.to_request())
        return _parse_webhook("PUT", path, data)

    def delete(self, webhook_id: int) -> None:
        self._client.request("DELETE", f"/hooks/{webhook_id}")


def _parse_webhook(method: str, path: str, data: Any) -> Webhook:
    if data is None:
        raise InvalidResponseError(f"{method} {path}: empty response")
    try:
        return Webhook.model_validate(data)
    except ValidationError as e:
        raise InvalidResponseError(f"{method} {path}: unexpected webhook payload: {e}") from e


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

def _error_title(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        return str(body.get("title") or body.get("message") or "")
    return ""


def _raise_for_status(method: str, path: str, resp: httpx.Response) -> None:
    if resp.is_success:
        return

    status = resp.status_code
    title = _error_title(resp)
    suffix = f": {title}" if title else ""

    if status == 404:
        raise NotFoundError(status, f"{method} {path}: not found{suffix}", title, resp.text)
    if status in (401, 403):
        raise AuthenticationError(
            status, f"{method} {path}: unauthorized ({status}){suffix}", title, resp.text
        )
    if status == 422:
        raise UnprocessableEntityError(
            status, f"{method} {path}: unprocessable entity{suffix}", title, resp.text
        )
    raise APIError(status, f"{method} {path}: HTTP {status}{suffix}", title, resp.text)
