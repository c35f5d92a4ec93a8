"""Shared fixtures: an in-memory BigCommerce API and a host-style driver."""

from __future__ import annotations

import json
import re
from typing import Any

import httpx
import pytest

from bigcommerce_provider.meta import ProviderMeta
from bigcommerce_provider.provider import WEBHOOK_TYPE, Provider
from bigcommerce_provider.sdk import Diagnostics, Resource

STORE_HASH = "abc123"

ACCOUNTS = {
    "client-a": "token-a",
    "client-b": "token-b",
}

_HOOK_PATH_RE = re.compile(r"^/stores/(?P<store>[^/]+)/v3/hooks(?:/(?P<id>[^/]+))?$")


def _error(status: int, title: str) -> httpx.Response:
    return httpx.Response(status, json={"status": status, "title": title, "type": "about:blank"})


class FakeBigCommerceAPI:
    """Stand-in for the v3 ``/hooks`` endpoints.

    Webhooks belong to the API account (client ID) that created them; other
    accounts get a 404 for them, like the real API.
    """

    def __init__(self, store_hash: str = STORE_HASH, accounts: dict[str, str] | None = None) -> None:
        self.store_hash = store_hash
        self.accounts = dict(accounts or ACCOUNTS)
        self.hooks: dict[int, dict[str, Any]] = {}
        self.requests: list[tuple[str, str]] = []
        self.fail_next: dict[str, int] = {}
        self._next_id = 20000001
        self.transport = httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append((request.method, path))

        match = _HOOK_PATH_RE.match(path)
        if match is None or match["store"] != self.store_hash:
            return _error(404, "Store not found")

        client_id = request.headers.get("X-Auth-Client", "")
        if not client_id or self.accounts.get(client_id) != request.headers.get("X-Auth-Token"):
            return _error(401, "Unauthorized")

        status = self.fail_next.pop(request.method, None)
        if status is not None:
            return _error(status, "Injected failure")

        raw_id = match["id"]
        if raw_id is None:
            if request.method != "POST":
                return _error(405, "Method not allowed")
            return self._create(client_id, json.loads(request.content))

        hook = self.hooks.get(int(raw_id)) if raw_id.isdigit() else None
        if hook is None or hook["client_id"] != client_id:
            return _error(404, "The requested webhook was not found.")

        if request.method == "GET":
            return httpx.Response(200, json={"data": hook, "meta": {}})
        if request.method == "PUT":
            body = json.loads(request.content)
            for key in ("scope", "destination", "is_active"):
                if key in body:
                    hook[key] = body[key]
            if "headers" in body:
                hook["headers"] = body["headers"] or None
            hook["updated_at"] += 1
            return httpx.Response(200, json={"data": hook, "meta": {}})
        if request.method == "DELETE":
            del self.hooks[hook["id"]]
            return httpx.Response(200, json={"data": hook, "meta": {}})
        return _error(405, "Method not allowed")

    def _create(self, client_id: str, body: dict[str, Any]) -> httpx.Response:
        if not body.get("scope") or not str(body.get("destination", "")).startswith("https://"):
            return _error(422, "Webhook scope and an https destination are required")
        hook_id = self._next_id
        self._next_id += 1
        hook = {
            "id": hook_id,
            "client_id": client_id,
            "store_hash": self.store_hash,
            "scope": body["scope"],
            "destination": body["destination"],
            "is_active": body.get("is_active", True),
            "headers": body.get("headers") or None,
            "created_at": 1700000000,
            "updated_at": 1700000000,
        }
        self.hooks[hook_id] = hook
        return httpx.Response(200, json={"data": hook, "meta": {}})

    def exists(self, hook_id: str | int, client_id: str) -> bool:
        hook = self.hooks.get(int(hook_id))
        return hook is not None and hook["client_id"] == client_id


class ApplyFailed(AssertionError):
    def __init__(self, diags: Diagnostics) -> None:
        self.diags = diags
        super().__init__("\n".join(str(d) for d in diags))


class Host:
    """Drives a resource's callbacks the way the host runtime would."""

    def __init__(self, resource: Resource, meta: ProviderMeta) -> None:
        self.resource = resource
        self.meta = meta

    def _check(self, diags: Diagnostics) -> None:
        if diags.has_error():
            raise ApplyFailed(diags)

    def apply(self, config: dict[str, Any], state: dict[str, Any] | None = None) -> dict[str, Any] | None:
        self._check(self.resource.validate(config))
        if state is None:
            d = self.resource.data(config=config)
            self._check(self.resource.create(d, self.meta))
        else:
            d = self.resource.data(state=state, config=config)
            self._check(self.resource.update(d, self.meta))
        return d.state()

    def refresh(self, state: dict[str, Any]) -> dict[str, Any] | None:
        d = self.resource.data(state=state)
        self._check(self.resource.read(d, self.meta))
        return d.state()

    def destroy(self, state: dict[str, Any]) -> None:
        d = self.resource.data(state=state)
        self._check(self.resource.delete(d, self.meta))
        assert d.state() is None


def webhook_config(
    client_id: str = "client-a",
    access_token: str = "token-a",
    scope: str = "store/order/created",
    is_active: bool = True,
    headers: list[dict[str, str]] | None = None,
) -> dict[str, Any]:
    return {
        "client_id": client_id,
        "access_token": access_token,
        "scope": scope,
        "destination": "https://127.0.0.1/test123",
        "is_active": is_active,
        "header": headers if headers is not None else [{"key": "X-Functions-Key", "value": "test123"}],
    }


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in (
        "BIGCOMMERCE_STORE_HASH",
        "BIGCOMMERCE_API_URL",
        "BIGCOMMERCE_TIMEOUT",
        "BIGCOMMERCE_LOG_LEVEL",
        "BIGCOMMERCE_LOG_JSON",
        "BIGCOMMERCE_PROVIDER_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BIGCOMMERCE_PROVIDER_CONFIG_DIR", str(tmp_path / "config"))


@pytest.fixture
def fake_api():
    return FakeBigCommerceAPI()


@pytest.fixture
def provider(fake_api):
    return Provider(transport=fake_api.transport)


@pytest.fixture
def meta(provider):
    meta, diags = provider.configure({"store_hash": STORE_HASH})
    assert not diags.has_error()
    return meta


@pytest.fixture
def host(provider, meta):
    return Host(provider.resource(WEBHOOK_TYPE), meta)
