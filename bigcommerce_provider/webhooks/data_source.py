"""``bigcommerce_webhook`` data source."""

from __future__ import annotations

from bigcommerce_provider.client import BigCommerceError
from bigcommerce_provider.meta import ProviderMeta, create_client
from bigcommerce_provider.sdk import Diagnostics, Resource, ResourceData, Schema, ValueType, from_err
from bigcommerce_provider.webhooks.headers import invalid_id, parse_webhook_id, set_webhook_data
from bigcommerce_provider.webhooks.resource import header_schema


def data_source_webhook() -> Resource:
    return Resource(
        description="Provides information about a webhook",
        read=read_webhook_data_source,
        schema={
            "id": Schema(ValueType.STRING, required=True),
            "client_id": Schema(ValueType.STRING, required=True, sensitive=True),
            "access_token": Schema(ValueType.STRING, required=True, sensitive=True),
            "scope": Schema(ValueType.STRING, computed=True),
            "destination": Schema(ValueType.STRING, computed=True),
            "is_active": Schema(ValueType.BOOL, computed=True),
            "header": header_schema(computed=True),
        },
    )


def read_webhook_data_source(d: ResourceData, meta: ProviderMeta) -> Diagnostics:
    hook_id = d.get("id")
    try:
        webhook_id = parse_webhook_id(hook_id)
    except ValueError:
        return invalid_id(hook_id)

    # Unlike the resource, a missing webhook is an error here
    try:
        with create_client(meta, d.get("client_id"), d.get("access_token")) as client:
            webhook = client.webhooks.get(webhook_id)
    except BigCommerceError as e:
        return from_err(e)

    diags = set_webhook_data(webhook, d)
    if diags.has_error():
        return diags
    d.set_id(str(webhook.id))
    return diags
