"""``bigcommerce_webhook`` managed resource."""

from __future__ import annotations

from bigcommerce_provider.client import BigCommerceError, NotFoundError
from bigcommerce_provider.meta import ProviderMeta, create_client
from bigcommerce_provider.sdk import (
    Diagnostics,
    Resource,
    ResourceData,
    Schema,
    ValueType,
    from_err,
    warning,
)
from bigcommerce_provider.utils.logging import get_logger
from bigcommerce_provider.webhooks.headers import (
    invalid_id,
    parse_webhook_id,
    set_webhook_data,
    webhook_from_data,
)

log = get_logger(__name__)

_WEBHOOK_FIELDS = ("scope", "destination", "is_active", "header")


def header_schema(computed: bool = False) -> Schema:
    flags = {"computed": True} if computed else {"required": True}
    return Schema(
        ValueType.SET,
        optional=True,
        computed=computed,
        description="Custom HTTP header sent with every delivery.",
        elem={
            "key": Schema(ValueType.STRING, **flags),
            "value": Schema(ValueType.STRING, **flags),
        },
    )


def resource_webhook() -> Resource:
    return Resource(
        description="Provides a BigCommerce Webhook resource.",
        create=create_webhook,
        read=read_webhook,
        update=update_webhook,
        delete=delete_webhook,
        schema={
            "id": Schema(ValueType.STRING, computed=True),
            "client_id": Schema(ValueType.STRING, required=True, sensitive=True),
            "access_token": Schema(ValueType.STRING, required=True, sensitive=True),
            "scope": Schema(ValueType.STRING, required=True, description="Event topic, e.g. store/order/created."),
            "destination": Schema(ValueType.STRING, required=True, description="HTTPS URL receiving events."),
            "is_active": Schema(ValueType.BOOL, required=True),
            "header": header_schema(),
        },
    )


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def create_webhook(d: ResourceData, meta: ProviderMeta) -> Diagnostics:
    webhook = webhook_from_data(d)
    try:
        with create_client(meta, d.get("client_id"), d.get("access_token")) as client:
            result = client.webhooks.create(webhook)
    except BigCommerceError as e:
        log.warning("webhook_create_failed", scope=webhook.scope, error=str(e))
        return from_err(e)

    d.set_id(str(result.id))
    log.info("webhook_created", webhook_id=result.id, scope=result.scope)
    return Diagnostics()


def read_webhook(d: ResourceData, meta: ProviderMeta) -> Diagnostics:
    try:
        webhook_id = parse_webhook_id(d.id)
    except ValueError:
        return invalid_id(d.id)

    try:
        with create_client(meta, d.get("client_id"), d.get("access_token")) as client:
            webhook = client.webhooks.get(webhook_id)
    except NotFoundError:
        # Host drops the resource from state and plans a create
        log.warning("webhook_not_found", webhook_id=webhook_id)
        d.set_id("")
        return Diagnostics([
            warning(
                "Webhook not found",
                f"Webhook {webhook_id} no longer exists and was removed from state.",
                "id",
            )
        ])
    except BigCommerceError as e:
        return from_err(e)

    return set_webhook_data(webhook, d)


def update_webhook(d: ResourceData, meta: ProviderMeta) -> Diagnostics:
    try:
        webhook_id = parse_webhook_id(d.id)
    except ValueError:
        return invalid_id(d.id)

    if d.has_change("client_id") or d.has_change("access_token"):
        diags = _recreate(d, meta, webhook_id)
        if diags.has_error():
            return diags
    elif any(d.has_change(name) for name in _WEBHOOK_FIELDS):
        webhook = webhook_from_data(d, webhook_id)
        try:
            with create_client(meta, d.get("client_id"), d.get("access_token")) as client:
                client.webhooks.update(webhook)
        except BigCommerceError as e:
            return from_err(e)
        log.info("webhook_updated", webhook_id=webhook_id, scope=webhook.scope)

    return read_webhook(d, meta)


def _recreate(d: ResourceData, meta: ProviderMeta, webhook_id: int) -> Diagnostics:
    """Move the webhook to new credentials.

    A webhook belongs to the API account that created it, so the old
    credentials delete it and the new ones create a replacement.
    """
    prev_client_id, client_id = d.get_change("client_id")
    prev_access_token, access_token = d.get_change("access_token")

    try:
        with create_client(meta, prev_client_id, prev_access_token) as client:
            client.webhooks.delete(webhook_id)
    except BigCommerceError as e:
        return from_err(e)
    d.set_id("")

    try:
        with create_client(meta, client_id, access_token) as client:
            result = client.webhooks.create(webhook_from_data(d))
    except BigCommerceError as e:
        log.warning("webhook_recreate_failed", old_webhook_id=webhook_id, error=str(e))
        return from_err(e)

    d.set_id(str(result.id))
    log.info("webhook_recreated", old_webhook_id=webhook_id, webhook_id=result.id)
    return Diagnostics()


def delete_webhook(d: ResourceData, meta: ProviderMeta) -> Diagnostics:
    try:
        webhook_id = parse_webhook_id(d.id)
    except ValueError:
        return invalid_id(d.id)

    try:
        with create_client(meta, d.get("client_id"), d.get("access_token")) as client:
            client.webhooks.delete(webhook_id)
    except BigCommerceError as e:
        return from_err(e)

    d.set_id("")
    log.info("webhook_deleted", webhook_id=webhook_id)
    return Diagnostics()
