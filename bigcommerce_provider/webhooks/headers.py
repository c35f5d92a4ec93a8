"""Mapping between declarative webhook attributes and the API model."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from bigcommerce_provider.client import Webhook
from bigcommerce_provider.sdk import Diagnostics, ResourceData, error


def format_headers(pairs: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """Collapse ``{key, value}`` pairs into a header mapping.

    Duplicate keys are not an error: the last pair seen wins. Set iteration
    order is unspecified, so which duplicate survives is too.
    """
    headers: dict[str, str] = {}
    for pair in pairs:
        headers[pair["key"]] = pair["value"]
    return headers


def flatten_headers(headers: Mapping[str, str] | None) -> list[dict[str, str]]:
    """Expand a header mapping into ``{key, value}`` set elements, in no particular order."""
    return [{"key": key, "value": value} for key, value in (headers or {}).items()]


def parse_webhook_id(raw: str) -> int:
    """Parse a local identity back into the numeric remote ID.

    Raises ValueError for anything that is not a positive base-10 integer
    written in ASCII digits.
    """
    text = raw.strip()
    if not (text.isascii() and text.isdigit()) or int(text, 10) <= 0:
        raise ValueError(f"webhook ID must be a positive integer, got {raw!r}")
    return int(text, 10)


def invalid_id(raw: str) -> Diagnostics:
    return Diagnostics([
        error(
            "Invalid webhook ID",
            f"{raw!r} is not a numeric BigCommerce webhook ID.",
            "id",
        )
    ])


def webhook_from_data(d: ResourceData, webhook_id: int = 0) -> Webhook:
    return Webhook(
        id=webhook_id,
        scope=d.get("scope"),
        destination=d.get("destination"),
        is_active=d.get("is_active"),
        headers=format_headers(d.get("header")),
    )


def set_webhook_data(webhook: Webhook, d: ResourceData) -> Diagnostics:
    """Copy the remote webhook's fields into local state."""
    values = {
        "id": str(webhook.id),
        "scope": webhook.scope,
        "destination": webhook.destination,
        "is_active": webhook.is_active,
        "header": flatten_headers(webhook.headers),
    }
    for key, value in values.items():
        try:
            d.set(key, value)
        except ValueError as e:
            return Diagnostics([error(str(e), attribute=key)])
    return Diagnostics()
