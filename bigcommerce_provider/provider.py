"""Provider definition: configuration schema, resources and data sources."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import httpx

from bigcommerce_provider.config import STORE_HASH_ENV, load_settings
from bigcommerce_provider.meta import ProviderMeta
from bigcommerce_provider.sdk import Diagnostics, Resource, Schema, ValueType, error
from bigcommerce_provider.utils.logging import get_logger
from bigcommerce_provider.webhooks import data_source_webhook, resource_webhook

log = get_logger(__name__)

WEBHOOK_TYPE = "bigcommerce_webhook"


class Provider:
    """Entry point the host runtime loads."""

    def __init__(
        self,
        config_path: str | Path | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config_path = config_path
        self._transport = transport
        self.schema: dict[str, Schema] = {
            "store_hash": Schema(
                ValueType.STRING,
                optional=True,
                env_default=STORE_HASH_ENV,
                description="Store hash from the API path, e.g. abc123 in /stores/abc123/.",
            ),
        }
        self.resources: dict[str, Resource] = {WEBHOOK_TYPE: resource_webhook()}
        self.data_sources: dict[str, Resource] = {WEBHOOK_TYPE: data_source_webhook()}

    def configure(self, config: Mapping[str, Any] | None = None) -> tuple[ProviderMeta | None, Diagnostics]:
        """Resolve provider configuration into the meta value handed to callbacks."""
        config = config or {}
        diags = Diagnostics()

        unknown = sorted(set(config) - set(self.schema))
        for name in unknown:
            diags.append(error("Unsupported argument", f"An argument named {name!r} is not expected here.", name))
        if unknown:
            return None, diags

        settings = load_settings(self._config_path, store_hash=config.get("store_hash"))
        if not settings.store_hash:
            diags.append(
                error(
                    "Missing store_hash from provider configuration",
                    f"store_hash is a required parameter and must be defined, "
                    f"you can also use {STORE_HASH_ENV} environment variable.",
                    "store_hash",
                )
            )
            return None, diags

        log.debug("provider_configured", store_hash=settings.store_hash, api_url=settings.api_url)
        meta = ProviderMeta(
            store_hash=settings.store_hash,
            api_url=settings.api_url,
            timeout=settings.timeout,
            transport=self._transport,
        )
        return meta, diags

    def resource(self, type_name: str) -> Resource:
        try:
            return self.resources[type_name]
        except KeyError:
            raise KeyError(f"unknown resource type {type_name!r}") from None

    def data_source(self, type_name: str) -> Resource:
        try:
            return self.data_sources[type_name]
        except KeyError:
            raise KeyError(f"unknown data source {type_name!r}") from None

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider": {name: sch.to_dict() for name, sch in self.schema.items()},
            "resources": {name: res.to_dict() for name, res in self.resources.items()},
            "data_sources": {name: ds.to_dict() for name, ds in self.data_sources.items()},
        }
