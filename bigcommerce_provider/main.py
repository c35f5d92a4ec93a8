"""Command-line entry point for inspecting the provider and its webhooks."""

from __future__ import annotations

import json
import sys

import click

from bigcommerce_provider.config import load_settings
from bigcommerce_provider.provider import WEBHOOK_TYPE, Provider
from bigcommerce_provider.sdk import Diagnostics
from bigcommerce_provider.utils.logging import get_logger, setup_logging

log = get_logger(__name__)


def _fail(diags: Diagnostics) -> None:
    for diag in diags.errors:
        click.echo(str(diag), err=True)
    sys.exit(1)


@click.group()
@click.option("--config", "config_path", default=None, help="Path to config YAML file")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None, json_logs: bool) -> None:
    """BigCommerce webhook provider tools."""
    settings = load_settings(config_path)
    if log_level:
        settings.log_level = log_level
    if json_logs:
        settings.log_json = True
    setup_logging(level=settings.log_level, json_output=settings.log_json)
    ctx.obj = Provider(config_path=config_path)


@cli.command()
@click.pass_obj
def schema(provider: Provider) -> None:
    """Print provider, resource and data source schemas as JSON."""
    click.echo(json.dumps(provider.to_dict(), indent=2))


@cli.group()
def webhook() -> None:
    """Webhook lookups."""


@webhook.command("get")
@click.argument("webhook_id")
@click.option("--store-hash", default=None, help="Store hash (default: BIGCOMMERCE_STORE_HASH)")
@click.option("--client-id", envvar="BIGCOMMERCE_CLIENT_ID", required=True, help="API account client ID")
@click.option("--access-token", envvar="BIGCOMMERCE_ACCESS_TOKEN", required=True, help="API account access token")
@click.pass_obj
def get_webhook(
    provider: Provider,
    webhook_id: str,
    store_hash: str | None,
    client_id: str,
    access_token: str,
) -> None:
    """Read a webhook by ID through the data source and print its state."""
    meta, diags = provider.configure({"store_hash": store_hash})
    if meta is None:
        _fail(diags)

    data_source = provider.data_source(WEBHOOK_TYPE)
    d = data_source.data(config={"id": webhook_id, "client_id": client_id, "access_token": access_token})
    diags.extend(data_source.read(d, meta))
    if diags.has_error():
        _fail(diags)
    for diag in diags.warnings:
        click.echo(str(diag), err=True)

    log.info("webhook_fetched", webhook_id=d.id)
    click.echo(json.dumps(data_source.redact(d.state() or {}), indent=2, sort_keys=True))


if __name__ == "__main__":
    cli()
