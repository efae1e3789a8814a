"""Exchange client initialization from settings."""

from __future__ import annotations

import logging
from typing import Any, Dict

from .base import BaseExchangeClient
from .errors import ExchangeError
from .factory import create_exchange_client, resolve_exchange_name
from ..settings import ExchangeSettings, ProxySettings, Settings

logger = logging.getLogger(__name__)


def _proxy_dict(proxy: ProxySettings) -> dict[str, Any] | None:
    if not proxy.enabled or not proxy.url:
        return None
    return {
        "url": proxy.url,
        "username": proxy.username,
        "password": proxy.password.get_secret_value() if proxy.password else None,
    }


def client_options(name: str, config: ExchangeSettings) -> dict[str, Any]:
    """Keyword arguments for the client constructor of exchange ``name``."""
    options: dict[str, Any] = {"base_url": config.base_url, "timeout": config.timeout}
    if name == "xt":
        options["coin_base_url"] = config.coin_base_url
        options["underlying"] = config.underlying
        options["recv_window"] = config.recv_window
    return options


def create_client(name: str, config: ExchangeSettings, proxy: ProxySettings | None = None) -> BaseExchangeClient:
    """Build one client; public-only when ``config`` carries no credentials."""
    canonical = resolve_exchange_name(name)
    api_key = api_secret = ""
    if config.credentials:
        api_key = config.credentials.api_key.get_secret_value()
        api_secret = config.credentials.api_secret.get_secret_value()

    return create_exchange_client(
        canonical,
        api_key,
        api_secret,
        proxy=_proxy_dict(proxy) if proxy else None,
        **client_options(canonical, config),
    )


def create_exchange_clients_from_settings(settings: Settings) -> Dict[str, BaseExchangeClient]:
    """Create exchange clients from settings configuration."""
    clients: Dict[str, BaseExchangeClient] = {}

    for exchange_name, exchange_config in settings.exchanges.items():
        if not exchange_config.enabled:
            logger.debug("Exchange %s is disabled, skipping", exchange_name)
            continue

        if not exchange_config.credentials:
            logger.info("Exchange %s has no credentials configured, public endpoints only", exchange_name)

        try:
            client = create_client(exchange_name, exchange_config, settings.proxy)
        except (ValueError, ExchangeError) as e:
            logger.error("Failed to initialize exchange client for %s: %s", exchange_name, e)
            continue

        clients[resolve_exchange_name(exchange_name)] = client
        logger.info("Initialized exchange client for %s", exchange_name)

    return clients
