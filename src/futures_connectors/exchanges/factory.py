"""Factory for creating exchange client instances."""

from __future__ import annotations

from typing import Any, Type

from .base import BaseExchangeClient, ProxyConfig
from .gate import GateClient
from .xt import XTClient


EXCHANGE_CLIENTS: dict[str, Type[BaseExchangeClient]] = {
    "gate": GateClient,
    "xt": XTClient,
}

EXCHANGE_ALIASES: dict[str, str] = {
    "gateio": "gate",
    "gate.io": "gate",
    "xt.com": "xt",
}


def resolve_exchange_name(exchange: str) -> str:
    """Canonical exchange name for ``exchange`` (``gateio`` -> ``gate``)."""
    name = exchange.strip().lower()
    return EXCHANGE_ALIASES.get(name, name)


def create_exchange_client(
    exchange: str,
    api_key: str = "",
    api_secret: str = "",
    *,
    proxy: dict[str, Any] | None = None,
    **options: Any,
) -> BaseExchangeClient:
    """Create an exchange client instance.

    Args:
        exchange: Exchange name (gate, gateio, xt)
        api_key: API key; leave empty for a public-only client
        api_secret: API secret; leave empty for a public-only client
        proxy: Proxy configuration (url, username, password)
        **options: Client keyword arguments (base_url, timeout, underlying, ...)

    Returns:
        Configured exchange client

    Raises:
        ValueError: If exchange is not supported
        ValueError: If only one of api_key/api_secret is given
    """
    name = resolve_exchange_name(exchange)

    if name not in EXCHANGE_CLIENTS:
        supported = ", ".join(EXCHANGE_CLIENTS.keys())
        raise ValueError(
            f"Unsupported exchange: {exchange}. Supported exchanges: {supported}"
        )

    if bool(api_key) != bool(api_secret):
        raise ValueError(f"{exchange} requires both api_key and api_secret, or neither")

    client_class = EXCHANGE_CLIENTS[name]

    proxy_config = None
    if proxy:
        proxy_config = ProxyConfig(
            url=proxy.get("url"),
            username=proxy.get("username"),
            password=proxy.get("password"),
        )

    kwargs: dict[str, Any] = {"proxy": proxy_config}
    kwargs.update({k: v for k, v in options.items() if v is not None})

    return client_class(api_key, api_secret, **kwargs)
