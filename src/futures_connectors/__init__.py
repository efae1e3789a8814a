"""futures-connectors: signed REST clients for Gate.io and XT.com futures."""

from .settings import Settings
from .exchanges import (
    ExchangeClient,
    ExchangeError,
    GateClient,
    XTClient,
    create_exchange_client,
    normalize_symbol,
)

__all__ = [
    "Settings",
    "ExchangeClient",
    "ExchangeError",
    "GateClient",
    "XTClient",
    "create_exchange_client",
    "normalize_symbol",
]
