"""Gate.io and XT.com futures connectors."""

from .protocol import ExchangeClient, PreparedRequest, RequestDescriptor, SignedEnvelope
from .errors import (
    ConfigurationError,
    DecodeError,
    ExchangeError,
    ExchangeRejectedError,
    GateAPIError,
    PayloadError,
    TransportError,
    UnexpectedResponseError,
    XTAPIError,
)
from .base import BaseExchangeClient, ProxyConfig
from .gate import GateClient
from .xt import XTClient
from .factory import create_exchange_client, resolve_exchange_name, EXCHANGE_CLIENTS
from .normalization import normalize_symbol, extract_base_symbol, check_symbol_mismatch, to_exchange_symbol

__all__ = [
    "ExchangeClient",
    "PreparedRequest",
    "RequestDescriptor",
    "SignedEnvelope",
    "ConfigurationError",
    "DecodeError",
    "ExchangeError",
    "ExchangeRejectedError",
    "GateAPIError",
    "PayloadError",
    "TransportError",
    "UnexpectedResponseError",
    "XTAPIError",
    "BaseExchangeClient",
    "ProxyConfig",
    "GateClient",
    "XTClient",
    "create_exchange_client",
    "resolve_exchange_name",
    "EXCHANGE_CLIENTS",
    "normalize_symbol",
    "extract_base_symbol",
    "check_symbol_mismatch",
    "to_exchange_symbol",
]
