"""Symbol normalization between Gate.io and XT.com contract names.

Gate.io names futures contracts ``BTC_USDT``; XT.com uses ``btc_usdt``.
Callers may also pass ``BTCUSDT``, ``BTC-USDT`` or ``BTC/USDT``.
"""

from __future__ import annotations

import logging
from typing import Any

from .factory import resolve_exchange_name

logger = logging.getLogger(__name__)

_SEPARATORS = ("_", "-", "/")
_QUOTE_CURRENCIES = ("USDT", "USDC", "USD", "BTC", "ETH")


def extract_base_symbol(symbol: str) -> tuple[str, str]:
    """Extract base and quote currency from a symbol.

    - BTC_USDT -> (BTC, USDT)
    - btc_usdt -> (BTC, USDT)
    - BTC-USDT, BTC/USDT -> (BTC, USDT)
    - BTCUSDT -> (BTC, USDT)
    - BTC -> (BTC, '')
    """
    if not symbol:
        return "", ""

    symbol = symbol.strip().upper()

    for sep in _SEPARATORS:
        if sep in symbol:
            parts = symbol.split(sep)
            if len(parts) == 2 and parts[0] and parts[1]:
                return parts[0].strip(), parts[1].strip()

    for quote in sorted(_QUOTE_CURRENCIES, key=len, reverse=True):
        if symbol.endswith(quote):
            base = symbol[: -len(quote)]
            if base:
                return base, quote

    return symbol, ""


def normalize_symbol(symbol: str, format: str = "unified") -> str:
    """Normalize a symbol to one of the supported formats.

    Args:
        symbol: Symbol in any format
        format: ``unified`` (BTCUSDT), ``gate`` (BTC_USDT) or ``xt`` (btc_usdt)

    Returns:
        Normalized symbol; unified form when base/quote cannot be split
    """
    if not symbol:
        return symbol

    unified = symbol.strip().upper()
    for sep in _SEPARATORS + (" ",):
        unified = unified.replace(sep, "")

    if format == "unified":
        return unified

    base, quote = extract_base_symbol(symbol)
    if not (base and quote):
        return unified if format == "gate" else unified.lower()

    if format == "gate":
        return f"{base}_{quote}"
    if format == "xt":
        return f"{base}_{quote}".lower()
    return unified


def to_exchange_symbol(exchange: str, symbol: str) -> str:
    """Contract name as ``exchange`` expects it."""
    name = resolve_exchange_name(exchange)
    if name not in ("gate", "xt"):
        raise ValueError(f"Unsupported exchange: {exchange}")
    return normalize_symbol(symbol, format=name)


def check_symbol_mismatch(
    expected: str,
    actual: str,
    logger_func: Any = None,
) -> bool:
    """Check if two symbols represent the same contract, logging a warning if not."""
    if logger_func is None:
        logger_func = logger.warning

    expected_normalized = normalize_symbol(expected)
    actual_normalized = normalize_symbol(actual)

    if expected_normalized != actual_normalized:
        logger_func(
            f"Symbol mismatch: expected {expected} ({expected_normalized}), "
            f"got {actual} ({actual_normalized})"
        )
        return False

    return True
