"""XT.com futures client."""

from __future__ import annotations

from .account import XTAccountMixin
from .market import XTMarketMixin
from .rest import XTRestClient
from .trading import XTTradingMixin


class XTClient(XTMarketMixin, XTAccountMixin, XTTradingMixin, XTRestClient):
    """XT.com futures client for USDT-M and COIN-M contracts.

    Example:
        async with XTClient(api_key, api_secret, underlying="usdt") as client:
            depth = await client.get_depth("btc_usdt", 20)
    """
