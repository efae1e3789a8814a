"""Gate.io futures client."""

from __future__ import annotations

from .account import GateAccountMixin
from .market import GateMarketMixin
from .rest import GateRestClient
from .trading import GateTradingMixin


class GateClient(GateMarketMixin, GateAccountMixin, GateTradingMixin, GateRestClient):
    """Gate.io API v4 futures client (USDT and BTC settled contracts).

    Example:
        async with GateClient(api_key, api_secret) as client:
            tickers = await client.list_futures_tickers("usdt", contract="BTC_USDT")
    """
