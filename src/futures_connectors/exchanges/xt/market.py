"""XT.com public futures market data."""

from __future__ import annotations

from .models import (
    AggTicker,
    BookTicker,
    ClientIP,
    Contract,
    ContractList,
    CursorPage,
    Deal,
    Depth,
    FundingRate,
    Kline,
    LeverageDetail,
    OpenInterest,
    PricePoint,
    RiskBalance,
    Ticker,
)

_MARKET = "/future/market/v1/public"


class XTMarketMixin:
    """Unsigned endpoints under ``/future/market``."""

    async def get_server_time(self) -> int:
        """Server time in milliseconds."""
        return await self._public(f"{_MARKET}/time", result=int)

    async def get_client_ip(self) -> ClientIP:
        return await self._public("/future/public/client", result=ClientIP)

    async def get_coins_info(self) -> list[str]:
        return await self._public(f"{_MARKET}/symbol/coins", result=list[str])

    async def get_market_config(self, symbol: str) -> Contract:
        return await self._public(f"{_MARKET}/symbol/detail", {"symbol": symbol}, result=Contract)

    async def get_all_market_config(self) -> ContractList:
        return await self._public("/future/market/v3/public/symbol/list", result=ContractList)

    async def get_leverage_detail(self, symbol: str) -> LeverageDetail:
        return await self._public(
            f"{_MARKET}/leverage/bracket/detail", {"symbol": symbol}, result=LeverageDetail
        )

    async def get_leverage_detail_list(self) -> list[LeverageDetail]:
        return await self._public(f"{_MARKET}/leverage/bracket/list", result=list[LeverageDetail])

    async def get_market_ticker(self, symbol: str) -> Ticker:
        return await self._public(f"{_MARKET}/q/ticker", {"symbol": symbol}, result=Ticker)

    async def get_market_tickers(self) -> list[Ticker]:
        return await self._public(f"{_MARKET}/q/tickers", result=list[Ticker])

    async def get_market_deal(self, symbol: str, num: int) -> list[Deal]:
        return await self._public(f"{_MARKET}/q/deal", {"symbol": symbol, "num": num}, result=list[Deal])

    async def get_depth(self, symbol: str, level: int) -> Depth:
        """Order book with ``level`` price levels per side (1-50)."""
        return await self._public(f"{_MARKET}/q/depth", {"symbol": symbol, "level": level}, result=Depth)

    async def get_index_price(self, symbol: str) -> PricePoint:
        return await self._public(f"{_MARKET}/q/symbol-index-price", {"symbol": symbol}, result=PricePoint)

    async def get_all_index_price(self) -> list[PricePoint]:
        return await self._public(f"{_MARKET}/q/index-price", result=list[PricePoint])

    async def get_mark_price(self, symbol: str) -> PricePoint:
        return await self._public(f"{_MARKET}/q/symbol-mark-price", {"symbol": symbol}, result=PricePoint)

    async def get_all_mark_price(self) -> list[PricePoint]:
        return await self._public(f"{_MARKET}/q/mark-price", result=list[PricePoint])

    async def get_klines(
        self,
        symbol: str,
        interval: str,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
    ) -> list[Kline]:
        """Candles; ``interval`` is one of ``1m 5m 15m 30m 1h 4h 1d 1w``."""
        params = {
            "symbol": symbol,
            "interval": interval,
            "startTime": start_time,
            "endTime": end_time,
            "limit": limit,
        }
        return await self._public(f"{_MARKET}/q/kline", params, result=list[Kline])

    async def get_agg_ticker(self, symbol: str) -> AggTicker:
        return await self._public(f"{_MARKET}/q/agg-ticker", {"symbol": symbol}, result=AggTicker)

    async def get_all_agg_ticker(self) -> list[AggTicker]:
        return await self._public(f"{_MARKET}/q/agg-tickers", result=list[AggTicker])

    async def get_funding_rate(self, symbol: str) -> FundingRate:
        return await self._public(f"{_MARKET}/q/funding-rate", {"symbol": symbol}, result=FundingRate)

    async def get_funding_rate_record(
        self,
        symbol: str,
        direction: str | None = None,
        id: int | None = None,
        limit: int | None = None,
    ) -> CursorPage[FundingRate]:
        params = {"symbol": symbol, "direction": direction, "id": id, "limit": limit}
        return await self._public(
            f"{_MARKET}/q/funding-rate-record", params, result=CursorPage[FundingRate]
        )

    async def get_book_ticker(self, symbol: str) -> BookTicker:
        return await self._public(f"{_MARKET}/q/ticker/book", {"symbol": symbol}, result=BookTicker)

    async def get_all_book_tickers(self) -> list[BookTicker]:
        return await self._public(f"{_MARKET}/q/ticker/books", result=list[BookTicker])

    async def get_risk_balance(
        self,
        symbol: str,
        direction: str | None = None,
        id: int | None = None,
        limit: int | None = None,
    ) -> CursorPage[RiskBalance]:
        """Insurance fund balance history."""
        params = {"symbol": symbol, "direction": direction, "id": id, "limit": limit}
        return await self._public(
            f"{_MARKET}/contract/risk-balance", params, result=CursorPage[RiskBalance]
        )

    async def get_open_interest(self, symbol: str) -> OpenInterest:
        return await self._public(f"{_MARKET}/contract/open-interest", {"symbol": symbol}, result=OpenInterest)
