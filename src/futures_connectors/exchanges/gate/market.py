"""Gate.io public futures market data."""

from __future__ import annotations

from .models import (
    Candlestick,
    Contract,
    ContractStats,
    FundingRateRecord,
    FuturesTicker,
    FuturesTrade,
    InsuranceRecord,
    LiquidationOrder,
    OrderBook,
    PremiumIndex,
    RiskLimitTier,
)


class GateMarketMixin:
    """Endpoints under ``/futures/{settle}`` that need no authentication."""

    async def list_futures_contracts(self, settle: str) -> list[Contract]:
        return await self._get(f"/futures/{settle}/contracts", target=list[Contract])

    async def list_contract_stats(
        self,
        settle: str,
        contract: str,
        interval: str | None = None,
        limit: int | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
    ) -> list[ContractStats]:
        params = {"contract": contract, "interval": interval, "limit": limit, "from": from_time, "to": to_time}
        return await self._get(f"/futures/{settle}/contract_stats", params, target=list[ContractStats])

    async def list_futures_order_book(
        self,
        settle: str,
        contract: str,
        interval: str | None = None,
        limit: int | None = None,
        with_id: bool | None = None,
    ) -> OrderBook:
        """Order book snapshot; ``interval`` merges price levels, ``"0"`` means none."""
        params = {"contract": contract, "interval": interval, "limit": limit, "with_id": with_id}
        return await self._get(f"/futures/{settle}/order_book", params, target=OrderBook)

    async def list_futures_trades(
        self,
        settle: str,
        contract: str,
        limit: int | None = None,
        offset: int | None = None,
        last_id: str | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
    ) -> list[FuturesTrade]:
        params = {
            "contract": contract,
            "limit": limit,
            "offset": offset,
            "last_id": last_id,
            "from": from_time,
            "to": to_time,
        }
        return await self._get(f"/futures/{settle}/trades", params, target=list[FuturesTrade])

    async def list_futures_candlesticks(
        self,
        settle: str,
        contract: str,
        limit: int | None = None,
        interval: str | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
    ) -> list[Candlestick]:
        """Candlesticks; prefix ``contract`` with ``mark_`` or ``index_`` for those price series."""
        params = {"contract": contract, "limit": limit, "interval": interval, "from": from_time, "to": to_time}
        return await self._get(f"/futures/{settle}/candlesticks", params, target=list[Candlestick])

    async def list_futures_premium_index(
        self,
        settle: str,
        contract: str,
        limit: int | None = None,
        interval: str | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
    ) -> list[PremiumIndex]:
        params = {"contract": contract, "limit": limit, "interval": interval, "from": from_time, "to": to_time}
        return await self._get(f"/futures/{settle}/premium_index", params, target=list[PremiumIndex])

    async def list_futures_tickers(self, settle: str, contract: str | None = None) -> list[FuturesTicker]:
        return await self._get(f"/futures/{settle}/tickers", {"contract": contract}, target=list[FuturesTicker])

    async def list_futures_funding_rate_history(
        self,
        settle: str,
        contract: str,
        limit: int | None = None,
    ) -> list[FundingRateRecord]:
        params = {"contract": contract, "limit": limit}
        return await self._get(f"/futures/{settle}/funding_rate", params, target=list[FundingRateRecord])

    async def list_futures_insurance_ledger(self, settle: str, limit: int | None = None) -> list[InsuranceRecord]:
        return await self._get(f"/futures/{settle}/insurance", {"limit": limit}, target=list[InsuranceRecord])

    async def get_liquidation_history(
        self,
        settle: str,
        contract: str | None = None,
        limit: int | None = None,
        at: int | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
    ) -> list[LiquidationOrder]:
        params = {"contract": contract, "limit": limit, "at": at, "from": from_time, "to": to_time}
        return await self._get(f"/futures/{settle}/liq_orders", params, target=list[LiquidationOrder])

    async def get_risk_limit_tiers(self, settle: str, contract: str) -> list[RiskLimitTier]:
        return await self._get(
            f"/futures/{settle}/risk_limit_tiers", {"contract": contract}, target=list[RiskLimitTier]
        )
