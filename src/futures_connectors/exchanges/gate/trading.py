"""Gate.io futures order placement and management."""

from __future__ import annotations

import json
from typing import Sequence

from pydantic import ValidationError

from ..errors import DecodeError
from .models import (
    CountdownCancelAllRequest,
    CountdownCancelAllResult,
    CreateFuturesOrderRequest,
    CreateTriggerOrderRequest,
    FuturesOrder,
    FuturesTrade,
    PriceTriggeredOrder,
    TriggerOrderCreated,
)


class GateTradingMixin:
    """Signed order endpoints under ``/futures/{settle}/orders`` and ``price_orders``."""

    async def create_futures_order(self, settle: str, order: CreateFuturesOrderRequest) -> FuturesOrder:
        return await self._post(f"/futures/{settle}/orders", json=order, target=FuturesOrder)

    async def list_futures_orders(
        self,
        settle: str,
        status: str,
        contract: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        last_id: str | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
    ) -> list[FuturesOrder]:
        """List orders with ``status`` ``open`` or ``finished``."""
        params = {
            "status": status,
            "contract": contract,
            "limit": limit,
            "offset": offset,
            "last_id": last_id,
            "from": from_time,
            "to": to_time,
        }
        return await self._get(f"/futures/{settle}/orders", params, target=list[FuturesOrder], private=True)

    async def cancel_all_futures_orders(
        self,
        settle: str,
        contract: str,
        side: str | None = None,
    ) -> list[FuturesOrder]:
        """Cancel every open order of ``contract``, optionally only ``ask`` or ``bid``."""
        params = {"contract": contract, "side": side}
        return await self._delete(f"/futures/{settle}/orders", params, target=list[FuturesOrder])

    async def batch_cancel_futures_orders(self, settle: str, order_ids: Sequence[str]) -> list[FuturesOrder]:
        return await self._delete(f"/futures/{settle}/orders", json=list(order_ids), target=list[FuturesOrder])

    async def get_futures_order(self, settle: str, order_id: str) -> FuturesOrder:
        """``order_id`` may also be the custom ``t-`` text set at creation."""
        return await self._get(f"/futures/{settle}/orders/{order_id}", target=FuturesOrder, private=True)

    async def cancel_futures_order(self, settle: str, order_id: str) -> FuturesOrder:
        return await self._delete(f"/futures/{settle}/orders/{order_id}", target=FuturesOrder)

    async def amend_futures_order(
        self,
        settle: str,
        order_id: str,
        size: int | None = None,
        price: str | None = None,
        amend_text: str | None = None,
    ) -> FuturesOrder:
        params = {"size": size, "price": price, "amend_text": amend_text}
        return await self._put(f"/futures/{settle}/orders/{order_id}", params, target=FuturesOrder)

    async def list_my_futures_trades(
        self,
        settle: str,
        contract: str | None = None,
        order_id: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        last_id: str | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
    ) -> list[FuturesTrade]:
        params = {
            "contract": contract,
            "order": order_id,
            "limit": limit,
            "offset": offset,
            "last_id": last_id,
            "from": from_time,
            "to": to_time,
        }
        return await self._get(f"/futures/{settle}/my_trades", params, target=list[FuturesTrade], private=True)

    async def create_trigger_order(self, settle: str, order: CreateTriggerOrderRequest) -> TriggerOrderCreated:
        return await self._post(f"/futures/{settle}/price_orders", json=order, target=TriggerOrderCreated)

    async def list_trigger_orders(
        self,
        settle: str,
        status: str,
        contract: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[PriceTriggeredOrder]:
        params = {"status": status, "contract": contract, "limit": limit, "offset": offset}
        return await self._get(
            f"/futures/{settle}/price_orders", params, target=list[PriceTriggeredOrder], private=True
        )

    async def cancel_all_trigger_orders(self, settle: str, contract: str) -> list[PriceTriggeredOrder]:
        return await self._delete(
            f"/futures/{settle}/price_orders", {"contract": contract}, target=list[PriceTriggeredOrder]
        )

    async def get_trigger_order(self, settle: str, order_id: str) -> PriceTriggeredOrder:
        return await self._get(
            f"/futures/{settle}/price_orders/{order_id}", target=PriceTriggeredOrder, private=True
        )

    async def cancel_trigger_order(self, settle: str, order_id: str) -> PriceTriggeredOrder:
        return await self._delete(f"/futures/{settle}/price_orders/{order_id}", target=PriceTriggeredOrder)

    async def set_countdown_cancel_all(
        self,
        settle: str,
        request: CountdownCancelAllRequest,
    ) -> CountdownCancelAllResult | None:
        """Dead man's switch: cancel all open orders unless renewed within ``timeout`` seconds."""
        data = await self._post(f"/futures/{settle}/countdown_cancel_all", json=request)
        if data is None:
            return None
        try:
            return CountdownCancelAllResult.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(self.name, CountdownCancelAllResult, json.dumps(data), str(exc)) from exc
