"""XT.com futures orders, plan (trigger) orders, TP/SL and trailing orders."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..base import encode_json
from ..errors import PayloadError
from .models import (
    CreatePlanOrderRequest,
    CreateProfitStopRequest,
    CreateTrackOrderRequest,
    CursorPage,
    Order,
    PageResult,
    PlaceOrderRequest,
    PlanOrder,
    ProfitStop,
    TrackOrder,
    Trade,
    UpdateOrderRequest,
    UpdateProfitStopRequest,
)

logger = logging.getLogger(__name__)

_ORDER = "/future/trade/v1/order"
_ENTRUST = "/future/trade/v1/entrust"

_LIMIT_PLAN_TYPES = ("TAKE_PROFIT", "STOP")
_MARKET_PLAN_TYPES = ("TAKE_PROFIT_MARKET", "STOP_MARKET")


def _check_order(order: PlaceOrderRequest) -> None:
    required = {
        "symbol": order.symbol,
        "orderSide": order.order_side,
        "orderType": order.order_type,
        "origQty": order.orig_qty,
        "positionSide": order.position_side,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise PayloadError(f"missing required order fields: {', '.join(missing)}")
    if order.order_type == "LIMIT" and not order.price:
        raise PayloadError("price is required for LIMIT orders")


class XTTradingMixin:
    """Signed endpoints under ``/future/trade``."""

    async def place_order(self, order: PlaceOrderRequest) -> Any:
        """Place an order; returns the order id."""
        _check_order(order)
        return await self._post(f"{_ORDER}/create", json=order)

    async def place_batch_order(self, orders: Sequence[PlaceOrderRequest]) -> Any:
        """Place several orders at once; the list travels JSON-encoded in form field ``list``."""
        if not orders:
            raise PayloadError("order list cannot be empty for batch order")
        for order in orders:
            _check_order(order)
        form = {"list": encode_json(list(orders))}
        return await self._post("/future/trade/v2/order/create-batch", form=form)

    async def cancel_order(self, order_id: int) -> Any:
        return await self._post(f"{_ORDER}/cancel", form={"orderId": order_id})

    async def cancel_all_orders(self, symbol: str | None = None) -> bool:
        """Cancel open orders of ``symbol``, or of every symbol when omitted."""
        return await self._post(f"{_ORDER}/cancel-all", form={"symbol": symbol or ""}, result=bool)

    async def get_order(self, order_id: int) -> Order:
        return await self._get(f"{_ORDER}/detail", {"orderId": order_id}, result=Order)

    async def get_order_list(
        self,
        state: str | None = None,
        symbol: str | None = None,
        client_order_id: str | None = None,
        page: int | None = None,
        size: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> PageResult[Order]:
        params = {
            "state": state,
            "symbol": symbol,
            "clientOrderId": client_order_id,
            "page": page,
            "size": size,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_ORDER}/list", params, result=PageResult[Order])

    async def get_history_list(
        self,
        symbol: str,
        direction: str | None = None,
        id: int | None = None,
        limit: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> CursorPage[Order]:
        params = {
            "symbol": symbol,
            "direction": direction,
            "id": id,
            "limit": limit,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_ORDER}/list-history", params, result=CursorPage[Order])

    async def get_trade_list(
        self,
        order_id: int | None = None,
        symbol: str | None = None,
        page: int | None = None,
        size: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> PageResult[Trade]:
        params = {
            "orderId": order_id,
            "symbol": symbol,
            "page": page,
            "size": size,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_ORDER}/trade-list", params, result=PageResult[Trade])

    async def update_order(self, update: UpdateOrderRequest) -> Any:
        return await self._post(f"{_ORDER}/update", json=update)

    async def create_plan_order(self, order: CreatePlanOrderRequest) -> Any:
        if order.entrust_type in _LIMIT_PLAN_TYPES and not order.price:
            raise PayloadError("price is required for limit trigger orders (TAKE_PROFIT, STOP)")
        if order.entrust_type in _MARKET_PLAN_TYPES and order.time_in_force != "IOC":
            logger.warning(
                "[xt] %s plan order with timeInForce %s, market trigger orders only support IOC",
                order.entrust_type,
                order.time_in_force,
            )
        return await self._post(f"{_ENTRUST}/create-plan", json=order)

    async def cancel_plan_order(self, entrust_id: int) -> Any:
        return await self._post(f"{_ENTRUST}/cancel-plan", form={"entrustId": entrust_id})

    async def cancel_all_plan_orders(self, symbol: str) -> bool:
        return await self._post(f"{_ENTRUST}/cancel-all-plan", form={"symbol": symbol}, result=bool)

    async def get_plan_order_list(
        self,
        symbol: str,
        state: str,
        page: int | None = None,
        size: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> PageResult[PlanOrder]:
        """``state`` e.g. ``NOT_TRIGGERED``, ``TRIGGERED``, ``UNFINISHED`` or ``HISTORY``."""
        params = {
            "symbol": symbol,
            "state": state,
            "page": page,
            "size": size,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_ENTRUST}/plan-list", params, result=PageResult[PlanOrder])

    async def get_plan_order_detail(self, entrust_id: int) -> PlanOrder:
        return await self._get(f"{_ENTRUST}/plan-detail", {"entrustId": entrust_id}, result=PlanOrder)

    async def get_plan_history_list(
        self,
        symbol: str,
        direction: str | None = None,
        id: int | None = None,
        limit: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> CursorPage[PlanOrder]:
        params = {
            "symbol": symbol,
            "direction": direction,
            "id": id,
            "limit": limit,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_ENTRUST}/plan-list-history", params, result=CursorPage[PlanOrder])

    async def create_profit_stop(self, order: CreateProfitStopRequest) -> Any:
        """Attach take-profit and stop-loss triggers to a position."""
        return await self._post(f"{_ENTRUST}/create-profit", json=order)

    async def cancel_profit_stop(self, profit_id: int) -> bool:
        return await self._post(f"{_ENTRUST}/cancel-profit-stop", form={"profitId": profit_id}, result=bool)

    async def cancel_all_profit_stop(self, symbol: str) -> bool:
        return await self._post(f"{_ENTRUST}/cancel-all-profit-stop", form={"symbol": symbol}, result=bool)

    async def get_profit_stop_list(
        self,
        symbol: str,
        state: str,
        page: int | None = None,
        size: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> PageResult[ProfitStop]:
        params = {
            "symbol": symbol,
            "state": state,
            "page": page,
            "size": size,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_ENTRUST}/profit-list", params, result=PageResult[ProfitStop])

    async def get_profit_stop_detail(self, profit_id: int) -> ProfitStop:
        return await self._get(f"{_ENTRUST}/profit-detail", {"profitId": profit_id}, result=ProfitStop)

    async def update_profit_stop(self, update: UpdateProfitStopRequest) -> Any:
        return await self._post(f"{_ENTRUST}/update-profit-stop", json=update)

    async def create_track_order(self, order: CreateTrackOrderRequest) -> Any:
        """Create a trailing order. Sent as a form body."""
        form = order.model_dump(by_alias=True, exclude_none=True)
        return await self._post(f"{_ENTRUST}/create-track", form=form)

    async def cancel_track_order(self, track_id: int) -> Any:
        return await self._post(f"{_ENTRUST}/cancel-track", form={"trackId": track_id})

    async def get_track_order_detail(self, track_id: int) -> TrackOrder:
        return await self._get(f"{_ENTRUST}/track-detail", {"trackId": track_id}, result=TrackOrder)

    async def get_track_order_list(
        self,
        symbol: str | None = None,
        page: int | None = None,
        size: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> PageResult[TrackOrder]:
        params = {
            "symbol": symbol,
            "page": page,
            "size": size,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_ENTRUST}/track-list", params, result=PageResult[TrackOrder])

    async def cancel_all_track_orders(self) -> Any:
        return await self._post(f"{_ENTRUST}/cancel-all-track")

    async def get_track_history_list(
        self,
        symbol: str | None = None,
        direction: str | None = None,
        id: int | None = None,
        limit: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> CursorPage[TrackOrder]:
        params = {
            "symbol": symbol,
            "direction": direction,
            "id": id,
            "limit": limit,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_ENTRUST}/track-list-history", params, result=CursorPage[TrackOrder])
