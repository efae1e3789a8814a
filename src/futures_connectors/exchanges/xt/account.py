"""XT.com futures account and position management."""

from __future__ import annotations

from typing import Any

from ..errors import PayloadError
from .models import (
    AccountInfo,
    Balance,
    BalanceBill,
    BreakPosition,
    CompatBalance,
    CursorPage,
    FundingFee,
    ListenKey,
    Position,
    PositionADL,
    StepRate,
)

_USER = "/future/user/v1"

MARGIN_ADD = "ADD"
MARGIN_SUB = "SUB"


class XTAccountMixin:
    """Signed endpoints under ``/future/user``. Updates go as form bodies."""

    async def get_account_info(self) -> AccountInfo:
        return await self._get(f"{_USER}/account/info", result=AccountInfo)

    async def get_listen_key(self) -> ListenKey:
        """Key for the private websocket stream."""
        return await self._get(f"{_USER}/user/listen-key", result=ListenKey)

    async def account_open(self) -> bool:
        return await self._post(f"{_USER}/account/open", result=bool)

    async def get_balance(self, coin: str) -> Balance:
        return await self._get(f"{_USER}/balance/detail", {"coin": coin}, result=Balance)

    async def get_balance_list(self) -> list[Balance]:
        return await self._get(f"{_USER}/balance/list", result=list[Balance])

    async def get_compat_balance_list(self, query_account_id: str | None = None) -> list[CompatBalance]:
        return await self._get(
            f"{_USER}/compat/balance/list", {"queryAccountId": query_account_id}, result=list[CompatBalance]
        )

    async def get_balance_bills(
        self,
        symbol: str,
        direction: str | None = None,
        id: int | None = None,
        limit: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> CursorPage[BalanceBill]:
        params = {
            "symbol": symbol,
            "direction": direction,
            "id": id,
            "limit": limit,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_USER}/balance/bills", params, result=CursorPage[BalanceBill])

    async def get_funding_fee_list(
        self,
        symbol: str,
        direction: str | None = None,
        id: int | None = None,
        limit: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> CursorPage[FundingFee]:
        """Funding fees paid or received by the account."""
        params = {
            "symbol": symbol,
            "direction": direction,
            "id": id,
            "limit": limit,
            "startTime": start_time,
            "endTime": end_time,
        }
        return await self._get(f"{_USER}/balance/funding-rate-list", params, result=CursorPage[FundingFee])

    async def get_positions(self, symbol: str | None = None) -> list[Position]:
        return await self._get(f"{_USER}/position/list", {"symbol": symbol}, result=list[Position])

    async def get_active_positions(self, symbol: str | None = None) -> list[Position]:
        return await self._get(f"{_USER}/position", {"symbol": symbol}, result=list[Position])

    async def get_user_step_rate(self) -> StepRate:
        return await self._get(f"{_USER}/user/step-rate", result=StepRate)

    async def adjust_leverage(self, symbol: str, position_side: str, leverage: int) -> Any:
        form = {"symbol": symbol, "positionSide": position_side, "leverage": leverage}
        return await self._post(f"{_USER}/position/adjust-leverage", form=form)

    async def update_position_margin(
        self,
        symbol: str,
        margin: str,
        margin_type: str,
        position_side: str | None = None,
    ) -> Any:
        """Add or remove isolated margin; ``margin_type`` is ``ADD`` or ``SUB``."""
        if margin_type not in (MARGIN_ADD, MARGIN_SUB):
            raise PayloadError(f"invalid margin type {margin_type!r}, must be 'ADD' or 'SUB'")
        form = {"symbol": symbol, "margin": margin, "type": margin_type, "positionSide": position_side}
        return await self._post(f"{_USER}/position/margin", form=form)

    async def close_all_positions(self) -> bool:
        """Market-close every open position."""
        return await self._post(f"{_USER}/position/close-all", result=bool)

    async def get_position_adl(self) -> list[PositionADL]:
        return await self._get(f"{_USER}/position/adl", result=list[PositionADL])

    async def collection_add(self, symbol: str) -> bool:
        return await self._post(f"{_USER}/user/collection/add", form={"symbol": symbol}, result=bool)

    async def collection_cancel(self, symbol: str) -> bool:
        return await self._post(f"{_USER}/user/collection/cancel", form={"symbol": symbol}, result=bool)

    async def collection_list(self) -> list[str]:
        return await self._get(f"{_USER}/user/collection/list", result=list[str])

    async def change_position_type(self, symbol: str, position_side: str, position_type: str) -> Any:
        """Switch between ``CROSSED`` and ``ISOLATED`` margin."""
        form = {"symbol": symbol, "positionSide": position_side, "positionType": position_type}
        return await self._post(f"{_USER}/position/change-type", form=form)

    async def get_break_list(self, symbol: str | None = None) -> list[BreakPosition]:
        return await self._get(f"{_USER}/position/break-list", {"symbol": symbol}, result=list[BreakPosition])
