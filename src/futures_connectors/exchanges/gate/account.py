"""Gate.io futures account and position management."""

from __future__ import annotations

from .models import AccountBookEntry, Contract, FuturesAccount, Position, PositionClose


class GateAccountMixin:
    """Signed account endpoints. Position updates pass their values as query params."""

    async def get_futures_account(self, settle: str) -> FuturesAccount:
        return await self._get(f"/futures/{settle}/accounts", target=FuturesAccount, private=True)

    async def list_positions(self, settle: str, holding: bool | None = None) -> list[Position]:
        """List positions; ``holding=True`` returns only non-empty ones."""
        return await self._get(
            f"/futures/{settle}/positions", {"holding": holding}, target=list[Position], private=True
        )

    async def get_position(self, settle: str, contract: str) -> Position:
        return await self._get(f"/futures/{settle}/positions/{contract}", target=Position, private=True)

    async def update_position_margin(self, settle: str, contract: str, change: str) -> Position:
        """Add (positive ``change``) or remove (negative) margin."""
        return await self._post(
            f"/futures/{settle}/positions/{contract}/margin", {"change": change}, target=Position
        )

    async def update_position_leverage(
        self,
        settle: str,
        contract: str,
        leverage: str,
        cross_leverage_limit: str | None = None,
    ) -> Position:
        """Set leverage; ``"0"`` switches to cross margin capped by ``cross_leverage_limit``."""
        params = {"leverage": leverage, "cross_leverage_limit": cross_leverage_limit}
        return await self._post(f"/futures/{settle}/positions/{contract}/leverage", params, target=Position)

    async def update_position_risk_limit(self, settle: str, contract: str, risk_limit: str) -> Position:
        return await self._post(
            f"/futures/{settle}/positions/{contract}/risk_limit", {"risk_limit": risk_limit}, target=Position
        )

    async def set_dual_mode(self, settle: str, dual_mode: bool) -> FuturesAccount:
        return await self._post(f"/futures/{settle}/dual_mode", {"dual_mode": dual_mode}, target=FuturesAccount)

    async def get_dual_mode_position(self, settle: str, contract: str) -> list[Position]:
        return await self._get(
            f"/futures/{settle}/dual_comp/positions/{contract}", target=list[Position], private=True
        )

    async def update_dual_mode_position_margin(
        self,
        settle: str,
        contract: str,
        change: str,
        dual_side: str,
    ) -> list[Position]:
        """``dual_side`` is ``dual_long`` or ``dual_short``."""
        params = {"change": change, "dual_side": dual_side}
        return await self._post(
            f"/futures/{settle}/dual_comp/positions/{contract}/margin", params, target=list[Position]
        )

    async def update_dual_mode_position_leverage(
        self,
        settle: str,
        contract: str,
        leverage: str,
        cross_leverage_limit: str | None = None,
    ) -> list[Position]:
        params = {"leverage": leverage, "cross_leverage_limit": cross_leverage_limit}
        return await self._post(
            f"/futures/{settle}/dual_comp/positions/{contract}/leverage", params, target=list[Position]
        )

    async def update_dual_mode_position_risk_limit(
        self,
        settle: str,
        contract: str,
        risk_limit: str,
    ) -> list[Position]:
        return await self._post(
            f"/futures/{settle}/dual_comp/positions/{contract}/risk_limit",
            {"risk_limit": risk_limit},
            target=list[Position],
        )

    async def list_futures_account_book(
        self,
        settle: str,
        contract: str | None = None,
        limit: int | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
        type_filter: str | None = None,
    ) -> list[AccountBookEntry]:
        """Balance change history; ``type_filter`` is e.g. ``pnl``, ``fee`` or ``fund``."""
        params = {"contract": contract, "limit": limit, "from": from_time, "to": to_time, "type": type_filter}
        return await self._get(
            f"/futures/{settle}/account_book", params, target=list[AccountBookEntry], private=True
        )

    async def list_position_close_history(
        self,
        settle: str,
        contract: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        from_time: int | None = None,
        to_time: int | None = None,
        side: str | None = None,
        pnl: str | None = None,
    ) -> list[PositionClose]:
        params = {
            "contract": contract,
            "limit": limit,
            "offset": offset,
            "from": from_time,
            "to": to_time,
            "side": side,
            "pnl": pnl,
        }
        return await self._get(
            f"/futures/{settle}/position_close", params, target=list[PositionClose], private=True
        )

    async def list_dual_comp_contracts(self, settle: str) -> list[Contract]:
        return await self._get(f"/futures/{settle}/dual_comp/contracts", target=list[Contract], private=True)

    async def list_dual_comp_index_constituents(self, settle: str, index: str) -> dict[str, list[str]]:
        """Index constituents keyed by exchange name."""
        return await self._get(
            f"/futures/{settle}/dual_comp/index_constituents/{index}",
            target=dict[str, list[str]],
            private=True,
        )
