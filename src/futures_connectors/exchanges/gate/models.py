"""Gate.io futures request and response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GateModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# --- Market data ---


class Contract(GateModel):
    """Futures contract details."""

    name: str
    type: str = ""
    quanto_multiplier: str = ""
    leverage_min: str = ""
    leverage_max: str = ""
    cross_leverage_default: str = ""
    maintenance_rate: str = ""
    mark_type: str = ""
    mark_price: str = ""
    index_price: str = ""
    last_price: float = 0.0
    maker_fee_rate: str = ""
    taker_fee_rate: str = ""
    order_price_round: str = ""
    mark_price_round: str = ""
    funding_rate: str = ""
    funding_rate_indicative: str = ""
    funding_interval: int = 0
    funding_next_apply: float = 0
    funding_offset: int = 0
    funding_impact_value: str = ""
    funding_cap_ratio: str = ""
    interest_rate: str = ""
    risk_limit_base: str = ""
    risk_limit_step: str = ""
    risk_limit_max: str = ""
    order_size_min: int = 0
    order_size_max: int = 0
    order_price_deviate: str = ""
    ref_discount_rate: str = ""
    ref_rebate_rate: str = ""
    orderbook_id: int = 0
    trade_id: int = 0
    trade_size: int = 0
    position_size: int = 0
    long_users: int = 0
    short_users: int = 0
    config_change_time: float = 0
    create_time: float = 0
    in_delisting: bool = False
    orders_limit: int = 0
    enable_bonus: bool = False
    enable_credit: bool = False
    voucher_leverage: str = ""
    is_pre_market: bool = False


class ContractStats(GateModel):
    time: int
    contract: str = ""
    lsr_taker: float = 0.0
    lsr_account: float = 0.0
    long_liq_size: int = 0
    long_liq_amount: float = 0.0
    long_liq_usd: float = 0.0
    short_liq_size: int = 0
    short_liq_amount: float = 0.0
    short_liq_usd: float = 0.0
    open_interest: int = 0
    open_interest_usd: float = 0.0
    top_lsr_account: float = 0.0
    top_lsr_size: float = 0.0
    mark_price: float = 0.0
    index_price: float = 0.0
    funding_rate: float = 0.0
    funding_rate_indicative: float = 0.0
    volume: int = 0
    volume_usd: float = 0.0
    long_taker_size: int = 0
    short_taker_size: int = 0
    top_long_size: int = 0
    top_short_size: int = 0
    top_long_account: int = 0
    top_short_account: int = 0
    long_users: int = 0
    short_users: int = 0
    loi: int = 0


class OrderBookEntry(GateModel):
    price: str = Field(default="", alias="p")
    size: int = Field(default=0, alias="s")


class OrderBook(GateModel):
    id: int = 0
    current: float = 0.0
    update: float = 0.0
    contract: str = ""
    asks: list[OrderBookEntry]
    bids: list[OrderBookEntry]


class FuturesTrade(GateModel):
    """Public trade, also used for personal trade history."""

    id: int
    create_time: float = 0.0
    contract: str = ""
    order_id: Optional[str] = None
    size: int = 0
    price: str = ""
    role: Optional[str] = None
    text: Optional[str] = None
    fee: Optional[str] = None
    point_fee: Optional[str] = None


class Candlestick(GateModel):
    timestamp: int = Field(alias="t")
    volume: int = Field(default=0, alias="v")
    close: float = Field(default=0.0, alias="c")
    high: float = Field(default=0.0, alias="h")
    low: float = Field(default=0.0, alias="l")
    open: float = Field(default=0.0, alias="o")
    sum: float = 0.0


class PremiumIndex(GateModel):
    timestamp: int = Field(alias="t")
    close: float = Field(default=0.0, alias="c")
    high: float = Field(default=0.0, alias="h")
    low: float = Field(default=0.0, alias="l")
    open: float = Field(default=0.0, alias="o")


class FuturesTicker(GateModel):
    contract: str
    last: str = ""
    change_percentage: str = ""
    total_size: str = ""
    low_24h: str = ""
    high_24h: str = ""
    volume_24h: str = ""
    volume_24h_btc: str = ""
    volume_24h_usd: str = ""
    volume_24h_base: str = ""
    volume_24h_quote: str = ""
    volume_24h_settle: str = ""
    mark_price: str = ""
    funding_rate: str = ""
    funding_rate_indicative: str = ""
    index_price: str = ""
    quanto_base_rate: Optional[str] = None
    highest_bid: Optional[str] = None
    lowest_ask: Optional[str] = None


class FundingRateRecord(GateModel):
    timestamp: int = Field(alias="t")
    rate: str = Field(default="", alias="r")


class InsuranceRecord(GateModel):
    timestamp: int = Field(alias="t")
    change: str = Field(default="", alias="b")


class LiquidationOrder(GateModel):
    time: int
    contract: str = ""
    size: int = 0
    leverage: str = ""
    margin: str = ""
    entry_price: str = ""
    liq_price: str = ""
    mark_price: str = ""
    order_id: int = 0
    order_price: str = ""
    fill_price: str = ""
    left: int = 0


class RiskLimitTier(GateModel):
    tier: int
    risk_limit: str = ""
    initial_rate: str = ""
    maintenance_rate: str = ""
    leverage_max: str = ""


# --- Account ---


class AccountHistory(GateModel):
    dnw: str = ""
    pnl: str = ""
    fee: str = ""
    refr: str = ""
    fund: str = ""
    point_pnl: str = ""
    point_fee: str = ""
    point_refr: str = ""
    bonus_pnl: str = ""
    bonus_offset: str = ""


class FuturesAccount(GateModel):
    user: int = 0
    currency: str
    total: str = ""
    unrealised_pnl: str = ""
    position_margin: str = ""
    order_margin: str = ""
    available: str = ""
    point: str = ""
    bonus: str = ""
    in_dual_mode: bool = False
    enable_credit: bool = False
    position_initial_margin: str = ""
    maintenance_margin: str = ""
    history: AccountHistory = Field(default_factory=AccountHistory)


class PositionCloseOrder(GateModel):
    id: int = 0
    price: str = ""
    is_liq: bool = False


class Position(GateModel):
    user: int = 0
    contract: str
    size: int = 0
    leverage: str = ""
    risk_limit: str = ""
    leverage_max: str = ""
    maintenance_rate: str = ""
    value: str = ""
    margin: str = ""
    entry_price: str = ""
    liq_price: str = ""
    mark_price: str = ""
    initial_margin: str = ""
    maintenance_margin: str = ""
    unrealised_pnl: str = ""
    realised_pnl: str = ""
    history_pnl: str = ""
    last_close_pnl: str = ""
    realised_point: str = ""
    history_point: str = ""
    adl_ranking: int = 0
    pending_orders: int = 0
    close_order: Optional[PositionCloseOrder] = None
    mode: str = ""
    cross_leverage_limit: str = ""


class AccountBookEntry(GateModel):
    time: float
    change: str = ""
    balance: str = ""
    type: str = ""
    text: str = ""
    contract: str = ""
    trade_id: str = ""


class PositionClose(GateModel):
    time: float
    contract: str = ""
    side: str = ""
    pnl: str = ""
    text: str = ""


# --- Trading ---


class FuturesOrder(GateModel):
    id: int
    user: int = 0
    create_time: float = 0.0
    finish_time: float = 0.0
    finish_as: str = ""
    status: str = ""
    contract: str = ""
    size: int = 0
    iceberg: int = 0
    price: str = ""
    close: bool = False
    is_close: bool = False
    reduce_only: bool = False
    is_reduce_only: bool = False
    is_liq: bool = False
    tif: str = ""
    left: int = 0
    fill_price: str = ""
    text: str = ""
    tkfr: str = ""
    mkfr: str = ""
    refu: int = 0
    auto_size: str = ""
    stp_act: str = ""
    stp_id: int = 0


class CreateFuturesOrderRequest(GateModel):
    """Body for ``POST /futures/{settle}/orders``.

    ``size`` is positive to buy, negative to sell, 0 together with
    ``close=True`` to close the position. A ``price`` of ``"0"`` with
    ``tif="ioc"`` places a market order.
    """

    contract: str
    size: int
    iceberg: Optional[int] = None
    price: Optional[str] = None
    close: Optional[bool] = None
    reduce_only: Optional[bool] = None
    tif: Optional[str] = None
    text: Optional[str] = None
    auto_size: Optional[str] = None
    stp_act: Optional[str] = None
    stp_id: Optional[int] = None


class TriggerCondition(GateModel):
    """Trigger rule 1 fires at ``>=`` price, 2 at ``<=``."""

    strategy_type: Optional[int] = None
    price_type: Optional[int] = None
    price: str = ""
    rule: int = 0
    expiration: Optional[int] = None


class TriggerInitialOrder(GateModel):
    contract: str
    size: Optional[int] = None
    price: str = "0"
    close: Optional[bool] = None
    tif: Optional[str] = None
    text: Optional[str] = None
    reduce_only: Optional[bool] = None
    auto_size: Optional[str] = None


class CreateTriggerOrderRequest(GateModel):
    initial: TriggerInitialOrder
    trigger: TriggerCondition
    order_type: Optional[str] = None


class TriggerOrderCreated(GateModel):
    id: int


class PriceTriggeredOrder(GateModel):
    id: int
    user: int = 0
    contract: str = ""
    create_time: float = 0.0
    finish_time: float = 0.0
    trade_id: int = 0
    status: str = ""
    finish_as: str = ""
    reason: str = ""
    order_type: str = ""
    me_order_id: int = 0
    trigger: TriggerCondition = Field(default_factory=TriggerCondition)
    initial: TriggerInitialOrder | None = None


class CountdownCancelAllRequest(GateModel):
    """``timeout`` in seconds; 0 cancels the countdown."""

    timeout: int
    contract: Optional[str] = None


class CountdownCancelAllResult(GateModel):
    trigger_time: int
