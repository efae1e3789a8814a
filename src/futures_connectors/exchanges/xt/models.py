"""XT.com futures request and response models.

Every XT response is wrapped in ``{"returnCode", "msgInfo", "error",
"result"}``; :class:`XTResponse` models that envelope and the endpoint
wrappers hand back only its ``result``.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class XTModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)


class XTResponse(XTModel, Generic[T]):
    return_code: int
    msg_info: str = ""
    error: Any = None
    result: Optional[T] = None


class PageResult(XTModel, Generic[T]):
    """Page-numbered listing."""

    items: list[T] = Field(default_factory=list)
    page: int = 0
    ps: int = 0
    total: int = 0


class CursorPage(XTModel, Generic[T]):
    """Id-anchored listing, paged with ``direction`` and ``id``."""

    has_prev: bool = False
    has_next: bool = False
    items: list[T] = Field(default_factory=list)


# --- Market data ---


class ClientIP(XTModel):
    ip: str


class Contract(XTModel):
    id: int = 0
    symbol: str
    symbol_group_id: int = 0
    pair: str = ""
    contract_type: str = ""
    product_type: str = ""
    underlying_type: str = ""
    contract_size: str = ""
    trade_switch: bool = False
    open_switch: bool = False
    is_display: bool = False
    is_open_api: bool = False
    state: int = 0
    init_leverage: int = 0
    init_position_type: str = ""
    base_coin: str = ""
    spot_coin: str = ""
    quote_coin: str = ""
    settle_coin: str = ""
    base_coin_precision: int = 0
    base_coin_display_precision: int = 0
    quote_coin_precision: int = 0
    quote_coin_display_precision: int = 0
    quantity_precision: int = 0
    price_precision: int = 0
    support_order_type: str = ""
    support_time_in_force: str = ""
    support_entrust_type: str = ""
    support_position_type: str = ""
    min_qty: str = ""
    min_notional: str = ""
    max_notional: str = ""
    multiplier_down: str = ""
    multiplier_up: str = ""
    max_open_orders: int = 0
    max_entrusts: int = 0
    maker_fee: str = ""
    taker_fee: str = ""
    liquidation_fee: str = ""
    market_take_bound: str = ""
    depth_precision_merge: int = 0
    labels: list[str] = Field(default_factory=list)
    onboard_date: int = 0
    en_name: str = ""
    cn_name: str = ""
    min_step_price: str = ""
    min_price: Optional[str] = None
    max_price: Optional[str] = None
    delivery_date: Optional[int] = None
    delivery_price: Optional[str] = None
    delivery_completion: bool = False
    en_desc: Optional[str] = None
    plates: list[int] = Field(default_factory=list)
    latest_price_deviation: Optional[float] = None


class ContractList(XTModel):
    time: int = 0
    version: str = ""
    symbols: list[Contract] = Field(default_factory=list)


class LeverageBracket(XTModel):
    bracket: int = 0
    maint_margin_rate: str = ""
    max_leverage: str = ""
    max_nominal_value: str = ""
    max_start_margin_rate: str = ""
    min_leverage: str = ""
    start_margin_rate: str = ""
    symbol: str = ""


class LeverageDetail(XTModel):
    leverage_brackets: list[LeverageBracket] = Field(default_factory=list)
    symbol: str


class Ticker(XTModel):
    amount: str = Field(default="", alias="a")
    close: str = Field(default="", alias="c")
    high: str = Field(default="", alias="h")
    low: str = Field(default="", alias="l")
    open: str = Field(default="", alias="o")
    change_ratio: str = Field(default="", alias="r")
    symbol: str = Field(alias="s")
    timestamp: int = Field(default=0, alias="t")
    volume: str = Field(default="", alias="v")


class Deal(XTModel):
    amount: str = Field(default="", alias="a")
    maker: str = Field(default="", alias="m")
    price: str = Field(default="", alias="p")
    symbol: str = Field(alias="s")
    time: int = Field(default=0, alias="t")


class Depth(XTModel):
    """Order book; each level is ``[price, quantity]``."""

    asks: list[list[str]] = Field(default_factory=list, alias="a")
    bids: list[list[str]] = Field(default_factory=list, alias="b")
    symbol: str = Field(alias="s")
    time: int = Field(default=0, alias="t")
    update_id: int = Field(default=0, alias="u")


class PricePoint(XTModel):
    """Index or mark price of one symbol."""

    price: str = Field(default="", alias="p")
    symbol: str = Field(alias="s")
    time: int = Field(default=0, alias="t")


class Kline(XTModel):
    amount: str = Field(default="", alias="a")
    close: str = Field(default="", alias="c")
    high: str = Field(default="", alias="h")
    low: str = Field(default="", alias="l")
    open: str = Field(default="", alias="o")
    symbol: str = Field(default="", alias="s")
    time: int = Field(alias="t")
    volume: str = Field(default="", alias="v")


class AggTicker(XTModel):
    timestamp: int = Field(default=0, alias="t")
    symbol: str = Field(alias="s")
    close: str = Field(default="", alias="c")
    high: str = Field(default="", alias="h")
    low: str = Field(default="", alias="l")
    amount: str = Field(default="", alias="a")
    volume: str = Field(default="", alias="v")
    open: str = Field(default="", alias="o")
    change_ratio: str = Field(default="", alias="r")
    index_price: str = Field(default="", alias="i")
    mark_price: str = Field(default="", alias="m")
    bid_price: str = Field(default="", alias="bp")
    ask_price: str = Field(default="", alias="ap")


class FundingRate(XTModel):
    symbol: str
    funding_rate: str = ""
    next_collection_time: Optional[int] = None
    collection_internal: Optional[int] = None
    id: Optional[str] = None
    created_time: Optional[int] = None


class BookTicker(XTModel):
    ask_price: str = Field(default="", alias="ap")
    ask_qty: str = Field(default="", alias="aq")
    bid_price: str = Field(default="", alias="bp")
    bid_qty: str = Field(default="", alias="bq")
    symbol: str = Field(alias="s")
    timestamp: int = Field(default=0, alias="t")


class RiskBalance(XTModel):
    id: str = ""
    coin: str
    amount: str = ""
    created_time: int = 0


class OpenInterest(XTModel):
    symbol: str
    open_interest: str = ""
    open_interest_usd: str = ""
    time: int = 0


# --- Account ---


class AccountInfo(XTModel):
    account_id: int
    allow_open_position: bool = False
    allow_trade: bool = False
    allow_transfer: bool = False
    open_time: Optional[str] = None
    state: Optional[str] = None
    user_id: int = 0


class ListenKey(XTModel):
    listen_key: str


class Balance(XTModel):
    coin: str
    available_balance: str = ""
    isolated_margin: str = ""
    open_order_margin_frozen: str = ""
    crossed_margin: str = ""
    bonus: str = ""
    coupon: str = ""
    wallet_balance: str = ""


class CompatBalance(XTModel):
    account_id: int = 0
    user_id: int = 0
    coin: str
    underlying_type: str = ""
    wallet_balance: str = ""
    open_order_margin_frozen: str = ""
    isolated_margin: str = ""
    crossed_margin: str = ""
    amount: str = ""
    total_amount: str = ""
    convert_btc_amount: str = ""
    convert_usdt_amount: str = ""
    profit: str = ""
    not_profit: str = ""
    bonus: str = ""
    coupon: str = ""


class BalanceBill(XTModel):
    after_amount: str = ""
    amount: str = ""
    coin: str = ""
    created_time: int = 0
    id: int
    side: str = ""
    symbol: str = ""
    type: str = ""


class FundingFee(XTModel):
    cast: str = ""
    coin: str = ""
    created_time: int = 0
    id: int
    position_side: str = ""
    symbol: str = ""


class Position(XTModel):
    auto_margin: bool = False
    available_close_size: str = ""
    break_price: str = ""
    cal_mark_price: str = ""
    close_order_size: str = ""
    contract_type: str = ""
    entry_price: str = ""
    floating_pl: str = Field(default="", alias="floatingPL")
    isolated_margin: str = ""
    leverage: int = 0
    open_order_margin_frozen: str = ""
    open_order_size: str = ""
    position_side: str = ""
    position_size: str = ""
    position_type: str = ""
    profit_id: Optional[int] = None
    realized_profit: str = ""
    symbol: str
    trigger_price_type: Optional[str] = None
    trigger_profit_price: Optional[str] = None
    trigger_stop_price: Optional[str] = None
    welfare_account: Optional[bool] = None


class StepRate(XTModel):
    maker_fee: str = ""
    taker_fee: str = ""


class PositionADL(XTModel):
    long_quantile: int = 0
    short_quantile: int = 0
    symbol: str


class BreakPosition(XTModel):
    break_price: str = ""
    cal_mark_price: str = ""
    contract_type: str = ""
    entry_price: str = ""
    isolated_margin: str = ""
    leverage: int = 0
    position_side: str = ""
    position_size: str = ""
    position_type: str = ""
    symbol: str


# --- Trading ---


class PlaceOrderRequest(XTModel):
    """New order. ``price`` is required for ``LIMIT`` orders."""

    client_order_id: Optional[str] = None
    symbol: str
    order_side: str
    order_type: str
    orig_qty: str
    price: Optional[str] = None
    time_in_force: Optional[str] = None
    trigger_profit_price: Optional[str] = None
    trigger_stop_price: Optional[str] = None
    position_side: str


class Order(XTModel):
    client_order_id: Optional[str] = None
    avg_price: str = ""
    close_position: Optional[bool] = None
    close_profit: str = ""
    created_time: int = 0
    executed_qty: str = ""
    force_close: Optional[bool] = None
    margin_frozen: str = ""
    order_id: int
    order_side: str = ""
    order_type: str = ""
    orig_qty: str = ""
    position_side: str = ""
    price: str = ""
    source_id: Optional[int] = None
    state: str = ""
    symbol: str = ""
    time_in_force: str = ""
    trigger_profit_price: Optional[str] = None
    trigger_stop_price: Optional[str] = None


class Trade(XTModel):
    fee: str = ""
    fee_coin: str = ""
    order_id: int
    exec_id: str = ""
    price: str = ""
    quantity: str = ""
    symbol: str = ""
    timestamp: int = 0
    taker_maker: str = ""


class UpdateOrderRequest(XTModel):
    order_id: int
    price: Optional[str] = None
    orig_qty: Optional[str] = None
    trigger_profit_price: Optional[str] = None
    trigger_stop_price: Optional[str] = None
    trigger_price_type: Optional[str] = None
    profit_delegate_order_type: Optional[str] = None
    profit_delegate_time_in_force: Optional[str] = None
    profit_delegate_price: Optional[str] = None
    stop_delegate_order_type: Optional[str] = None
    stop_delegate_time_in_force: Optional[str] = None
    stop_delegate_price: Optional[str] = None
    follow_up_order: Optional[bool] = None


class CreatePlanOrderRequest(XTModel):
    """Trigger (plan) order. Limit variants ``TAKE_PROFIT``/``STOP`` need ``price``."""

    client_order_id: Optional[str] = None
    symbol: str
    order_side: str
    entrust_type: str
    orig_qty: str
    price: Optional[str] = None
    stop_price: str
    time_in_force: str
    trigger_price_type: str
    position_side: str


class PlanOrder(XTModel):
    client_order_id: Optional[str] = None
    close_position: Optional[bool] = None
    created_time: int = 0
    entrust_id: int
    entrust_type: str = ""
    market_order_level: Optional[int] = None
    order_side: str = ""
    ordinary: Optional[bool] = None
    orig_qty: str = ""
    position_side: str = ""
    price: str = ""
    state: str = ""
    stop_price: str = ""
    symbol: str = ""
    time_in_force: str = ""
    trigger_price_type: str = ""


class CreateProfitStopRequest(XTModel):
    symbol: str
    orig_qty: str
    trigger_profit_price: str
    trigger_stop_price: str
    expire_time: Optional[int] = None
    position_side: str


class UpdateProfitStopRequest(XTModel):
    profit_id: int
    trigger_profit_price: Optional[str] = None
    trigger_stop_price: Optional[str] = None


class ProfitStop(XTModel):
    created_time: int = 0
    entry_price: str = ""
    executed_qty: str = ""
    isolated_margin: str = ""
    orig_qty: str = ""
    position_side: str = ""
    position_size: str = ""
    profit_id: int
    state: str = ""
    symbol: str = ""
    trigger_profit_price: str = ""
    trigger_stop_price: str = ""


class CreateTrackOrderRequest(XTModel):
    """Trailing order; ``callback`` is ``FIXED`` or ``PROPORTION``."""

    callback: str
    callback_val: str
    order_side: str
    orig_qty: str
    position_side: str
    position_type: str
    symbol: str
    trigger_price_type: str
    activation_price: Optional[str] = None
    client_media: Optional[str] = None
    client_media_channel: Optional[str] = None
    client_order_id: Optional[str] = None
    expire_time: Optional[int] = None


class TrackOrder(XTModel):
    activation_price: str = ""
    avg_price: str = ""
    callback: str = ""
    callback_val: str = ""
    config_activation: bool = False
    created_time: int = 0
    current_price: str = ""
    desc: str = ""
    executed_qty: str = ""
    order_side: str = ""
    ordinary: bool = False
    orig_qty: str = ""
    position_side: str = ""
    price: str = ""
    state: str = ""
    stop_price: str = ""
    symbol: str = ""
    track_id: int
    trigger_price_type: str = ""
    updated_time: int = 0
