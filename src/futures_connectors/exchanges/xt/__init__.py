"""XT.com futures connector."""

from .client import XTClient
from .models import (
    CreatePlanOrderRequest,
    CreateProfitStopRequest,
    CreateTrackOrderRequest,
    PlaceOrderRequest,
    UpdateOrderRequest,
    UpdateProfitStopRequest,
    XTResponse,
)
from .rest import XT_COIN_BASE_URL, XT_USDT_BASE_URL, XTRestClient

__all__ = [
    "XT_COIN_BASE_URL",
    "XT_USDT_BASE_URL",
    "CreatePlanOrderRequest",
    "CreateProfitStopRequest",
    "CreateTrackOrderRequest",
    "PlaceOrderRequest",
    "UpdateOrderRequest",
    "UpdateProfitStopRequest",
    "XTClient",
    "XTResponse",
    "XTRestClient",
]
