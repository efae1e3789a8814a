"""Gate.io futures connector."""

from .client import GateClient
from .models import (
    CountdownCancelAllRequest,
    CreateFuturesOrderRequest,
    CreateTriggerOrderRequest,
    TriggerCondition,
    TriggerInitialOrder,
)
from .rest import GATE_API_PREFIX, GATE_BASE_URL, GateRestClient

__all__ = [
    "GATE_API_PREFIX",
    "GATE_BASE_URL",
    "CountdownCancelAllRequest",
    "CreateFuturesOrderRequest",
    "CreateTriggerOrderRequest",
    "GateClient",
    "GateRestClient",
    "TriggerCondition",
    "TriggerInitialOrder",
]
