"""Exception hierarchy for exchange requests.

Every failure a client can raise derives from :class:`ExchangeError`, so
callers can catch everything with one clause or single out one class:

- :class:`ConfigurationError`: a private endpoint was called without
  credentials. Raised before any network I/O.
- :class:`PayloadError`: the request payload could not be serialized.
- :class:`TransportError`: connection failure or timeout.
- :class:`ExchangeRejectedError`: the exchange answered with its structured
  error shape.
- :class:`UnexpectedResponseError`: a non-2xx answer in a shape we do not
  recognize. Carries the raw status and body.
- :class:`DecodeError`: a 2xx answer that does not match the expected type.
"""

from __future__ import annotations

from typing import Any


class ExchangeError(Exception):
    """Base class for all exchange client errors."""


class ConfigurationError(ExchangeError):
    """Client configuration does not allow the requested call."""


class PayloadError(ExchangeError, ValueError):
    """Request parameters or body could not be encoded."""


class TransportError(ExchangeError):
    """Request did not complete (connection error, timeout)."""


class ExchangeRejectedError(ExchangeError):
    """Exchange returned a structured error response."""

    def __init__(self, exchange: str, status: int, code: str | int, message: str):
        self.exchange = exchange
        self.status = status
        self.code = code
        self.message = message
        super().__init__(f"{exchange} API error: {code} - {message} (status {status})")


class GateAPIError(ExchangeRejectedError):
    """Gate.io error body: ``{"label": ..., "message": ...}``."""

    def __init__(self, status: int, label: str, message: str):
        self.label = label
        super().__init__("gate", status, label, message)


class XTAPIError(ExchangeRejectedError):
    """XT.com error envelope: ``{"returnCode": ..., "msgInfo": ..., "error": ...}``."""

    def __init__(self, status: int, return_code: int, msg_info: str, error: Any = None):
        self.return_code = return_code
        self.msg_info = msg_info
        self.error = error
        super().__init__("xt", status, return_code, msg_info)

    def __str__(self) -> str:
        base = super().__str__()
        if self.error:
            return f"{base}, error={self.error}"
        return base


class UnexpectedResponseError(ExchangeError):
    """Non-2xx response whose body is not a recognized error shape."""

    def __init__(self, exchange: str, status: int, body: str):
        self.exchange = exchange
        self.status = status
        self.body = body
        super().__init__(f"{exchange} API error: status {status}, body: {body}")


class DecodeError(ExchangeError):
    """Successful response that could not be decoded into the target type."""

    def __init__(self, exchange: str, target: Any, body: str, reason: str):
        self.exchange = exchange
        self.target = target
        self.body = body
        self.reason = reason
        super().__init__(
            f"{exchange}: failed to decode response into {target!r}: {reason} (body: {body[:500]})"
        )
