"""XT.com futures transport: signing, envelope checking and error decoding."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping

import aiohttp

from ..base import DEFAULT_TIMEOUT, BaseExchangeClient, ProxyConfig
from ..errors import ConfigurationError, DecodeError, XTAPIError
from ..protocol import RequestDescriptor, SignedEnvelope
from ..signing import sign_xt, xt_sign_string
from .models import XTResponse

logger = logging.getLogger(__name__)

XT_USDT_BASE_URL = "https://fapi.xt.com"
XT_COIN_BASE_URL = "https://dapi.xt.com"

UNDERLYING_USDT = "usdt"
UNDERLYING_COIN = "coin"

_QUERY_SIGNED_METHODS = ("GET", "DELETE")


class XTRestClient(BaseExchangeClient):
    """Signed HTTP access to the XT.com futures API.

    ``underlying`` picks the API host: ``usdt`` for USDT-M contracts
    (``fapi.xt.com``), ``coin`` for COIN-M contracts (``dapi.xt.com``).
    Only private calls are signed.
    """

    default_base_url = XT_USDT_BASE_URL

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        *,
        base_url: str | None = None,
        coin_base_url: str | None = None,
        underlying: str = UNDERLYING_USDT,
        recv_window: int | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
        proxy: ProxyConfig | None = None,
    ):
        super().__init__(
            "xt",
            api_key,
            api_secret,
            base_url=base_url,
            timeout=timeout,
            session=session,
            proxy=proxy,
        )
        underlying = (underlying or UNDERLYING_USDT).lower()
        if underlying not in (UNDERLYING_USDT, UNDERLYING_COIN):
            raise ConfigurationError(f"xt: unknown underlying {underlying!r}, expected 'usdt' or 'coin'")
        self.underlying = underlying
        self.coin_base_url = (coin_base_url or XT_COIN_BASE_URL).rstrip("/")
        self.recv_window = recv_window

    def get_base_url(self) -> str:
        if self.underlying == UNDERLYING_COIN:
            return self.coin_base_url
        return self.base_url

    def sign(self, descriptor: RequestDescriptor, timestamp: str | None = None) -> SignedEnvelope:
        timestamp = timestamp or str(int(time.time() * 1000))
        query = descriptor.query if descriptor.method in _QUERY_SIGNED_METHODS else ""
        logger.debug(
            "[xt] sign string: %r",
            xt_sign_string(self._api_key, timestamp, descriptor.path, query, descriptor.body),
        )
        signature = sign_xt(self._api_secret, self._api_key, timestamp, descriptor.path, query, descriptor.body)
        headers = {
            "validate-appkey": self._api_key,
            "validate-timestamp": timestamp,
            "validate-signature": signature,
        }
        if self.recv_window is not None:
            headers["validate-recvwindow"] = str(self.recv_window)
        return SignedEnvelope(descriptor=descriptor, timestamp=timestamp, signature=signature, headers=headers)

    def _check_success(self, status: int, body: str) -> None:
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise DecodeError(self.name, "XT response envelope", body, str(exc)) from exc
        if isinstance(data, dict) and data.get("returnCode", 0) != 0:
            raise XTAPIError(status, data["returnCode"], str(data.get("msgInfo", "")), data.get("error"))

    def _parse_error(self, status: int, body: str) -> XTAPIError | None:
        try:
            data = json.loads(body)
        except ValueError:
            return None
        if not isinstance(data, dict) or not data.get("returnCode"):
            return None
        return XTAPIError(status, data["returnCode"], str(data.get("msgInfo", "")), data.get("error"))

    async def _request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        json: Any = None,
        form: Mapping[str, Any] | None = None,
        result: Any = Any,
        private: bool = False,
    ) -> Any:
        response = await self.dispatch(
            method,
            path,
            params,
            json=json,
            form=form,
            target=XTResponse[result],
            private=private,
        )
        if response.result is None and result is not Any:
            raise DecodeError(
                self.name, result, response.model_dump_json(by_alias=True), "envelope carries no result"
            )
        return response.result

    async def _public(self, path: str, params: Mapping[str, Any] | None = None, *, result: Any = Any):
        return await self._request("GET", path, params, result=result)

    async def _get(self, path: str, params: Mapping[str, Any] | None = None, *, result: Any = Any):
        return await self._request("GET", path, params, result=result, private=True)

    async def _post(
        self,
        path: str,
        *,
        json: Any = None,
        form: Mapping[str, Any] | None = None,
        result: Any = Any,
    ):
        return await self._request("POST", path, json=json, form=form, result=result, private=True)
