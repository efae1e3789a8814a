"""Gate.io API v4 transport: signing and error decoding."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping

import aiohttp

from ..base import DEFAULT_TIMEOUT, JSON_CONTENT_TYPE, BaseExchangeClient, ProxyConfig
from ..errors import GateAPIError, PayloadError
from ..protocol import RequestDescriptor, SignedEnvelope
from ..signing import gate_sign_string, sign_gate

logger = logging.getLogger(__name__)

GATE_BASE_URL = "https://api.gateio.ws"
GATE_API_PREFIX = "/api/v4"

_BODY_METHODS = ("POST", "PUT", "DELETE")


class GateRestClient(BaseExchangeClient):
    """Signed HTTP access to ``https://api.gateio.ws/api/v4``.

    When credentials are configured every request is signed, public market
    data included. Without them only public endpoints can be called.
    """

    default_base_url = GATE_BASE_URL
    api_prefix = GATE_API_PREFIX

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
        proxy: ProxyConfig | None = None,
    ):
        super().__init__(
            "gate",
            api_key,
            api_secret,
            base_url=base_url,
            timeout=timeout,
            session=session,
            proxy=proxy,
        )

    def sign(self, descriptor: RequestDescriptor, timestamp: str | None = None) -> SignedEnvelope:
        timestamp = timestamp or str(int(time.time()))
        logger.debug(
            "[gate] sign string: %r",
            gate_sign_string(descriptor.method, descriptor.path, descriptor.query, descriptor.body, timestamp),
        )
        signature = sign_gate(
            self._api_secret,
            descriptor.method,
            descriptor.path,
            descriptor.query,
            descriptor.body,
            timestamp,
        )
        headers = {"KEY": self._api_key, "Timestamp": timestamp, "SIGN": signature}
        return SignedEnvelope(descriptor=descriptor, timestamp=timestamp, signature=signature, headers=headers)

    def _should_sign(self, method: str, private: bool) -> bool:
        return self.has_credentials

    def _encode_body(
        self,
        method: str,
        json_payload: Any,
        form: Mapping[str, Any] | None,
    ) -> tuple[str, str | None]:
        if form is not None:
            raise PayloadError("gate: form bodies are not supported, use a JSON payload")
        body, content_type = super()._encode_body(method, json_payload, form)
        if content_type is None and method in _BODY_METHODS:
            content_type = JSON_CONTENT_TYPE
        return body, content_type

    def _parse_error(self, status: int, body: str) -> GateAPIError | None:
        try:
            data = json.loads(body)
        except ValueError:
            return None
        if not isinstance(data, dict) or not data.get("label"):
            return None
        return GateAPIError(status, str(data["label"]), str(data.get("message", "")))

    async def _get(self, path: str, params: Mapping[str, Any] | None = None, *, target: Any = None, private: bool = False):
        return await self.dispatch("GET", path, params, target=target, private=private)

    async def _post(self, path: str, params: Mapping[str, Any] | None = None, *, json: Any = None, target: Any = None):
        return await self.dispatch("POST", path, params, json=json, target=target, private=True)

    async def _put(self, path: str, params: Mapping[str, Any] | None = None, *, json: Any = None, target: Any = None):
        return await self.dispatch("PUT", path, params, json=json, target=target, private=True)

    async def _delete(self, path: str, params: Mapping[str, Any] | None = None, *, json: Any = None, target: Any = None):
        return await self.dispatch("DELETE", path, params, json=json, target=target, private=True)
