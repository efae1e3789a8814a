"""Base client class for exchange adapters.

Holds the request builder and the dispatcher shared by every exchange. A
subclass supplies the signing scheme, the error body format and the API
root, and gets request/response handling from here.
"""

from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Mapping

import aiohttp
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .errors import (
    ConfigurationError,
    DecodeError,
    ExchangeRejectedError,
    PayloadError,
    TransportError,
    UnexpectedResponseError,
)
from .protocol import PreparedRequest, RequestDescriptor, SignedEnvelope
from .signing import sort_and_encode_params

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
USER_AGENT = "futures-connectors/1.0"

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ProxyConfig:
    """HTTP proxy configuration."""

    def __init__(self, url: str | None = None, username: str | None = None, password: str | None = None):
        self.url = url
        self.username = username
        self.password = password

    @property
    def proxy_url(self) -> str | None:
        if not self.url:
            return None
        if self.username and self.password:
            protocol = self.url.split("://")[0] if "://" in self.url else "http"
            rest = self.url.split("://")[1] if "://" in self.url else self.url
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        return self.url


@lru_cache(maxsize=None)
def _type_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _first_empty_model(value: Any) -> BaseModel | None:
    """First decoded model, at any depth, that took none of its fields from the body."""
    if isinstance(value, BaseModel):
        if not value.model_fields_set:
            return value
        for name in value.model_fields_set:
            empty = _first_empty_model(getattr(value, name))
            if empty is not None:
                return empty
        return None
    if isinstance(value, (list, tuple)):
        items = value
    elif isinstance(value, dict):
        items = value.values()
    else:
        return None
    for item in items:
        empty = _first_empty_model(item)
        if empty is not None:
            return empty
    return None


def encode_json(payload: Any) -> str:
    """Serialize a request payload to compact JSON.

    Pydantic models are dumped by alias with unset optionals (``None``)
    left out. The returned text is what gets signed and sent.
    """
    try:
        data = to_jsonable_python(payload, by_alias=True, exclude_none=True)
        return json.dumps(data, separators=(",", ":"))
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise PayloadError(f"failed to marshal request body to JSON: {exc}") from exc


class BaseExchangeClient(ABC):
    """Base class for all exchange adapters."""

    default_base_url = "https://api.example.com"
    api_prefix = ""

    def __init__(
        self,
        name: str,
        api_key: str = "",
        api_secret: str = "",
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
        proxy: ProxyConfig | None = None,
    ):
        """Initialize exchange client.

        Args:
            name: Exchange name
            api_key: API key; empty for a public-only client
            api_secret: API secret; empty for a public-only client
            base_url: Override for the default API host
            timeout: Total per-request timeout in seconds
            session: Pre-configured aiohttp session; the client never closes it
            proxy: Proxy configuration
        """
        self.name = name
        self._api_key = api_key or ""
        self._api_secret = api_secret or ""
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self.timeout = timeout
        self.proxy = proxy or ProxyConfig()
        self.session = session
        self._owns_session = session is None

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def has_credentials(self) -> bool:
        return bool(self._api_key and self._api_secret)

    def get_base_url(self) -> str:
        """Get base API URL."""
        return self.base_url

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            self.session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
            self._owns_session = True
        return self.session

    @abstractmethod
    def sign(self, descriptor: RequestDescriptor, timestamp: str | None = None) -> SignedEnvelope:
        """Sign a canonical request with the exchange's scheme."""
        ...

    @abstractmethod
    def _parse_error(self, status: int, body: str) -> ExchangeRejectedError | None:
        """Turn an error body into the exchange's structured error, if it matches."""
        ...

    def _should_sign(self, method: str, private: bool) -> bool:
        return private

    def _check_success(self, status: int, body: str) -> None:
        """Hook for exchanges that report errors inside 2xx bodies."""

    def _encode_body(
        self,
        method: str,
        json_payload: Any,
        form: Mapping[str, Any] | None,
    ) -> tuple[str, str | None]:
        if json_payload is not None:
            return encode_json(json_payload), JSON_CONTENT_TYPE
        if form is not None:
            return sort_and_encode_params(form), FORM_CONTENT_TYPE
        return "", None

    def build_request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        json: Any = None,
        form: Mapping[str, Any] | None = None,
        private: bool = False,
    ) -> PreparedRequest:
        """Assemble URL, body and headers for one call, signing it when required.

        Raises:
            ConfigurationError: Private call on a client without credentials
            PayloadError: Body cannot be encoded
        """
        method = method.upper()
        if private and not self.has_credentials:
            raise ConfigurationError(
                f"{self.name}: API key and secret key must be provided for private endpoints"
            )
        if json is not None and form is not None:
            raise PayloadError("a request body is either JSON or form data, not both")

        query = sort_and_encode_params(params)
        body, content_type = self._encode_body(method, json, form)
        request_path = self.api_prefix + path
        descriptor = RequestDescriptor(method=method, path=request_path, query=query, body=body)

        url = self.get_base_url() + request_path
        if query:
            url += "?" + query

        headers = {"Accept": JSON_CONTENT_TYPE, "User-Agent": USER_AGENT}
        if content_type:
            headers["Content-Type"] = content_type

        envelope = None
        if self._should_sign(method, private):
            envelope = self.sign(descriptor)
            headers.update(envelope.headers)

        return PreparedRequest(descriptor=descriptor, url=url, headers=headers, envelope=envelope)

    async def dispatch(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        json: Any = None,
        form: Mapping[str, Any] | None = None,
        target: Any = None,
        private: bool = False,
        timeout: float | None = None,
    ) -> Any:
        """Send one request and decode its response.

        Exactly one attempt is made. Cancellation of the calling task is not
        intercepted and surfaces as ``asyncio.CancelledError``.

        Raises:
            ConfigurationError: Private call without credentials
            PayloadError: Body cannot be encoded
            TransportError: Connection failure or timeout
            ExchangeRejectedError: Exchange returned its error shape
            UnexpectedResponseError: Non-2xx with an unknown body
            DecodeError: 2xx body does not match ``target``
        """
        request = self.build_request(method, path, params, json=json, form=form, private=private)
        session = await self._ensure_session()

        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)
        if self.proxy.proxy_url:
            kwargs["proxy"] = self.proxy.proxy_url

        logger.debug("[%s] %s %s", self.name, request.method, request.url)
        try:
            async with session.request(
                request.method,
                request.url,
                data=request.data,
                headers=request.headers,
                **kwargs,
            ) as resp:
                status = resp.status
                raw = await resp.read()
        except asyncio.TimeoutError as exc:
            raise TransportError(f"{self.name}: request to {request.url} timed out") from exc
        except aiohttp.ClientError as exc:
            raise TransportError(f"{self.name}: failed to send request: {exc}") from exc

        body = raw.decode("utf-8", errors="replace")
        logger.debug("[%s] response status %s (%d bytes)", self.name, status, len(raw))
        return self._handle_response(status, body, target)

    def _handle_response(self, status: int, body: str, target: Any) -> Any:
        if not 200 <= status < 300:
            error = self._parse_error(status, body)
            if error is not None:
                raise error
            raise UnexpectedResponseError(self.name, status, body)

        self._check_success(status, body)
        return self._decode(body, target)

    def _decode(self, body: str, target: Any) -> Any:
        if target is None:
            if not body.strip():
                return None
            try:
                return json.loads(body)
            except ValueError as exc:
                raise DecodeError(self.name, None, body, str(exc)) from exc

        try:
            decoded = _type_adapter(target).validate_json(body)
        except ValidationError as exc:
            raise DecodeError(self.name, target, body, str(exc)) from exc
        empty = _first_empty_model(decoded)
        if empty is not None:
            raise DecodeError(
                self.name, target, body, f"no {type(empty).__name__} fields present in response"
            )
        return decoded

    async def close(self) -> None:
        """Close connections."""
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
