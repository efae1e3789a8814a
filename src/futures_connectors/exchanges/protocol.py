"""Protocol definition for exchange clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Canonical form of one outgoing request.

    ``query`` and ``body`` hold the exact text placed on the wire, so the
    signature computed over them matches what the exchange receives.
    """

    method: str
    path: str
    query: str = ""
    body: str = ""


@dataclass(frozen=True, slots=True)
class SignedEnvelope:
    """Descriptor plus the authentication data computed for it."""

    descriptor: RequestDescriptor
    timestamp: str
    signature: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class PreparedRequest:
    """Fully built HTTP request, ready for the transport."""

    descriptor: RequestDescriptor
    url: str
    headers: dict[str, str]
    envelope: SignedEnvelope | None = None

    @property
    def method(self) -> str:
        return self.descriptor.method

    @property
    def data(self) -> bytes | None:
        if not self.descriptor.body:
            return None
        return self.descriptor.body.encode()


class ExchangeClient(Protocol):
    """Capability shared by the Gate.io and XT.com clients."""

    name: str

    @property
    def has_credentials(self) -> bool:
        """True when both API key and secret are configured."""
        ...

    def sign(self, descriptor: RequestDescriptor, timestamp: str | None = None) -> SignedEnvelope:
        """Sign a canonical request.

        Args:
            descriptor: Request to sign
            timestamp: Timestamp to sign with; the current time when omitted

        Returns:
            Envelope with the headers to attach
        """
        ...

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
        """Build, sign, send one request and decode its response.

        Args:
            method: HTTP method
            path: Endpoint path relative to the client's API root
            params: Query parameters
            json: Payload serialized as a JSON body
            form: Payload sent as a form-urlencoded body
            target: Type to decode a successful response into
            private: Endpoint requires authentication
            timeout: Per-call deadline in seconds

        Returns:
            Decoded response
        """
        ...

    async def close(self) -> None:
        """Close the HTTP session if the client owns it."""
        ...
