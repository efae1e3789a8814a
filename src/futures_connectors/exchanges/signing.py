"""Request signing for Gate.io and XT.com.

Pure functions: timestamps are passed in, nothing here reads the clock or
touches the network, so every signature can be reproduced in tests.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Mapping
from urllib.parse import quote_plus


def format_param(value: Any) -> str:
    """Render a query/form value the way the exchanges expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def sort_and_encode_params(params: Mapping[str, Any] | None) -> str:
    """Sort params by key and URL-encode them as ``k=v&k=v``.

    ``None`` values are dropped. Keys and values are escaped like Go's
    ``url.QueryEscape``: space becomes ``+``, only ``A-Za-z0-9-_.~`` stay
    literal.
    """
    if not params:
        return ""
    pairs = []
    for key in sorted(params):
        value = params[key]
        if value is None:
            continue
        pairs.append(f"{quote_plus(str(key), safe='')}={quote_plus(format_param(value), safe='')}")
    return "&".join(pairs)


def hash_payload(body: str | bytes) -> str:
    """Hex SHA-512 of the request body. An empty body is still hashed."""
    if isinstance(body, str):
        body = body.encode()
    return hashlib.sha512(body).hexdigest()


def gate_sign_string(method: str, path: str, query: str, body: str | bytes, timestamp: str) -> str:
    """Canonical Gate.io string: ``METHOD\\nPATH\\nQUERY\\nSHA512(BODY)\\nTIMESTAMP``."""
    return "\n".join([method.upper(), path, query, hash_payload(body), timestamp])


def sign_gate(
    secret: str,
    method: str,
    path: str,
    query: str,
    body: str | bytes,
    timestamp: str,
) -> str:
    """Gate.io API v4 signature (hex HMAC-SHA512).

    Args:
        secret: API secret key
        method: HTTP method
        path: Full request path including the ``/api/v4`` prefix
        query: Encoded query string exactly as sent, without ``?``
        body: Request body exactly as sent
        timestamp: Unix seconds as a string

    Returns:
        Hex-encoded signature
    """
    message = gate_sign_string(method, path, query, body, timestamp)
    return hmac.new(secret.encode(), message.encode(), hashlib.sha512).hexdigest()


def xt_sign_string(api_key: str, timestamp: str, path: str, query: str = "", body: str = "") -> str:
    """Canonical XT.com string: header part followed by ``#path[#query][#body]``."""
    header_part = f"validate-appkey={api_key}&validate-timestamp={timestamp}"
    data_part = "#" + path
    if query:
        data_part += "#" + query
    if body:
        data_part += "#" + body
    return header_part + data_part


def sign_xt(secret: str, api_key: str, timestamp: str, path: str, query: str = "", body: str = "") -> str:
    """XT.com futures signature (hex HMAC-SHA256).

    ``query`` must already be sorted and encoded, and only carries a value
    for GET/DELETE requests. ``body`` is the sorted form string or the exact
    JSON text that is sent.
    """
    message = xt_sign_string(api_key, timestamp, path, query, body)
    return hmac.new(secret.encode(), message.encode(), hashlib.sha256).hexdigest()
