"""Tests for request signing and parameter encoding."""

import hashlib
import hmac

from futures_connectors.exchanges.signing import (
    format_param,
    gate_sign_string,
    hash_payload,
    sign_gate,
    sign_xt,
    sort_and_encode_params,
    xt_sign_string,
)

EMPTY_SHA512 = (
    "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
    "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
)


class TestParamEncoding:
    """Tests for query/form encoding."""

    def test_sorted_by_key(self):
        assert sort_and_encode_params({"b": "2", "a": "1"}) == "a=1&b=2"

    def test_empty_params(self):
        assert sort_and_encode_params(None) == ""
        assert sort_and_encode_params({}) == ""

    def test_none_values_dropped(self):
        assert sort_and_encode_params({"a": "1", "b": None, "c": 3}) == "a=1&c=3"

    def test_escaping(self):
        assert sort_and_encode_params({"q": "a b&c/d"}) == "q=a+b%26c%2Fd"

    def test_bool_rendering(self):
        assert format_param(True) == "true"
        assert format_param(False) == "false"
        assert sort_and_encode_params({"holding": True}) == "holding=true"

    def test_numbers(self):
        assert sort_and_encode_params({"limit": 10, "price": 1.5}) == "limit=10&price=1.5"


class TestGateSignature:
    """Tests for the Gate.io HMAC-SHA512 scheme."""

    def test_empty_body_hash(self):
        assert hash_payload("") == EMPTY_SHA512
        assert hash_payload(b"") == EMPTY_SHA512

    def test_sign_string_layout(self):
        canonical = gate_sign_string("get", "/api/v4/futures/usdt/accounts", "", "", "1700000000")
        assert canonical == "\n".join(["GET", "/api/v4/futures/usdt/accounts", "", EMPTY_SHA512, "1700000000"])

    def test_matches_reference_hmac(self):
        body = '{"contract":"BTC_USDT","size":1}'
        canonical = gate_sign_string("POST", "/api/v4/futures/usdt/orders", "", body, "1700000000")
        expected = hmac.new(b"secret", canonical.encode(), hashlib.sha512).hexdigest()

        assert sign_gate("secret", "POST", "/api/v4/futures/usdt/orders", "", body, "1700000000") == expected
        assert len(expected) == 128

    def test_deterministic(self):
        args = ("secret", "GET", "/api/v4/futures/usdt/orders", "contract=BTC_USDT&status=open", "", "1700000000")
        assert sign_gate(*args) == sign_gate(*args)

    def test_sensitive_to_every_input(self):
        base = ["secret", "GET", "/api/v4/futures/usdt/orders", "status=open", "", "1700000000"]
        signature = sign_gate(*base)
        variants = [
            ["other", *base[1:]],
            [base[0], "DELETE", *base[2:]],
            [*base[:2], "/api/v4/futures/btc/orders", *base[3:]],
            [*base[:3], "status=finished", *base[4:]],
            [*base[:4], "{}", base[5]],
            [*base[:5], "1700000001"],
        ]
        for variant in variants:
            assert sign_gate(*variant) != signature

    def test_single_byte_body_change(self):
        a = sign_gate("secret", "POST", "/p", "", '{"size":1}', "1")
        b = sign_gate("secret", "POST", "/p", "", '{"size":2}', "1")
        assert a != b


class TestXTSignature:
    """Tests for the XT.com HMAC-SHA256 scheme."""

    def test_sign_string_path_only(self):
        assert xt_sign_string("key", "1700000000000", "/future/user/v1/balance/list") == (
            "validate-appkey=key&validate-timestamp=1700000000000#/future/user/v1/balance/list"
        )

    def test_sign_string_with_query_and_body(self):
        canonical = xt_sign_string("key", "1", "/path", "a=1&b=2", '{"x":1}')
        assert canonical == 'validate-appkey=key&validate-timestamp=1#/path#a=1&b=2#{"x":1}'

    def test_sign_string_body_without_query(self):
        assert xt_sign_string("key", "1", "/path", "", "orderId=5") == (
            "validate-appkey=key&validate-timestamp=1#/path#orderId=5"
        )

    def test_matches_reference_hmac(self):
        canonical = xt_sign_string("key", "1700000000000", "/future/trade/v1/order/detail", "orderId=7")
        expected = hmac.new(b"secret", canonical.encode(), hashlib.sha256).hexdigest()

        signature = sign_xt("secret", "key", "1700000000000", "/future/trade/v1/order/detail", "orderId=7")
        assert signature == expected
        assert len(signature) == 64

    def test_sensitive_to_key_and_timestamp(self):
        signature = sign_xt("secret", "key", "1", "/path")
        assert sign_xt("secret", "key2", "1", "/path") != signature
        assert sign_xt("secret", "key", "2", "/path") != signature
        assert sign_xt("secret2", "key", "1", "/path") != signature

    def test_sensitive_to_query_and_body(self):
        signature = sign_xt("secret", "key", "1", "/path", "a=1", "b=2")
        assert sign_xt("secret", "key", "1", "/path", "a=2", "b=2") != signature
        assert sign_xt("secret", "key", "1", "/path", "a=1", "b=3") != signature
        assert sign_xt("secret", "key", "1", "/path", "a=1", "b=2") == signature
