"""Tests for CLI command parsing and basic functionality."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from futures_connectors.app import main, probe
from futures_connectors.cli import app
from futures_connectors.exchanges.errors import GateAPIError, TransportError
from futures_connectors.exchanges.gate.models import FuturesAccount, FuturesTicker
from futures_connectors.exchanges.signing import sign_gate, sign_xt
from futures_connectors.exchanges.xt.models import Depth, Ticker


def mock_client(**methods):
    """Client double usable as ``async with`` with the given async methods."""
    client = MagicMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    for name, value in methods.items():
        setattr(client, name, value)
    return client


def squash(output: str) -> str:
    """Output with all whitespace removed, so wrapped hex strings compare whole."""
    return "".join(output.split())


def test_cli_help():
    """Test that CLI shows help correctly."""
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Gate.io and XT.com futures connector CLI" in result.output


def test_cli_commands_available():
    """Test that all expected CLI commands are available."""
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("config-show", "gate-tickers", "gate-order-book", "gate-account",
                    "xt-ticker", "xt-depth", "xt-balances", "sign"):
        assert command in result.output


@patch("futures_connectors.cli._build_client")
def test_gate_tickers(mock_build_client):
    client = mock_client(list_futures_tickers=AsyncMock(return_value=[
        FuturesTicker(contract="BTC_USDT", last="45000", change_percentage="1.2", mark_price="45001"),
        FuturesTicker(contract="ETH_USDT", last="2500", change_percentage="-0.5", mark_price="2500.1"),
    ]))
    mock_build_client.return_value = client

    runner = CliRunner()
    result = runner.invoke(app, ["gate-tickers", "--settle", "usdt"])

    assert result.exit_code == 0, result.output
    assert "BTC_USDT" in result.output
    assert "Total contracts: 2" in result.output
    mock_build_client.assert_called_once_with("gate", None)
    client.list_futures_tickers.assert_awaited_once_with("usdt", contract=None)
    client.__aexit__.assert_awaited_once()


@patch("futures_connectors.cli._build_client")
def test_gate_account_error_exits_nonzero(mock_build_client):
    mock_build_client.return_value = mock_client(
        get_futures_account=AsyncMock(side_effect=GateAPIError(401, "INVALID_KEY", "Invalid key provided")),
    )

    runner = CliRunner()
    result = runner.invoke(app, ["gate-account"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "INVALID_KEY" in result.output


@patch("futures_connectors.cli._build_client")
def test_gate_account(mock_build_client):
    mock_build_client.return_value = mock_client(
        get_futures_account=AsyncMock(return_value=FuturesAccount(currency="USDT", total="1000", available="900")),
    )

    runner = CliRunner()
    result = runner.invoke(app, ["gate-account", "--settle", "usdt"])

    assert result.exit_code == 0, result.output
    assert "Available: 900" in result.output


@patch("futures_connectors.cli._build_client")
def test_xt_ticker_normalizes_symbol(mock_build_client):
    client = mock_client(get_market_ticker=AsyncMock(return_value=Ticker(symbol="btc_usdt", close="45000.5")))
    mock_build_client.return_value = client

    runner = CliRunner()
    result = runner.invoke(app, ["xt-ticker", "BTC/USDT"])

    assert result.exit_code == 0, result.output
    client.get_market_ticker.assert_awaited_once_with("btc_usdt")
    assert "45000.5" in result.output


@patch("futures_connectors.cli._build_client")
def test_xt_depth(mock_build_client):
    client = mock_client(get_depth=AsyncMock(return_value=Depth(
        symbol="btc_usdt", asks=[["45001", "2"]], bids=[["45000", "3"], ["44999", "1"]],
    )))
    mock_build_client.return_value = client

    runner = CliRunner()
    result = runner.invoke(app, ["xt-depth", "btc_usdt", "--level", "5"])

    assert result.exit_code == 0, result.output
    client.get_depth.assert_awaited_once_with("btc_usdt", 5)
    assert "44999" in result.output


@patch("futures_connectors.cli._build_client")
def test_xt_balances_empty(mock_build_client):
    mock_build_client.return_value = mock_client(get_balance_list=AsyncMock(return_value=[]))

    runner = CliRunner()
    result = runner.invoke(app, ["xt-balances"])

    assert result.exit_code == 0
    assert "No balances found" in result.output


def test_sign_gate():
    runner = CliRunner()
    result = runner.invoke(app, [
        "sign",
        "--exchange", "gateio",
        "--method", "get",
        "--path", "/api/v4/futures/usdt/accounts",
        "--timestamp", "1700000000",
        "--api-secret", "secret",
    ])

    assert result.exit_code == 0, result.output
    expected = sign_gate("secret", "GET", "/api/v4/futures/usdt/accounts", "", "", "1700000000")
    assert expected in squash(result.output)
    assert "/api/v4/futures/usdt/accounts" in result.output
    assert "1700000000" in result.output


def test_sign_xt_post_ignores_query():
    runner = CliRunner()
    result = runner.invoke(app, [
        "sign",
        "--exchange", "xt",
        "--method", "POST",
        "--path", "/future/trade/v1/order/cancel",
        "--query", "ignored=1",
        "--body", "orderId=5",
        "--timestamp", "1700000000000",
        "--api-key", "key",
        "--api-secret", "secret",
    ])

    assert result.exit_code == 0, result.output
    expected = sign_xt("secret", "key", "1700000000000", "/future/trade/v1/order/cancel", "", "orderId=5")
    assert expected in squash(result.output)
    assert "ignored" not in result.output


def test_sign_secret_from_env(monkeypatch):
    monkeypatch.setenv("FUTURES_CONNECTORS_SIGN_API_SECRET", "secret")
    runner = CliRunner()
    result = runner.invoke(app, ["sign", "--exchange", "gate", "--path", "/p", "--timestamp", "1"])

    assert result.exit_code == 0, result.output
    assert sign_gate("secret", "GET", "/p", "", "", "1") in squash(result.output)


def test_sign_unsupported_exchange():
    runner = CliRunner()
    result = runner.invoke(app, [
        "sign", "--exchange", "binance", "--path", "/p", "--timestamp", "1", "--api-secret", "s",
    ])

    assert result.exit_code == 1
    assert "Unsupported exchange" in result.output


def test_config_show_redacts_secrets(tmp_path):
    config = tmp_path / "config.yml"
    config.write_text(
        "exchanges:\n"
        "  gate:\n"
        "    credentials:\n"
        "      api_key: visible-key\n"
        "      api_secret: hidden-secret\n",
        encoding="utf-8",
    )

    runner = CliRunner()
    result = runner.invoke(app, ["config-show", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "***" in result.output
    assert "hidden-secret" not in result.output
    assert "visible-key" not in result.output


def test_config_show_invalid_file(tmp_path):
    config = tmp_path / "config.yml"
    config.write_text("exchanges:\n  gate:\n    bogus: 1\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["config-show", "--config", str(config)])

    assert result.exit_code == 1
    assert "Error:" in result.output


class TestProbe:
    """Tests for the connectivity probe mode."""

    @pytest.mark.asyncio
    async def test_probe_reports_each_exchange(self):
        gate = mock_client(list_futures_tickers=AsyncMock(side_effect=TransportError("gate: timed out")))
        xt = mock_client(get_server_time=AsyncMock(return_value=1700000000000))

        results = await probe({"gate": gate, "xt": xt})

        by_name = {name: (ok, error) for name, ok, _, error in results}
        assert by_name["gate"] == (False, "gate: timed out")
        assert by_name["xt"] == (True, "")
        gate.list_futures_tickers.assert_awaited_once_with("usdt", contract="BTC_USDT")
        gate.__aexit__.assert_awaited_once()

    @patch("futures_connectors.app.configure_logging")
    @patch("futures_connectors.exchanges.init.create_exchange_clients_from_settings")
    def test_probe_mode_exit_code(self, mock_create_clients, mock_configure_logging, tmp_path):
        mock_create_clients.return_value = {
            "xt": mock_client(get_server_time=AsyncMock(return_value=1)),
        }

        assert main(["probe", "--config", str(tmp_path / "missing.yml")]) == 0

    @patch("futures_connectors.app.configure_logging")
    @patch("futures_connectors.exchanges.init.create_exchange_clients_from_settings")
    def test_probe_mode_without_exchanges(self, mock_create_clients, mock_configure_logging, tmp_path):
        mock_create_clients.return_value = {}

        assert main(["probe", "--config", str(tmp_path / "missing.yml")]) == 1


@patch("futures_connectors.app.configure_logging")
def test_main_runs_cli(mock_configure_logging, capsys):
    assert main(["--help"]) == 0
    assert "gate-tickers" in capsys.readouterr().out
