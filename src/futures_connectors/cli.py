"""Typer-based CLI for querying Gate.io and XT.com futures."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from .exchanges.base import BaseExchangeClient


# Import with local function to avoid circular imports
def _load_settings(config_path: Optional[Path] = None):
    from .config import load_settings
    return load_settings(config_path)


def _build_client(exchange: str, config_path: Optional[Path] = None) -> "BaseExchangeClient":
    from .config import get_exchange_settings
    from .exchanges.init import create_client

    settings = _load_settings(config_path)
    return create_client(exchange, get_exchange_settings(settings, exchange), settings.proxy)


app = typer.Typer(help="Gate.io and XT.com futures connector CLI")
console = Console()
logger = logging.getLogger(__name__)


def run_cli(argv: list[str] | None = None) -> None:
    """Run CLI with optional argv parameter."""
    app(argv)


def _fail(action: str, exc: Exception) -> None:
    logger.error("Failed to %s: %s", action, exc, exc_info=True)
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(1)


@app.command("config-show")
def config_show(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Print the effective configuration with secrets redacted."""
    try:
        settings = _load_settings(config)
        console.print_json(json.dumps(settings.redacted()))
    except Exception as e:
        _fail("load configuration", e)


@app.command("gate-tickers")
def gate_tickers(
    settle: str = typer.Option("usdt", help="Settle currency (usdt or btc)"),
    contract: Optional[str] = typer.Option(None, help="Single contract, e.g. BTC_USDT"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show Gate.io futures tickers."""
    try:
        asyncio.run(_gate_tickers_async(settle, contract, config))
    except Exception as e:
        _fail("fetch Gate.io tickers", e)


async def _gate_tickers_async(settle: str, contract: Optional[str], config: Optional[Path]) -> None:
    async with _build_client("gate", config) as client:
        tickers = await client.list_futures_tickers(settle, contract=contract)

    table = Table(title=f"Gate.io {settle.upper()} futures tickers")
    table.add_column("Contract", style="cyan")
    table.add_column("Last", style="green")
    table.add_column("Change %", style="yellow")
    table.add_column("Mark", style="magenta")
    table.add_column("Funding rate", style="blue")
    table.add_column("Volume 24h", style="white")

    for ticker in tickers:
        table.add_row(
            ticker.contract,
            ticker.last,
            ticker.change_percentage,
            ticker.mark_price,
            ticker.funding_rate,
            ticker.volume_24h,
        )

    console.print(table)
    console.print(f"\n[bold]Total contracts:[/bold] {len(tickers)}")


@app.command("gate-order-book")
def gate_order_book(
    contract: str = typer.Argument(..., help="Contract, e.g. BTC_USDT"),
    settle: str = typer.Option("usdt", help="Settle currency (usdt or btc)"),
    limit: int = typer.Option(10, help="Price levels per side"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show a Gate.io futures order book."""
    try:
        asyncio.run(_gate_order_book_async(contract, settle, limit, config))
    except Exception as e:
        _fail("fetch Gate.io order book", e)


async def _gate_order_book_async(contract: str, settle: str, limit: int, config: Optional[Path]) -> None:
    from .exchanges.normalization import to_exchange_symbol

    async with _build_client("gate", config) as client:
        book = await client.list_futures_order_book(settle, to_exchange_symbol("gate", contract), limit=limit)

    table = Table(title=f"Gate.io {book.contract or contract} order book")
    table.add_column("Bid size", style="green", justify="right")
    table.add_column("Bid", style="green")
    table.add_column("Ask", style="red")
    table.add_column("Ask size", style="red", justify="right")

    for i in range(max(len(book.bids), len(book.asks))):
        bid = book.bids[i] if i < len(book.bids) else None
        ask = book.asks[i] if i < len(book.asks) else None
        table.add_row(
            str(bid.size) if bid else "",
            bid.price if bid else "",
            ask.price if ask else "",
            str(ask.size) if ask else "",
        )

    console.print(table)


@app.command("gate-account")
def gate_account(
    settle: str = typer.Option("usdt", help="Settle currency (usdt or btc)"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the Gate.io futures account (requires credentials)."""
    try:
        asyncio.run(_gate_account_async(settle, config))
    except Exception as e:
        _fail("fetch Gate.io account", e)


async def _gate_account_async(settle: str, config: Optional[Path]) -> None:
    async with _build_client("gate", config) as client:
        account = await client.get_futures_account(settle)

    console.print(Panel.fit(
        f"Currency: [cyan]{account.currency}[/cyan]\n"
        f"Total: [bold]{account.total}[/bold]\n"
        f"Available: [green]{account.available}[/green]\n"
        f"Unrealised PnL: [yellow]{account.unrealised_pnl}[/yellow]\n"
        f"Position margin: {account.position_margin}\n"
        f"Order margin: {account.order_margin}\n"
        f"Dual mode: {account.in_dual_mode}",
        title="Gate.io futures account",
    ))
    logger.info("Gate.io account %s: total=%s available=%s", account.currency, account.total, account.available)


@app.command("xt-ticker")
def xt_ticker(
    symbol: str = typer.Argument(..., help="Symbol, e.g. btc_usdt or BTC/USDT"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the XT.com 24h ticker for one symbol."""
    try:
        asyncio.run(_xt_ticker_async(symbol, config))
    except Exception as e:
        _fail("fetch XT.com ticker", e)


async def _xt_ticker_async(symbol: str, config: Optional[Path]) -> None:
    from .exchanges.normalization import to_exchange_symbol

    async with _build_client("xt", config) as client:
        ticker = await client.get_market_ticker(to_exchange_symbol("xt", symbol))

    console.print(Panel.fit(
        f"Symbol: [cyan]{ticker.symbol}[/cyan]\n"
        f"Last: [bold]{ticker.close}[/bold]\n"
        f"Open: {ticker.open}\n"
        f"High: [green]{ticker.high}[/green]\n"
        f"Low: [red]{ticker.low}[/red]\n"
        f"Change: [yellow]{ticker.change_ratio}[/yellow]\n"
        f"Volume: {ticker.volume}",
        title="XT.com ticker",
    ))


@app.command("xt-depth")
def xt_depth(
    symbol: str = typer.Argument(..., help="Symbol, e.g. btc_usdt or BTC/USDT"),
    level: int = typer.Option(10, help="Price levels per side (1-50)"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show an XT.com order book."""
    try:
        asyncio.run(_xt_depth_async(symbol, level, config))
    except Exception as e:
        _fail("fetch XT.com depth", e)


async def _xt_depth_async(symbol: str, level: int, config: Optional[Path]) -> None:
    from .exchanges.normalization import to_exchange_symbol

    async with _build_client("xt", config) as client:
        depth = await client.get_depth(to_exchange_symbol("xt", symbol), level)

    table = Table(title=f"XT.com {depth.symbol or symbol} depth")
    table.add_column("Bid qty", style="green", justify="right")
    table.add_column("Bid", style="green")
    table.add_column("Ask", style="red")
    table.add_column("Ask qty", style="red", justify="right")

    for i in range(max(len(depth.bids), len(depth.asks))):
        bid = depth.bids[i] if i < len(depth.bids) else ["", ""]
        ask = depth.asks[i] if i < len(depth.asks) else ["", ""]
        table.add_row(bid[1], bid[0], ask[0], ask[1])

    console.print(table)


@app.command("xt-balances")
def xt_balances(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show XT.com futures balances (requires credentials)."""
    try:
        asyncio.run(_xt_balances_async(config))
    except Exception as e:
        _fail("fetch XT.com balances", e)


async def _xt_balances_async(config: Optional[Path]) -> None:
    async with _build_client("xt", config) as client:
        balances = await client.get_balance_list()

    if not balances:
        console.print("[yellow]No balances found[/yellow]")
        return

    table = Table(title="XT.com futures balances")
    table.add_column("Coin", style="cyan")
    table.add_column("Wallet", style="white")
    table.add_column("Available", style="green")
    table.add_column("Isolated margin", style="yellow")
    table.add_column("Crossed margin", style="yellow")
    table.add_column("Frozen", style="red")

    for balance in balances:
        table.add_row(
            balance.coin,
            balance.wallet_balance,
            balance.available_balance,
            balance.isolated_margin,
            balance.crossed_margin,
            balance.open_order_margin_frozen,
        )

    console.print(table)


@app.command("sign")
def sign(
    exchange: str = typer.Option(..., help="gate or xt"),
    method: str = typer.Option("GET", help="HTTP method"),
    path: str = typer.Option(..., help="Request path as signed (Gate.io: include /api/v4)"),
    query: str = typer.Option("", help="Encoded query string without '?'"),
    body: str = typer.Option("", help="Request body exactly as sent"),
    timestamp: str = typer.Option(..., help="Timestamp (Gate.io: seconds, XT.com: milliseconds)"),
    api_key: str = typer.Option("", envvar="FUTURES_CONNECTORS_SIGN_API_KEY", help="API key"),
    api_secret: str = typer.Option(..., envvar="FUTURES_CONNECTORS_SIGN_API_SECRET", help="API secret"),
) -> None:
    """Print the canonical string and signature for a request (offline)."""
    from .exchanges.factory import resolve_exchange_name
    from .exchanges.signing import gate_sign_string, sign_gate, sign_xt, xt_sign_string

    name = resolve_exchange_name(exchange)
    method = method.upper()
    if name == "gate":
        canonical = gate_sign_string(method, path, query, body, timestamp)
        signature = sign_gate(api_secret, method, path, query, body, timestamp)
    elif name == "xt":
        signed_query = query if method in ("GET", "DELETE") else ""
        canonical = xt_sign_string(api_key, timestamp, path, signed_query, body)
        signature = sign_xt(api_secret, api_key, timestamp, path, signed_query, body)
    else:
        console.print(f"[red]Error:[/red] Unsupported exchange '{exchange}'")
        raise typer.Exit(1)

    console.print(Panel(Text(canonical), title="Canonical string"))
    console.print(f"[bold]Signature:[/bold] {signature}")


def main():
    """CLI main entry point."""
    app()


if __name__ == "__main__":
    main()
