from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path

from .config import load_settings
from .exchanges.base import BaseExchangeClient
from .exchanges.errors import ExchangeError
from .logging import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point supporting both CLI commands and connectivity probing.

    - `futures-connectors probe`: check every configured exchange concurrently
    - `futures-connectors <typer-subcommand>`: run CLI mode (e.g. `futures-connectors gate-tickers`)
    """
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "probe":
        return _run_probe_mode(argv[1:])

    return _run_cli_mode(argv or ["--help"])


async def _probe_one(name: str, client: BaseExchangeClient) -> tuple[str, bool, float, str]:
    started = time.monotonic()
    try:
        async with client:
            if name == "gate":
                await client.list_futures_tickers("usdt", contract="BTC_USDT")
            else:
                await client.get_server_time()
    except ExchangeError as e:
        return name, False, time.monotonic() - started, str(e)
    return name, True, time.monotonic() - started, ""


async def probe(clients: dict[str, BaseExchangeClient]) -> list[tuple[str, bool, float, str]]:
    """Hit one public endpoint per exchange, all at once."""
    return list(await asyncio.gather(*(_probe_one(name, client) for name, client in clients.items())))


def _run_probe_mode(argv: list[str]) -> int:
    """Check public connectivity of every enabled exchange."""
    parser = argparse.ArgumentParser(
        prog="futures-connectors probe", description="Check connectivity to configured exchanges"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file (default: FUTURES_CONNECTORS_CONFIG or ./config.yml)",
    )

    args = parser.parse_args(argv)
    configure_logging(Path("logs"))

    settings = load_settings(args.config)

    from .exchanges.init import create_exchange_clients_from_settings

    clients = create_exchange_clients_from_settings(settings)
    if not clients:
        logger.warning("No exchanges enabled in configuration")
        return 1

    results = asyncio.run(probe(clients))
    for name, ok, elapsed, error in results:
        if ok:
            logger.info("%s reachable in %.0f ms", name, elapsed * 1000)
        else:
            logger.error("%s unreachable after %.0f ms: %s", name, elapsed * 1000, error)

    return 0 if all(ok for _, ok, _, _ in results) else 1


def _run_cli_mode(argv: list[str]) -> int:
    """Run in CLI mode using Typer."""
    try:
        configure_logging(Path("logs"))

        # Import CLI app here to avoid circular import
        from .cli import run_cli
        run_cli(argv)
        return 0
    except SystemExit as e:
        return e.code if e.code else 0
    except Exception as e:
        logger.error("CLI error: %s", e, exc_info=True)
        return 1
