from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

LOG_LEVEL_ENV = "FUTURES_CONNECTORS_LOG_LEVEL"
LOG_FILE_NAME = "futures_connectors.log"

# aiohttp logs every connection at DEBUG; keep it quieter than our own tracing
_NOISY_LOGGERS = ("aiohttp.access", "aiohttp.client", "asyncio")


def configure_logging(log_dir: Path | None = None, level: str | None = None) -> None:
    """Configure console and rotating file logging.

    Level comes from ``level``, else ``$FUTURES_CONNECTORS_LOG_LEVEL``, else INFO.
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # 10MB per file, 5 backups
    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
