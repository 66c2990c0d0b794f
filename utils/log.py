"""Logging setup for the blurhash namespace.

Library modules only call get_logger(); handlers are attached by the CLI
through setup_logging().
"""

import json
import logging
import traceback
from datetime import datetime, timezone

ROOT_LOGGER = "blurhash"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record):
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "src": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "ctx"):
            entry["ctx"] = record.ctx
        if record.exc_info and record.exc_info[1]:
            entry["traceback"] = traceback.format_exception(*record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable single-line output."""

    def format(self, record):
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%H:%M:%S.%f")[:-3]
        parts = [ts, f"{record.levelname:5s}", f"[{record.name}]", record.getMessage()]

        if getattr(record, "ctx", None):
            parts.append(" ".join(f"{k}={v}" for k, v in record.ctx.items()))

        if record.exc_info and record.exc_info[1]:
            parts.append(f"\n{''.join(traceback.format_exception(*record.exc_info))}")

        return " ".join(parts)


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """Configure the root blurhash logger and return it."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(JsonFormatter() if json_format else ConsoleFormatter())
    root.addHandler(console)
    return root


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger scoped under the blurhash namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{module_name}")
