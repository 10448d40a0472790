"""Logging configuration helpers."""

from __future__ import annotations

import logging
import logging.config
from collections.abc import MutableMapping
from typing import Any

from tripzi_search.config import get_settings


def get_logging_config() -> dict[str, Any]:
    """
    Get logging configuration based on settings.

    Returns:
        Logging configuration dictionary
    """
    settings = get_settings()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | pid=%(pid)s | %(message)s",
            },
        },
        "filters": {
            "pid": {
                "()": "tripzi_search.logging_config.ProcessIdFilter",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "filters": ["pid"],
            },
        },
        "loggers": {
            # httpx logs every request at INFO
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
        "root": {
            "level": settings.log_level,
            "handlers": ["console"],
        },
    }


class ProcessIdFilter(logging.Filter):
    """Ensure `pid` key is always available in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "pid"):
            record.pid = "-"
        return True


class SearchLogAdapter(logging.LoggerAdapter):
    """Attach the search process id to every record emitted for one call."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs


def configure_logging(config: dict[str, Any] | None = None) -> None:
    """
    Apply logging configuration once.

    Args:
        config: Optional logging configuration dict. If None, uses config from settings.
    """
    if config is None:
        config = get_logging_config()
    logging.config.dictConfig(config)
