"""Structlog configuration for the logistics model.

Domain probes log through structlog but never configure it. Processes that
embed the model call configure_logging() once at startup; the unit test
session does the same from its conftest.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from infrastructure.settings import Settings, get_settings


class AppNameStamper:
    """Processor that tags every event with the configured application name."""

    def __init__(self, app_name: str):
        self.app_name = app_name

    def __call__(
        self, logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        event_dict.setdefault("app", self.app_name)
        return event_dict


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from settings.

    The renderer is the colored console one when force_color is set or
    stdout is a TTY, JSON otherwise. Events below the effective log level
    are dropped before any processor runs.

    Args:
        settings: Settings to use; defaults to the cached application settings
    """
    settings = settings or get_settings()
    use_colors = settings.force_color or sys.stdout.isatty()

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        AppNameStamper(settings.app_name),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if use_colors:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.effective_log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
