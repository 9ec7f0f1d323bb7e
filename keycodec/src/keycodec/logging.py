"""Structured logging for keycodec.

Library loggers are structlog wrappers over stdlib loggers under the
``keycodec`` namespace. The namespace carries a ``NullHandler``, so nothing is
written until the host application, or :func:`configure_logging`, installs a
handler.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List

import structlog

from .config import load_config

_ROOT_LOGGER = "keycodec"
_LEVEL_ENV = "KEYCODEC_LOG_LEVEL"

logging.getLogger(_ROOT_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: str | None = None) -> None:
    """Send keycodec records to stdout as JSON lines.

    Each line carries ``level``, ``ts``, ``msg`` and ``component`` plus any
    context bound by the caller. The level comes from ``level``, then the
    ``KEYCODEC_LOG_LEVEL`` environment variable, then the ``logging.level``
    entry of the loaded configuration.
    """

    log_level = level or os.getenv(_LEVEL_ENV) or load_config().logging.normalized_level()
    logging.basicConfig(
        level=_level_from_str(log_level.lower()),
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )


def get_logger(component: str = _ROOT_LOGGER) -> Any:
    if component != _ROOT_LOGGER and not component.startswith(f"{_ROOT_LOGGER}."):
        component = f"{_ROOT_LOGGER}.{component}"
    return structlog.wrap_logger(
        logging.getLogger(component),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        component=component,
    )


def _processors() -> List[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.stdlib.add_log_level,
        _component_processor,
        _rename_event_to_msg,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def _component_processor(
    logger: logging.Logger, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Fall back to the stdlib logger name when no ``component`` is bound."""

    if event_dict.get("component") is None:
        event_dict["component"] = getattr(logger, "name", None) or _ROOT_LOGGER
    return event_dict


def _rename_event_to_msg(
    _logger: logging.Logger, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Expose the event text under ``msg``."""

    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


def _level_from_str(level: str) -> int:
    mapping: Dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["configure_logging", "get_logger"]
