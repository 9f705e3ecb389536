"""Structured logging setup."""
from __future__ import annotations

import logging
import sys

import structlog

_PACKAGE_PREFIX = "dsar_detect."


def configure_logging(level: str = "INFO") -> None:
    """Emit structlog records to stderr as JSON lines.

    Each record carries ``ts``, ``level``, ``msg`` and ``component`` next to the
    caller's own keys. stdout stays reserved for command output. ``level`` is
    expected to be validated already (see ``LoggingConfig``).
    """

    numeric_level = logging.getLevelName(level.upper())

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _scan_record_fields,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def _scan_record_fields(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Name the emitting module as ``component`` and the event as ``msg``.

    ``dsar_detect.scanner.engine`` becomes ``scanner.engine``.
    """

    if "component" not in event_dict:
        logger_name = getattr(logger, "name", None) or "dsar_detect"
        event_dict["component"] = logger_name.removeprefix(_PACKAGE_PREFIX)
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["configure_logging"]
