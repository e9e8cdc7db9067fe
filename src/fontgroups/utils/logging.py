"""Logging utilities for fontgroups."""

import logging
from pathlib import Path

import structlog

_LOGGER_NAME = "fontgroups"
_HANDLER_MARKER = "_fontgroups_handler"


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output

    Returns:
        Configured structlog logger
    """
    app_logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(app_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            app_logger.removeHandler(handler)
            handler.close()

    app_logger.setLevel(logging.DEBUG)
    app_logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARKER, True)
    app_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARKER, True)
        app_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


def get_logger(component: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger under the ``fontgroups`` namespace.

    Args:
        component: Optional sub-logger name, e.g. "store"

    Returns:
        structlog logger
    """
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    return structlog.get_logger(name)
