"""Logging setup.

Modules log through plain stdlib loggers obtained from ``get_logger``; the
root handler renders records with structlog so that ``extra`` context shows
up as structured key/value pairs.
"""

import logging
import sys
from typing import Optional

import structlog

ROOT_LOGGER_NAME = "awsdata"


def _build_formatter(json_format: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    processors = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json_format:
        processors.append(structlog.processors.format_exc_info)
    processors.append(renderer)
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=processors,
    )


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    stream=None,
) -> logging.Logger:
    """
    Configure the package root logger.

    Calling this again replaces the previously installed handler, so the CLI
    can reconfigure after parsing its arguments.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Render records as JSON lines instead of console text
        stream: Output stream, stderr by default

    Returns:
        The configured package root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_awsdata_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_build_formatter(json_format))
    handler._awsdata_handler = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.propagate = False
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger below the package root logger.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        A stdlib logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
