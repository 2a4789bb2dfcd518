"""Loguru setup for fpbelt.

The package disables its own logger on import. Applications (and the CLI)
call configure_logging() to route fpbelt records to stderr.
"""

import sys
from typing import TYPE_CHECKING

from loguru import logger


if TYPE_CHECKING:
    from loguru import Record


def _log_format(record: "Record") -> str:
    """Format: time | level | module:message [key=value ...]."""
    fmt = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {name}:{message}"

    extra = record["extra"]
    if extra:
        extra_str = " ".join(f"{k}={v!r}" for k, v in extra.items())
        # Escape braces and tags so extra values are not read as format fields or markup
        extra_str = extra_str.replace("{", "{{").replace("}", "}}").replace("<", r"\<")
        fmt += f" <dim>| {extra_str}</dim>"

    fmt += "\n"
    if record["exception"]:
        fmt += "{exception}\n"
    return fmt


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with a stderr sink and enable fpbelt.

    Args:
        level: Minimum log level to display (e.g., "DEBUG", "INFO").
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=_log_format, colorize=True)
    logger.enable("fpbelt")
