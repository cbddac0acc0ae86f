from __future__ import annotations

import logging
import sys

import structlog


def get_logger(name: str = __name__):
    return structlog.get_logger(name)


def configure_logging(level: int = logging.WARNING) -> None:
    """Route structlog output to stderr so stdout stays clean for command output."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=lambda *args: structlog.PrintLogger(sys.stderr),
    )
