"""Structured logging configuration for applications embedding glogin."""

import logging
import sys

from glogin.logging.formatter import JSONLogFormatter
from glogin.settings import get_settings


def configure_logging(level: str | None = None, service: str = "glogin") -> None:
    """Set up structured JSON logging on the root logger.

    *level* defaults to ``GLOGIN_LOG_LEVEL``.
    """
    root = logging.getLogger()
    root.setLevel(level or get_settings().LOG_LEVEL)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONLogFormatter(service=service))
    root.addHandler(handler)
