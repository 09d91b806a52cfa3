"""Structured logging — JSON formatter and setup."""

from glogin.logging.formatter import JSONLogFormatter
from glogin.logging.setup import configure_logging

__all__ = ["JSONLogFormatter", "configure_logging"]
