"""Logging configuration module for idcard-kit."""

from idcard_kit.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
