"""Shared helpers for SmallWorld."""

from smallworld.utils.logging import setup_logger, get_logger

__all__ = ["setup_logger", "get_logger"]
