"""Runtime configuration for graphview."""

from .logging import configure_logging

__all__ = ["configure_logging"]
