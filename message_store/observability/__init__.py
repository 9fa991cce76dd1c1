"""
Observability module.

Provides logging configuration shared by the message store components.
"""

from message_store.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
