"""Supporting adapters."""

from .chat_history_adapter import MessageStoreChatHistory

__all__ = ["MessageStoreChatHistory"]
