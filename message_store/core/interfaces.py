"""
Message store contracts.

Split the way callers use them: MessageStoreInterface for reading and
writing history, ManagedStoreInterface for schema lifecycle.

Dependencies: abc (stdlib)
System role: Ports implemented by message store adapters
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from message_store.core.message_bag import MessageBag


class MessageStoreInterface(ABC):
    """Append-only, ordered message history."""

    @abstractmethod
    def save(self, messages: MessageBag) -> None:
        """Append one bag of messages to the history."""

    @abstractmethod
    def load(self) -> MessageBag:
        """Return the full history as one bag, oldest first."""


class ManagedStoreInterface(ABC):
    """Store whose backing storage can be provisioned and emptied."""

    @abstractmethod
    def setup(self, options: Mapping[str, Any] | None = None) -> None:
        """Create backing storage if it is missing."""

    @abstractmethod
    def drop(self) -> None:
        """Remove all stored history."""
