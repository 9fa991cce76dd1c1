"""
Chat history adapter.

Exposes a message store as a LangChain chat message history, so chains and
agents built on BaseChatMessageHistory can persist through it.

Dependencies: langchain_core, message_store.core
System role: LangChain integration for message stores
"""

from collections.abc import Sequence
from typing import List

from langchain_core.chat_history import BaseChatMessageHistory
from langchain_core.messages import BaseMessage

from message_store.core.interfaces import ManagedStoreInterface, MessageStoreInterface
from message_store.core.message_bag import MessageBag


class MessageStoreChatHistory(BaseChatMessageHistory):
    """
    BaseChatMessageHistory backed by a message store.

    Each add_messages() call becomes one saved bag; clear() empties the
    store's backing storage.
    """

    def __init__(self, store: MessageStoreInterface) -> None:
        """
        Initialize chat history adapter.

        Args:
            store: Store to read and write messages through. clear() requires
                it to also implement ManagedStoreInterface.
        """
        self.store = store

    @property
    def messages(self) -> List[BaseMessage]:  # type: ignore[override]
        """All stored messages, oldest first."""
        return list(self.store.load().messages)

    def add_messages(self, messages: Sequence[BaseMessage]) -> None:
        """
        Persist messages as one bag.

        Args:
            messages: Messages to append, in order
        """
        self.store.save(MessageBag(*messages))

    def clear(self) -> None:
        """
        Remove all stored messages.

        Raises:
            TypeError: If the store cannot be emptied
        """
        if not isinstance(self.store, ManagedStoreInterface):
            raise TypeError(f"{type(self.store).__name__} does not support clearing")
        self.store.drop()
