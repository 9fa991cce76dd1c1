"""
SQL-backed chat message store.

Persists an append-only, time-ordered log of chat messages into a single
relational table through SQLAlchemy.

Exports:
  - DbalMessageStore: The SQL message store adapter
  - create_message_store(): Factory wiring the store from settings
  - MessageBag: Ordered, immutable collection of chat messages
  - MessageCodec: JSON serializer for langchain message lists
  - MonotonicClock: Non-regressing clock used for row timestamps
"""

from message_store.boundary.db import DbalMessageStore, create_message_store
from message_store.core.clock import Clock, MonotonicClock
from message_store.core.codec import MessageCodec
from message_store.core.exceptions import (
    InvalidArgumentError,
    MessageSerializationError,
    MessageStoreException,
)
from message_store.core.interfaces import ManagedStoreInterface, MessageStoreInterface
from message_store.core.message_bag import MessageBag

__all__ = [
    "Clock",
    "DbalMessageStore",
    "InvalidArgumentError",
    "ManagedStoreInterface",
    "MessageBag",
    "MessageCodec",
    "MessageSerializationError",
    "MessageStoreException",
    "MessageStoreInterface",
    "MonotonicClock",
    "create_message_store",
]
