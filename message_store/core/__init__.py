"""
Core domain module.

Contains the message bag model, store contracts, codec, clock and the
exception hierarchy.
"""

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
    # Exceptions
    "MessageStoreException",
    "InvalidArgumentError",
    "MessageSerializationError",
    # Domain
    "MessageBag",
    "MessageStoreInterface",
    "ManagedStoreInterface",
    "MessageCodec",
    "Clock",
    "MonotonicClock",
]
