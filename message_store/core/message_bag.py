"""
Message bag domain model.

An ordered, immutable collection of chat messages. One bag is the unit the
store persists per save, and the unit it returns from a load.

Dependencies: langchain_core
System role: Chat content container passed across the store boundary
"""

from collections.abc import Iterable, Iterator

from langchain_core.messages import BaseMessage


class MessageBag:
    """
    Ordered collection of chat messages.

    Insertion order is significant and preserved. The bag itself is
    immutable: adding messages returns a new bag.

    Attributes:
        messages: Tuple of messages in insertion order
    """

    __slots__ = ("_messages",)

    def __init__(self, *messages: BaseMessage) -> None:
        self._messages = tuple(messages)

    @classmethod
    def merge(cls, bags: Iterable["MessageBag"]) -> "MessageBag":
        """
        Concatenate bags into one, keeping bag order then message order.

        Args:
            bags: Bags to concatenate

        Returns:
            MessageBag: Bag holding every message of every bag
        """
        return cls(*(message for bag in bags for message in bag))

    @property
    def messages(self) -> tuple[BaseMessage, ...]:
        return self._messages

    def with_message(self, message: BaseMessage) -> "MessageBag":
        """Return a new bag with `message` appended."""
        return MessageBag(*self._messages, message)

    def __iter__(self) -> Iterator[BaseMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageBag):
            return NotImplemented
        return self._messages == other._messages

    def __repr__(self) -> str:
        return f"MessageBag({', '.join(repr(message) for message in self._messages)})"
