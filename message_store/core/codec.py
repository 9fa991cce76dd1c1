"""
Message list codec.

Serializes lists of langchain messages to JSON text and back. Each message is
stored as its langchain dict form ({"type": ..., "data": {...}}), so the
message variant (human, ai, system, tool, ...) survives the round trip.

Dependencies: langchain_core, json (stdlib)
System role: Transport encoding for the message store payload column
"""

import json
from collections.abc import Sequence

from langchain_core.messages import BaseMessage, messages_from_dict, messages_to_dict

from message_store.core.exceptions import MessageSerializationError


class MessageCodec:
    """
    JSON codec for message lists.

    Stateless; one instance can be shared across stores.
    """

    def serialize(self, messages: Sequence[BaseMessage]) -> str:
        """
        Encode messages as a JSON array.

        Args:
            messages: Messages in the order they should be restored

        Returns:
            str: JSON text

        Raises:
            MessageSerializationError: If a message holds content JSON cannot encode
        """
        try:
            return json.dumps(messages_to_dict(list(messages)))
        except (TypeError, ValueError) as e:
            raise MessageSerializationError(
                f"Messages could not be encoded: {e}",
                operation="serialize",
            ) from e

    def deserialize(self, payload: str) -> list[BaseMessage]:
        """
        Decode a JSON array back into messages.

        Args:
            payload: JSON text produced by serialize()

        Returns:
            list[BaseMessage]: Messages in stored order

        Raises:
            MessageSerializationError: If payload is not JSON, is not a list,
                or holds entries that are not message dicts
        """
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            raise MessageSerializationError(
                f"Payload is not valid JSON: {e}",
                operation="deserialize",
            ) from e

        if not isinstance(data, list):
            raise MessageSerializationError(
                "Payload must be a list of messages",
                operation="deserialize",
                details={"payload_type": type(data).__name__},
            )

        try:
            return messages_from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise MessageSerializationError(
                f"Payload holds an invalid message: {e}",
                operation="deserialize",
            ) from e
