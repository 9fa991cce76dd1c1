"""
SQL message store.

Persists message bags as rows of one relational table: one row per save,
holding the JSON-encoded messages and the save timestamp. Schema
introspection, DDL and SQL generation are left to SQLAlchemy.

Dependencies: sqlalchemy, message_store.core
System role: Chat history persistence on a relational backend
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Integer, MetaData, Text, column, delete, insert, inspect, select, table
from sqlalchemy.engine import Engine

from message_store.boundary.db.dialects import capability_for
from message_store.boundary.db.schema import build_message_table
from message_store.core.clock import Clock
from message_store.core.codec import MessageCodec
from message_store.core.exceptions import InvalidArgumentError
from message_store.core.interfaces import ManagedStoreInterface, MessageStoreInterface
from message_store.core.message_bag import MessageBag
from message_store.observability.logger import get_logger

logger = get_logger(__name__)


class DbalMessageStore(ManagedStoreInterface, MessageStoreInterface):
    """
    Append-only message history in a single SQL table.

    Holds no state between calls besides its collaborators. Writes run in
    their own transaction (engine.begin()); concurrency control is whatever
    the backend provides.

    Attributes:
        table_name: Table holding the rows
        engine: SQLAlchemy engine statements are executed on
        codec: Serializer for the messages column
        clock: Time source for the added_at column
    """

    def __init__(
        self,
        table_name: str,
        engine: Engine,
        codec: MessageCodec,
        clock: Clock,
    ) -> None:
        """
        Initialize the store.

        Args:
            table_name: Table name, must be a valid identifier on the backend
            engine: SQLAlchemy engine for the backend
            codec: Message list serializer
            clock: Time source for row timestamps
        """
        self.table_name = table_name
        self.engine = engine
        self.codec = codec
        self.clock = clock
        self._rows = table(
            table_name,
            column("id", Integer),
            column("messages", Text),
            column("added_at", Integer),
        )

    def setup(self, options: Mapping[str, Any] | None = None) -> None:
        """
        Create the message table if it does not exist yet.

        Idempotent: an existing table is left untouched.

        Args:
            options: Must be empty; no options are supported

        Raises:
            InvalidArgumentError: If any option is given
            SQLAlchemyError: If introspection or DDL fails
        """
        if options:
            raise InvalidArgumentError("No supported options.", options=[str(key) for key in options])

        with self.engine.begin() as conn:
            if inspect(conn).has_table(self.table_name):
                logger.debug(f"Table {self.table_name} already exists, skipping setup")
                return

            capability = capability_for(conn.dialect)
            sequence_name = None
            if capability.requires_sequence(conn):
                sequence_name = capability.sequence_name(self.table_name)

            metadata = MetaData()
            build_message_table(metadata, self.table_name, sequence_name=sequence_name)
            metadata.create_all(conn)

        if sequence_name:
            logger.info(f"Created table {self.table_name} with id sequence {sequence_name}")
        else:
            logger.info(f"Created table {self.table_name}")

    def drop(self) -> None:
        """
        Delete every stored row.

        The table itself is kept, so setup() afterwards is a no-op.
        Missing table is a no-op.

        Raises:
            SQLAlchemyError: If introspection or the delete fails
        """
        with self.engine.begin() as conn:
            if not inspect(conn).has_table(self.table_name):
                return

            deleted = conn.execute(delete(self._rows)).rowcount

        logger.debug(f"Deleted {deleted} rows from {self.table_name}")

    def save(self, messages: MessageBag) -> None:
        """
        Append one row holding the serialized bag and the current timestamp.

        Args:
            messages: Bag to persist

        Raises:
            MessageSerializationError: If a message cannot be encoded
            SQLAlchemyError: On connection failure or constraint violation
        """
        payload = self.codec.serialize(messages.messages)
        added_at = int(self.clock.now().timestamp())

        with self.engine.begin() as conn:
            conn.execute(insert(self._rows).values(messages=payload, added_at=added_at))

        logger.debug(f"Saved {len(messages)} messages to {self.table_name} at {added_at}")

    def load(self) -> MessageBag:
        """
        Load the full history as a single bag.

        Rows are read oldest first (added_at, then id for rows sharing a
        second) and their messages concatenated in that order.

        Returns:
            MessageBag: Every stored message, empty when nothing was saved

        Raises:
            MessageSerializationError: If a stored payload cannot be decoded
            SQLAlchemyError: If the query fails
        """
        stmt = select(self._rows.c.messages).order_by(
            self._rows.c.added_at.asc(),
            self._rows.c.id.asc(),
        )

        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

        messages = [
            message
            for row in rows
            for message in self.codec.deserialize(row["messages"])
        ]
        return MessageBag(*messages)
