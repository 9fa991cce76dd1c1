"""
Dialect capabilities for auto-increment primary keys.

Most backends generate ids natively. Oracle from 12.1 on is driven through
an explicit sequence wired as the id column's server default. Each backend
family maps to a capability object; callers ask the capability instead of
checking dialect types themselves.

Dependencies: sqlalchemy
System role: Backend-specific schema accommodations
"""

from abc import ABC, abstractmethod

from sqlalchemy import Connection
from sqlalchemy.engine import Dialect


class AutoincrementCapability(ABC):
    """How a backend family generates auto-increment ids."""

    @abstractmethod
    def requires_sequence(self, connection: Connection) -> bool:
        """
        Check whether ids must be drawn from an explicit sequence.

        Args:
            connection: Live connection to the backend

        Returns:
            bool: True when the table needs a `<table>_seq` sequence
        """

    def sequence_name(self, table_name: str) -> str:
        return f"{table_name}_seq"


class NativeAutoincrement(AutoincrementCapability):
    """Backend generates ids itself (SERIAL, IDENTITY, AUTO_INCREMENT, rowid)."""

    def requires_sequence(self, connection: Connection) -> bool:
        return False


class SequenceAutoincrement(AutoincrementCapability):
    """
    Backend draws ids from a sequence from a given server version on.

    Below the threshold no id generator is created, so those servers need a
    sequence or trigger provisioned outside the store.

    Attributes:
        min_server_version: First server version taking the sequence path
    """

    def __init__(self, min_server_version: tuple[int, ...]) -> None:
        self.min_server_version = min_server_version

    def requires_sequence(self, connection: Connection) -> bool:
        server_version = connection.dialect.server_version_info
        if server_version is None:
            return False
        return tuple(server_version) >= self.min_server_version


DIALECT_CAPABILITIES: dict[str, AutoincrementCapability] = {
    "oracle": SequenceAutoincrement(min_server_version=(12, 1, 0)),
}


def capability_for(dialect: Dialect) -> AutoincrementCapability:
    """
    Look up the auto-increment capability of a dialect.

    Args:
        dialect: SQLAlchemy dialect of the active engine

    Returns:
        AutoincrementCapability: Registered capability, native otherwise
    """
    return DIALECT_CAPABILITIES.get(dialect.name, NativeAutoincrement())
