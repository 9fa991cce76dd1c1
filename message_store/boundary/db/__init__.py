"""
Database boundary layer: message table schema, SQL store and connection management.

Exports:
  - get_engine(): Engine built from settings
  - build_message_table(): Message table definition
  - capability_for(): Dialect auto-increment capability lookup
  - DbalMessageStore: SQL table-backed message store
  - create_message_store(): Store factory wired from settings

Dependencies: sqlalchemy, message_store.configs
System role: Database adapter providing persistent storage for chat history
"""

from message_store.boundary.db.connection import get_engine
from message_store.boundary.db.dialects import (
    AutoincrementCapability,
    NativeAutoincrement,
    SequenceAutoincrement,
    capability_for,
)
from message_store.boundary.db.schema import build_message_table
from message_store.boundary.db.CRUD import DbalMessageStore
from message_store.boundary.db.factory import create_message_store

__all__ = [
    # Connection
    "get_engine",
    # Schema
    "build_message_table",
    "AutoincrementCapability",
    "NativeAutoincrement",
    "SequenceAutoincrement",
    "capability_for",
    # Stores
    "DbalMessageStore",
    "create_message_store",
]
