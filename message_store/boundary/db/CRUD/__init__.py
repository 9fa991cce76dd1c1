"""
Store implementations on top of the database boundary.

Exports:
  - DbalMessageStore: SQL table-backed message store
"""

from message_store.boundary.db.CRUD.dbal_message_store import DbalMessageStore

__all__ = ["DbalMessageStore"]
