"""
Message table creation script.

Runs setup() (or drop()) of the configured message store.

Dependencies: argparse (stdlib), message_store.configs
System role: Database schema initialization

Usage:
    python -m message_store.boundary.db.create_tables
    python -m message_store.boundary.db.create_tables --table support_chat
    python -m message_store.boundary.db.create_tables --drop
"""

import argparse
from collections.abc import Sequence

from message_store.boundary.db.factory import create_message_store
from message_store.configs import get_settings
from message_store.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


def create_message_table(table_name: str | None = None) -> None:
    """
    Create the message table if it is missing.

    Idempotent: an existing table remains unchanged.

    Args:
        table_name: Table to create (defaults to the configured table)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    store = create_message_store(table_name=table_name)
    store.setup()
    logger.info(f"Message table {store.table_name} is ready")


def empty_message_table(table_name: str | None = None) -> None:
    """
    Delete all stored messages, keeping the table.

    WARNING: Irreversible data loss.

    Args:
        table_name: Table to empty (defaults to the configured table)

    Raises:
        SQLAlchemyError: If database connection fails or the delete fails
    """
    store = create_message_store(table_name=table_name)
    store.drop()
    logger.info(f"Message table {store.table_name} emptied")


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Manage the chat message table")
    parser.add_argument("--table", help="Table name (defaults to MESSAGE_STORE_TABLE_NAME)")
    parser.add_argument("--drop", action="store_true", help="Delete all stored messages")
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)

    if args.drop:
        empty_message_table(args.table)
    else:
        create_message_table(args.table)


if __name__ == "__main__":
    main()
