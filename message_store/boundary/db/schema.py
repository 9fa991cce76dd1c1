"""
Message table definition.

Dependencies: sqlalchemy
System role: DDL source for the message store table
"""

from sqlalchemy import BigInteger, Column, Integer, MetaData, Sequence, Table, Text

TABLE_NAME_INFO_KEY = "message_store_table_name"

# SQLite only auto-increments an INTEGER PRIMARY KEY (rowid alias)
ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


def build_message_table(
    metadata: MetaData,
    table_name: str,
    sequence_name: str | None = None,
) -> Table:
    """
    Register the message table on `metadata`.

    Columns: id (BIGINT, auto-increment primary key), messages (TEXT),
    added_at (INTEGER unix timestamp), all NOT NULL.

    Args:
        metadata: MetaData the table (and sequence, if any) is added to
        table_name: Name of the table to create
        sequence_name: When given, a sequence of that name is registered and
            the id column defaults to its next value instead of native auto-increment

    Returns:
        Table: The registered table
    """
    if sequence_name is not None:
        sequence = Sequence(sequence_name, metadata=metadata)
        id_column = Column(
            "id",
            ID_TYPE,
            primary_key=True,
            autoincrement=False,
            nullable=False,
            server_default=sequence.next_value(),
        )
    else:
        id_column = Column(
            "id",
            ID_TYPE,
            primary_key=True,
            autoincrement=True,
            nullable=False,
        )

    return Table(
        table_name,
        metadata,
        id_column,
        Column("messages", Text, nullable=False),
        Column("added_at", Integer, nullable=False),
        info={TABLE_NAME_INFO_KEY: table_name},
    )
