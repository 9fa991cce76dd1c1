"""
Message store factory.

Builds the default collaborators once, at the call site, and hands them to
the store explicitly.

Dependencies: sqlalchemy, message_store.configs
System role: Composition root for DbalMessageStore
"""

from sqlalchemy.engine import Engine

from message_store.boundary.db.connection import get_engine
from message_store.boundary.db.CRUD.dbal_message_store import DbalMessageStore
from message_store.configs import Settings, get_settings
from message_store.core.clock import Clock, MonotonicClock
from message_store.core.codec import MessageCodec


def create_message_store(
    table_name: str | None = None,
    engine: Engine | None = None,
    codec: MessageCodec | None = None,
    clock: Clock | None = None,
    settings: Settings | None = None,
) -> DbalMessageStore:
    """
    Create a DbalMessageStore, filling unset collaborators from settings.

    Args:
        table_name: Table name (defaults to settings.message_store.table_name)
        engine: Engine to use (defaults to get_engine(settings))
        codec: Message codec (defaults to MessageCodec())
        clock: Time source (defaults to MonotonicClock())
        settings: Settings to read defaults from (defaults to get_settings())

    Returns:
        DbalMessageStore: Store wired with all four collaborators

    Usage:
        store = create_message_store()
        store.setup()
        store.save(MessageBag(HumanMessage(content="hi")))
    """
    settings = settings or get_settings()

    return DbalMessageStore(
        table_name=table_name or settings.message_store.table_name,
        engine=engine if engine is not None else get_engine(settings),
        codec=codec or MessageCodec(),
        clock=clock or MonotonicClock(),
    )
