"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite engine, controllable clock, message store, sample messages
Dependencies: pytest, sqlalchemy, langchain_core
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta, timezone

import pytest
from langchain_core.messages import AIMessage, HumanMessage
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from message_store.boundary.db.CRUD.dbal_message_store import DbalMessageStore
from message_store.configs import get_settings
from message_store.core.codec import MessageCodec


class MockClock:
    """Clock frozen at a given unix timestamp until moved explicitly."""

    def __init__(self, timestamp: float = 100) -> None:
        self._now = datetime.fromtimestamp(timestamp, tz=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def sleep(self, seconds: float) -> None:
        self._now += timedelta(seconds=seconds)

    def set(self, timestamp: float) -> None:
        self._now = datetime.fromtimestamp(timestamp, tz=timezone.utc)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine():
    """
    Create in-memory SQLite engine for testing.

    StaticPool keeps a single connection so every checkout sees the same database.

    Yields:
        Engine: Test database engine, disposed after the test
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def clock() -> MockClock:
    """Provide clock frozen at t=100."""
    return MockClock(100)


@pytest.fixture
def codec() -> MessageCodec:
    """Provide message codec."""
    return MessageCodec()


@pytest.fixture
def store(engine, codec: MessageCodec, clock: MockClock) -> DbalMessageStore:
    """Provide message store on the chat_messages table (not set up)."""
    return DbalMessageStore("chat_messages", engine, codec, clock)


@pytest.fixture
def ready_store(store: DbalMessageStore) -> DbalMessageStore:
    """Provide message store with its table created."""
    store.setup()
    return store


@pytest.fixture
def user_message() -> HumanMessage:
    """Provide sample user message."""
    return HumanMessage(content="hi")


@pytest.fixture
def assistant_message() -> AIMessage:
    """Provide sample assistant message."""
    return AIMessage(content="hello")
