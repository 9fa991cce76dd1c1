"""
Test suite for the message table script.

Runs main() against a SQLite file configured through the environment.

System role: Verification of schema initialization entrypoint
"""

from unittest.mock import patch

import pytest
from langchain_core.messages import HumanMessage
from sqlalchemy import create_engine, inspect

from message_store.boundary.db.create_tables import main
from message_store.boundary.db.factory import create_message_store
from message_store.core.message_bag import MessageBag


@pytest.fixture
def database_url(tmp_path, monkeypatch) -> str:
    """Configure a SQLite file database and silence logging setup."""
    url = f"sqlite:///{tmp_path / 'script.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    with patch("message_store.boundary.db.create_tables.configure_logging"):
        yield url


class TestCreateTablesMain:
    """Test suite for create_tables.main()."""

    def test_main_should_create_configured_table(self, database_url: str) -> None:
        """Test default invocation creates the table named in settings."""
        # Act
        main([])

        # Assert
        engine = create_engine(database_url)
        assert inspect(engine).has_table("chat_messages")
        engine.dispose()

    def test_main_should_honor_table_argument(self, database_url: str) -> None:
        """Test --table overrides the configured name."""
        # Act
        main(["--table", "support_chat"])

        # Assert
        engine = create_engine(database_url)
        assert inspect(engine).get_table_names() == ["support_chat"]
        engine.dispose()

    def test_main_drop_should_empty_table(self, database_url: str) -> None:
        """Test --drop deletes stored messages and keeps the table."""
        # Arrange
        main([])
        store = create_message_store()
        store.save(MessageBag(HumanMessage(content="hi")))

        # Act
        main(["--drop"])

        # Assert
        assert len(store.load()) == 0
        assert inspect(store.engine).has_table("chat_messages")
        store.engine.dispose()
