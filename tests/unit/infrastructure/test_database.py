"""Tests for engine construction."""

import sqlite3
from contextlib import closing
from pathlib import Path

import pytest
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from rebook.database import build_engine


class TestBuildEngine:
    """Test suite for build_engine."""

    @pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:"])
    def test_memory_sqlite_shares_one_connection(self, url: str) -> None:
        engine = build_engine(url)

        assert isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_file_sqlite_uses_connection_pool(self, tmp_path: Path) -> None:
        engine = build_engine(f"sqlite:///{tmp_path / 'board.db'}")

        assert not isinstance(engine.pool, StaticPool)
        with engine.connect() as first, engine.connect() as second:
            assert first.connection.dbapi_connection is not second.connection.dbapi_connection
        engine.dispose()

    def test_file_sqlite_transaction_holds_write_lock(self, tmp_path: Path) -> None:
        """Test that an open transaction blocks other writers from the start."""
        db_path = tmp_path / "board.db"
        engine = build_engine(f"sqlite:///{db_path}")

        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

            with closing(sqlite3.connect(db_path, timeout=0)) as other:
                with pytest.raises(sqlite3.OperationalError, match="locked"):
                    other.execute("BEGIN IMMEDIATE")

            conn.rollback()
        engine.dispose()

    def test_released_after_commit(self, tmp_path: Path) -> None:
        db_path = tmp_path / "board.db"
        engine = build_engine(f"sqlite:///{db_path}")

        with engine.connect() as conn:
            conn.execute(text("CREATE TABLE t (x INTEGER)"))
            conn.commit()

        with closing(sqlite3.connect(db_path, timeout=0)) as other:
            other.execute("BEGIN IMMEDIATE")
            other.execute("INSERT INTO t VALUES (1)")
            other.commit()
        engine.dispose()
