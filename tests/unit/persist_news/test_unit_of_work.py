"""Tests for persist_news.unit_of_work module."""

from datetime import date
from unittest.mock import Mock, patch

import pytest
from sqlalchemy.dialects import postgresql

from ingest_news.config import Config, StorageConfig
from ingest_news.models import RegularArticle, SubscribedArticle
from persist_news.unit_of_work import (
    MemoryStore,
    MemoryUnitOfWork,
    SqlAlchemyUnitOfWork,
    build_unit_of_work,
)


def _regular(article_id: str = "r1") -> RegularArticle:
    return RegularArticle(id=article_id, title="T", description="D", date="2024-05-01", commodities=["Gold"])


def _subscribed(article_id: str = "s1") -> SubscribedArticle:
    return SubscribedArticle(
        id=article_id, title="T", description="D", date="2024-05-01", logo_url="https://p.test/company_logo/9"
    )


def _compiled_sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


def _sqlalchemy_uow(rowcount=1):
    session = Mock()
    session.execute.return_value.rowcount = rowcount
    uow = SqlAlchemyUnitOfWork(lambda: session)
    uow.begin()
    return uow, session


class TestSqlAlchemyUnitOfWork:
    def test_regular_insert_ignores_conflicts(self) -> None:
        uow, session = _sqlalchemy_uow()

        assert uow.insert_regular(_regular()) == 1

        stmt = session.execute.call_args.args[0]
        sql = _compiled_sql(stmt)
        assert "INSERT INTO regular_news" in sql
        assert "ON CONFLICT (id) DO NOTHING" in sql

    def test_regular_insert_values(self) -> None:
        uow, session = _sqlalchemy_uow()
        uow.insert_regular(_regular())

        params = session.execute.call_args.args[0].compile(dialect=postgresql.dialect()).params
        assert params["id"] == "r1"
        assert params["date"] == date(2024, 5, 1)
        assert params["commodities"] == ["Gold"]

    def test_subscribed_insert_carries_logo(self) -> None:
        uow, session = _sqlalchemy_uow()

        uow.insert_subscribed(_subscribed())

        stmt = session.execute.call_args.args[0]
        sql = _compiled_sql(stmt)
        assert "INSERT INTO subscribed_news" in sql
        assert "logourl" in sql
        assert "ON CONFLICT (id) DO NOTHING" in sql
        assert stmt.compile(dialect=postgresql.dialect()).params["logourl"] == "https://p.test/company_logo/9"

    def test_conflict_returns_zero(self) -> None:
        uow, _ = _sqlalchemy_uow(rowcount=0)
        assert uow.insert_regular(_regular()) == 0

    def test_missing_rowcount_returns_zero(self) -> None:
        uow, _ = _sqlalchemy_uow(rowcount=None)
        assert uow.insert_subscribed(_subscribed()) == 0

    def test_commit_rollback_close_delegate(self) -> None:
        uow, session = _sqlalchemy_uow()
        uow.commit()
        uow.rollback()
        uow.close()
        session.commit.assert_called_once()
        session.rollback.assert_called_once()
        session.close.assert_called_once()

    def test_use_before_begin_raises(self) -> None:
        uow = SqlAlchemyUnitOfWork(Mock())
        with pytest.raises(RuntimeError):
            uow.insert_regular(_regular())

    def test_close_without_begin_is_noop(self) -> None:
        factory = Mock()
        SqlAlchemyUnitOfWork(factory).close()
        factory.assert_not_called()


class TestMemoryUnitOfWork:
    def test_writes_visible_after_commit_only(self) -> None:
        store = MemoryStore()
        uow = MemoryUnitOfWork(store)
        uow.begin()
        uow.insert_regular(_regular())
        assert store.regular_news == {}
        uow.commit()
        assert set(store.regular_news) == {"r1"}

    def test_rollback_discards(self) -> None:
        store = MemoryStore()
        uow = MemoryUnitOfWork(store)
        uow.begin()
        uow.insert_regular(_regular())
        uow.insert_subscribed(_subscribed())
        uow.rollback()
        uow.commit()
        assert store.regular_news == {}
        assert store.subscribed_news == {}

    def test_duplicate_in_same_transaction(self) -> None:
        uow = MemoryUnitOfWork(MemoryStore())
        uow.begin()
        assert uow.insert_regular(_regular()) == 1
        assert uow.insert_regular(_regular()) == 0

    def test_existing_id_not_inserted(self) -> None:
        store = MemoryStore()
        store.subscribed_news["s1"] = _subscribed()
        uow = MemoryUnitOfWork(store)
        uow.begin()
        assert uow.insert_subscribed(_subscribed()) == 0

    def test_collections_are_independent(self) -> None:
        uow = MemoryUnitOfWork(MemoryStore())
        uow.begin()
        assert uow.insert_regular(_regular("x")) == 1
        assert uow.insert_subscribed(_subscribed("x")) == 1


class TestBuildUnitOfWork:
    def test_memory_backend(self) -> None:
        config = Config(storage=StorageConfig(backend="memory"))
        assert isinstance(build_unit_of_work(config), MemoryUnitOfWork)

    def test_memory_backend_shares_store(self) -> None:
        config = Config(storage=StorageConfig(backend="memory"))
        assert build_unit_of_work(config).store is build_unit_of_work(config).store

    @patch("rds_postgres.connection.get_session_factory")
    def test_postgres_backend(self, mock_factory) -> None:
        uow = build_unit_of_work(Config())
        assert isinstance(uow, SqlAlchemyUnitOfWork)
        mock_factory.assert_called_once()
