"""Transactional units of work for storing ingested articles."""

import threading
from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, Optional

from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.orm import Session

from ingest_news.config import Config
from ingest_news.models import RegularArticle, SubscribedArticle
from rds_postgres.models import RegularNews, SubscribedNews


class UnitOfWork(ABC):
    """One transaction over the regular and subscribed news collections.

    Inserts are insert-if-absent: they return 1 when a row was written and 0
    when a row with the same id already exists.
    """

    @abstractmethod
    def begin(self) -> None: ...

    @abstractmethod
    def insert_regular(self, article: RegularArticle) -> int: ...

    @abstractmethod
    def insert_subscribed(self, article: SubscribedArticle) -> int: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...


def _to_date(value: str) -> date | None:
    return date.fromisoformat(value) if value else None


class SqlAlchemyUnitOfWork(UnitOfWork):
    """PostgreSQL unit of work using ON CONFLICT (id) DO NOTHING inserts."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory
        self._session: Optional[Session] = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work has not begun")
        return self._session

    def begin(self) -> None:
        self._session = self._session_factory()

    def insert_regular(self, article: RegularArticle) -> int:
        stmt = insert(RegularNews.__table__).values(
            id=article.id,
            title=article.title,
            description=article.description,
            date=_to_date(article.date),
            commodities=article.commodities,
        ).on_conflict_do_nothing(index_elements=["id"])
        result = self.session.execute(stmt)
        return result.rowcount or 0

    def insert_subscribed(self, article: SubscribedArticle) -> int:
        stmt = insert(SubscribedNews.__table__).values(
            id=article.id,
            title=article.title,
            description=article.description,
            date=_to_date(article.date),
            commodities=article.commodities,
            logourl=article.logo_url,
        ).on_conflict_do_nothing(index_elements=["id"])
        result = self.session.execute(stmt)
        return result.rowcount or 0

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None


class MemoryStore:
    """Process-local stand-in for the news tables, keyed by article id."""

    def __init__(self):
        self.regular_news: dict[str, RegularArticle] = {}
        self.subscribed_news: dict[str, SubscribedArticle] = {}
        self.lock = threading.Lock()


class MemoryUnitOfWork(UnitOfWork):
    """Stages writes and applies them to a MemoryStore on commit."""

    def __init__(self, store: MemoryStore):
        self.store = store
        self._regular: dict[str, RegularArticle] = {}
        self._subscribed: dict[str, SubscribedArticle] = {}

    def begin(self) -> None:
        self._regular = {}
        self._subscribed = {}

    def insert_regular(self, article: RegularArticle) -> int:
        if article.id in self.store.regular_news or article.id in self._regular:
            return 0
        self._regular[article.id] = article
        return 1

    def insert_subscribed(self, article: SubscribedArticle) -> int:
        if article.id in self.store.subscribed_news or article.id in self._subscribed:
            return 0
        self._subscribed[article.id] = article
        return 1

    def commit(self) -> None:
        with self.store.lock:
            for article_id, article in self._regular.items():
                self.store.regular_news.setdefault(article_id, article)
            for article_id, article in self._subscribed.items():
                self.store.subscribed_news.setdefault(article_id, article)
        self.begin()

    def rollback(self) -> None:
        self.begin()

    def close(self) -> None:
        self.begin()


# Shared store for the "memory" storage backend
_memory_store = MemoryStore()


def get_memory_store() -> MemoryStore:
    return _memory_store


def build_unit_of_work(config: Config) -> UnitOfWork:
    """Create the unit of work for the configured storage backend."""
    if config.storage.backend == "memory":
        return MemoryUnitOfWork(get_memory_store())

    from rds_postgres.connection import get_session_factory

    return SqlAlchemyUnitOfWork(get_session_factory())
