"""Service running one ingestion: collect every page, then persist."""

import logging
from typing import Callable

from ingest_news.collect_news import DateLike, collect_all
from ingest_news.config import Config
from ingest_news.models import AggregatedResult
from persist_news.persist import persist
from persist_news.unit_of_work import UnitOfWork, build_unit_of_work

logger = logging.getLogger(__name__)


class IngestService:
    """Aggregates provider pages for a date range and stores the result."""

    def __init__(
        self,
        config: Config,
        unit_of_work_factory: Callable[[Config], UnitOfWork] = build_unit_of_work,
    ):
        self.config = config
        self._unit_of_work_factory = unit_of_work_factory

    def run(self, start_date: DateLike = None, end_date: DateLike = None) -> AggregatedResult:
        """Collect and persist articles; missing or empty dates default to today.

        Errors from either step propagate unchanged.
        """
        result = collect_all(
            start_date,
            end_date,
            provider=self.config.provider,
            max_pages=self.config.pagination.max_pages,
        )
        persist(result, self._unit_of_work_factory(self.config))
        return result
