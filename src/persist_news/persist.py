"""Persist an aggregation run as a single transaction."""

import logging

from ingest_news.models import AggregatedResult
from persist_news.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def persist(result: AggregatedResult, unit_of_work: UnitOfWork) -> tuple[int, int]:
    """
    Insert all regular and subscribed articles, all or nothing.

    Existing ids are left untouched. On any failure the whole transaction
    is rolled back and the error re-raised; the unit of work is closed on
    every path.

    Args:
        result: Aggregated articles to store
        unit_of_work: Transaction boundary over both collections

    Returns:
        Tuple of (regular_inserted, subscribed_inserted)
    """
    regular_inserted = 0
    subscribed_inserted = 0

    unit_of_work.begin()
    try:
        for article in result.regular_data:
            regular_inserted += unit_of_work.insert_regular(article)

        for article in result.subscribed_data:
            subscribed_inserted += unit_of_work.insert_subscribed(article)

        unit_of_work.commit()
    except Exception as e:
        unit_of_work.rollback()
        logger.error(
            "Database error: %s (rolled back %d regular, %d subscribed articles)",
            e,
            len(result.regular_data),
            len(result.subscribed_data),
        )
        raise
    finally:
        unit_of_work.close()

    logger.info(
        "Stored %d new regular and %d new subscribed articles",
        regular_inserted,
        subscribed_inserted,
    )
    return regular_inserted, subscribed_inserted
