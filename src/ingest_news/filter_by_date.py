"""Local date-range filter applied to every provider page."""

import logging
from typing import TypeVar

from common.datetime import normalize_date

logger = logging.getLogger(__name__)

ArticleT = TypeVar("ArticleT")


def filter_by_date(articles: list[ArticleT], start_date: str, end_date: str) -> list[ArticleT]:
    """Keep articles dated within [start_date, end_date], inclusive.

    Bounds are ``YYYY-MM-DD`` strings, so plain string comparison is
    chronological.
    """
    kept = []
    for article in articles:
        article_date = normalize_date(article.date)
        if article_date is None:
            logger.warning("Dropping article %s with unparseable date %r", article.id, article.date)
            continue
        if start_date <= article_date <= end_date:
            kept.append(article)
    return kept
