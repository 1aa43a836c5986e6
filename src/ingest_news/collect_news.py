"""Walk all provider pages for a date range and aggregate the articles."""

import logging
from datetime import date
from typing import Optional, Union

import requests

from common.datetime import normalize_date, today_iso
from ingest_news.config import ProviderConfig
from ingest_news.errors import PaginationLimitError
from ingest_news.fetch_page import fetch_page
from ingest_news.filter_by_date import filter_by_date
from ingest_news.models import AggregatedResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 500

DateLike = Union[str, date, None]


def collect_all(
    start_date: DateLike = None,
    end_date: DateLike = None,
    *,
    provider: Optional[ProviderConfig] = None,
    max_pages: Optional[int] = None,
    session: Optional[requests.Session] = None,
) -> AggregatedResult:
    """
    Fetch every page for [start_date, end_date] and return the filtered union.

    Missing dates default to today. Pages are fetched one after another
    until the provider reports its last page; a failure on any page aborts
    the run. Raises PaginationLimitError if more than max_pages would be
    needed.
    """
    start = _resolve_date(start_date, "start_date")
    end = _resolve_date(end_date, "end_date")
    max_pages = DEFAULT_MAX_PAGES if max_pages is None else max_pages
    if max_pages < 1:
        raise ValueError(f"max_pages must be >= 1, got {max_pages}")

    logger.info("Collecting articles from %s to %s", start, end)

    result = AggregatedResult()
    page = 1
    while True:
        if page > max_pages:
            logger.error("Pagination exceeded %d pages for %s to %s", max_pages, start, end)
            raise PaginationLimitError(max_pages)

        page_result = fetch_page(page, start, end, provider=provider, session=session)

        regular = filter_by_date(page_result.regular, start, end)
        subscribed = filter_by_date(page_result.subscribed, start, end)
        result.regular_data.extend(regular)
        result.subscribed_data.extend(subscribed)

        pagination = page_result.pagination
        logger.info(
            "Page %d/%d: kept %d/%d regular, %d/%d subscribed",
            pagination.current_page,
            pagination.pages,
            len(regular),
            len(page_result.regular),
            len(subscribed),
            len(page_result.subscribed),
        )

        if pagination.current_page >= pagination.pages:
            break
        page += 1

    _dedupe(result)
    logger.info(
        "Collected %d regular and %d subscribed articles over %d pages",
        len(result.regular_data),
        len(result.subscribed_data),
        page,
    )
    return result


def _resolve_date(value: DateLike, field_name: str) -> str:
    if value is None or value == "":
        return today_iso()
    normalized = normalize_date(value)
    if normalized is None:
        raise ValueError(f"{field_name} must be YYYY-MM-DD, got {value!r}")
    return normalized


def _dedupe(result: AggregatedResult) -> None:
    """Drop repeated ids, and regular articles that are also subscribed."""
    subscribed_ids = set()
    subscribed = []
    for article in result.subscribed_data:
        if article.id in subscribed_ids:
            logger.warning("Dropping duplicate subscribed article %s", article.id)
            continue
        subscribed_ids.add(article.id)
        subscribed.append(article)

    seen_ids = set()
    regular = []
    for article in result.regular_data:
        if article.id in subscribed_ids:
            logger.warning("Dropping regular article %s also listed as subscribed", article.id)
            continue
        if article.id in seen_ids:
            logger.warning("Dropping duplicate regular article %s", article.id)
            continue
        seen_ids.add(article.id)
        regular.append(article)

    result.regular_data = regular
    result.subscribed_data = subscribed
