"""Fetch and normalize a single page of articles from the provider."""

import logging
from typing import Any, Optional

import requests

from common.datetime import normalize_date
from ingest_news.config import ProviderConfig
from ingest_news.errors import UpstreamFetchError
from ingest_news.filters import build_request_payload
from ingest_news.models import PageResult, Pagination, RegularArticle, SubscribedArticle

logger = logging.getLogger(__name__)


def fetch_page(
    page: int,
    start_date: str,
    end_date: str,
    *,
    provider: Optional[ProviderConfig] = None,
    session: Optional[requests.Session] = None,
) -> PageResult:
    """
    POST one page request to the provider and normalize the response.

    Raises UpstreamFetchError on transport errors, HTTP errors, non-JSON
    bodies, a non-success status, or a malformed body. No retries.
    """
    provider = provider or ProviderConfig()
    http = session or requests
    payload = build_request_payload(page, start_date, end_date)

    try:
        response = http.post(
            provider.api_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=provider.request_timeout,
        )
        response.raise_for_status()
        body = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("API call failed for page %d: %s", page, e)
        raise UpstreamFetchError("API request failed") from e

    return parse_page(body, provider)


def parse_page(body: Any, provider: ProviderConfig) -> PageResult:
    """Convert a decoded provider response into a PageResult."""
    if not isinstance(body, dict):
        raise UpstreamFetchError("API request failed: response is not an object")

    status = body.get("status")
    if status != "success":
        logger.error("Provider returned status %r", status)
        raise UpstreamFetchError(f"API request failed: status {status!r}")

    data = body.get("data")
    subscribed = body.get("subscribed") or []
    if not isinstance(data, list) or not isinstance(subscribed, list):
        raise UpstreamFetchError("API request failed: malformed article lists")

    try:
        pagination = Pagination(
            current_page=int(body["pagination"]["currentPage"]),
            pages=int(body["pagination"]["pages"]),
        )
        regular = [_to_regular(record) for record in data]
        subscribed_articles = [_to_subscribed(record, provider) for record in subscribed]
    except (KeyError, TypeError, ValueError) as e:
        raise UpstreamFetchError(f"API request failed: malformed response ({e})") from e

    return PageResult(
        regular=regular,
        subscribed=subscribed_articles,
        pagination=pagination,
    )


def _normalize_record_date(value) -> str:
    normalized = normalize_date(value)
    if normalized is not None:
        return normalized
    return "" if value is None else str(value)


def _to_commodities(value) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]


def _to_regular(record: dict) -> RegularArticle:
    return RegularArticle(
        id=str(record["id"]),
        title=record.get("title") or "",
        description=record.get("description") or "",
        date=_normalize_record_date(record.get("date")),
        commodities=_to_commodities(record.get("commodities")),
    )


def _to_subscribed(record: dict, provider: ProviderConfig) -> SubscribedArticle:
    return SubscribedArticle(
        id=str(record["id"]),
        title=record.get("title") or "",
        description=record.get("description") or "",
        date=_normalize_record_date(record.get("date")),
        logo_url=provider.logo_url(record.get("company_id")),
        commodities=_to_commodities(record.get("commodities")),
    )
