"""Ingestion endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ingest_news.config import Config, get_config
from news_api.models.article import ErrorResponse, IngestResponse
from news_api.services.ingest_service import IngestService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ingest"])

INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}


def get_ingest_service(config: Annotated[Config, Depends(get_config)]) -> IngestService:
    """Dependency to get ingest service."""
    return IngestService(config)


@router.get(
    "/",
    response_model=IngestResponse,
    responses={500: {"model": ErrorResponse}},
)
def ingest(
    service: Annotated[IngestService, Depends(get_ingest_service)],
    start_date: Annotated[str | None, Query(alias="startDate", description="First day (YYYY-MM-DD)")] = None,
    end_date: Annotated[str | None, Query(alias="endDate", description="Last day (YYYY-MM-DD)")] = None,
):
    """Fetch, store and return news for the date range.

    Missing or empty dates default to today. A malformed date, or any
    upstream or storage failure, returns a generic 500.
    """
    try:
        result = service.run(start_date, end_date)
    except Exception:
        logger.exception("Ingestion failed for %r to %r", start_date, end_date)
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)

    return IngestResponse(**result.to_dict())
