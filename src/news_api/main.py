"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from common.cli_helpers import setup_logging
from ingest_news.config import get_config
from news_api.routers import health, ingest

setup_logging()

logger = logging.getLogger(__name__)


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer failures raised outside a route body (e.g. in dependencies)."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=ingest.INTERNAL_ERROR_BODY)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Mining News Ingest",
        description="Fetches regular and subscribed mining news for a date range and stores them",
        version="1.0.0",
    )
    app.add_exception_handler(Exception, internal_error_handler)
    app.include_router(health.router)
    app.include_router(ingest.router)
    return app


app = create_app()


def main():
    """Run the API server."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "news_api.main:app",
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
