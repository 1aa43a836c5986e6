"""Errors raised while ingesting news from the provider."""


class IngestError(Exception):
    """Base class for ingestion failures."""


class UpstreamFetchError(IngestError):
    """Provider unreachable, returned a non-success status, or a malformed body."""


class PaginationLimitError(IngestError):
    """Provider pagination did not terminate within the configured page limit."""

    def __init__(self, max_pages: int):
        super().__init__(f"Pagination did not terminate within {max_pages} pages")
        self.max_pages = max_pages
