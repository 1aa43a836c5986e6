"""Article Pydantic models."""

from pydantic import BaseModel, Field


class RegularArticleResponse(BaseModel):
    """Openly visible article."""

    id: str
    title: str
    description: str
    date: str  # YYYY-MM-DD
    commodities: list[str] = Field(default_factory=list)


class SubscribedArticleResponse(RegularArticleResponse):
    """Subscriber-only article with its company logo."""

    logoUrl: str


class IngestResponse(BaseModel):
    """Articles collected and stored by one ingestion run."""

    regularData: list[RegularArticleResponse] = Field(default_factory=list)
    subscribedData: list[SubscribedArticleResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
