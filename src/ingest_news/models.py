"""Data models for the news ingestion stage."""

from dataclasses import dataclass, field


@dataclass
class RegularArticle:
    """Openly visible article as returned by the provider."""
    id: str
    title: str
    description: str
    date: str  # YYYY-MM-DD
    commodities: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "commodities": list(self.commodities),
        }


@dataclass
class SubscribedArticle:
    """Subscriber-only article, carrying the company logo URL."""
    id: str
    title: str
    description: str
    date: str  # YYYY-MM-DD
    logo_url: str
    commodities: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "commodities": list(self.commodities),
            "logoUrl": self.logo_url,
        }


@dataclass
class Pagination:
    """Pagination metadata reported by the provider for one page."""
    current_page: int
    pages: int


@dataclass
class PageResult:
    """One normalized provider page."""
    regular: list[RegularArticle]
    subscribed: list[SubscribedArticle]
    pagination: Pagination


@dataclass
class AggregatedResult:
    """Date-filtered union of all pages for one aggregation run."""
    regular_data: list[RegularArticle] = field(default_factory=list)
    subscribed_data: list[SubscribedArticle] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "regularData": [article.to_dict() for article in self.regular_data],
            "subscribedData": [article.to_dict() for article in self.subscribed_data],
        }
