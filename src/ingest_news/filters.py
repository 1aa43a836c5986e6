"""Filter payload sent to the provider with every page request."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Bounds:
    min: int = 0
    max: int = 10000

    def to_payload(self) -> dict:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class ProviderFilters:
    """Filter dimensions understood by the provider.

    Defaults match everything; only the date range varies per request.
    """
    country: str = ""
    state: str = ""
    area: str = ""
    commodity: tuple[str, ...] = ()
    type: tuple[str, ...] = ()
    article: str = ""
    project: str = ""
    company: str = ""
    ticker: str = ""
    free_text_search: str = ""
    country_where: str = "all"
    state_where: str = "all"
    area_where: str = "all"
    commodities_where: str = "all"
    marketcap: Bounds = field(default_factory=Bounds)
    outstanding_shares: Bounds = field(default_factory=Bounds)
    mode: str = "normal"

    def to_payload(self, from_date: str, to_date: str) -> dict:
        """Build the provider's ``filters`` object for a date range."""
        return {
            "country": self.country,
            "state": self.state,
            "area": self.area,
            "commodity": list(self.commodity),
            "type": list(self.type),
            "article": self.article,
            "project": self.project,
            "company": self.company,
            "ticker": self.ticker,
            "free-text-search": self.free_text_search,
            "date": {
                "fromDate": from_date,
                "toDate": to_date,
            },
            "countryWhere": self.country_where,
            "stateWhere": self.state_where,
            "areaWhere": self.area_where,
            "commoditiesWhere": self.commodities_where,
            "marketcap": self.marketcap.to_payload(),
            "outstandingshares": self.outstanding_shares.to_payload(),
            "mode": self.mode,
        }


DEFAULT_FILTERS = ProviderFilters()


def build_request_payload(
    page: int,
    start_date: str,
    end_date: str,
    filters: ProviderFilters = DEFAULT_FILTERS,
) -> dict:
    """Request body for one provider page."""
    return {
        "page": page,
        "filters": filters.to_payload(start_date, end_date),
    }
