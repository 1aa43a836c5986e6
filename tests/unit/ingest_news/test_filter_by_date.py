"""Tests for ingest_news.filter_by_date module."""

from ingest_news.filter_by_date import filter_by_date
from ingest_news.models import RegularArticle, SubscribedArticle


def _article(article_id: str, article_date: str) -> RegularArticle:
    return RegularArticle(id=article_id, title="T", description="D", date=article_date)


class TestFilterByDate:
    def test_keeps_inclusive_bounds(self) -> None:
        articles = [
            _article("before", "2024-04-30"),
            _article("start", "2024-05-01"),
            _article("middle", "2024-05-02"),
            _article("end", "2024-05-03"),
            _article("after", "2024-05-04"),
        ]
        result = filter_by_date(articles, "2024-05-01", "2024-05-03")
        assert [a.id for a in result] == ["start", "middle", "end"]

    def test_normalizes_timestamps(self) -> None:
        articles = [
            _article("late", "2024-05-03T23:59:59Z"),
            _article("next_day_utc", "2024-05-03T22:00:00-05:00"),
        ]
        result = filter_by_date(articles, "2024-05-01", "2024-05-03")
        assert [a.id for a in result] == ["late"]

    def test_preserves_order(self) -> None:
        articles = [_article("b", "2024-05-02"), _article("a", "2024-05-01")]
        result = filter_by_date(articles, "2024-05-01", "2024-05-02")
        assert [a.id for a in result] == ["b", "a"]

    def test_drops_unparseable_dates(self) -> None:
        articles = [_article("bad", "soon"), _article("empty", ""), _article("ok", "2024-05-01")]
        result = filter_by_date(articles, "2024-05-01", "2024-05-01")
        assert [a.id for a in result] == ["ok"]

    def test_reversed_range_is_empty(self) -> None:
        articles = [_article("a", "2024-05-02")]
        assert filter_by_date(articles, "2024-05-03", "2024-05-01") == []

    def test_works_for_subscribed_articles(self) -> None:
        article = SubscribedArticle(
            id="s1", title="T", description="D", date="2024-05-01", logo_url="https://x/company_logo/1"
        )
        assert filter_by_date([article], "2024-05-01", "2024-05-01") == [article]

    def test_empty_input(self) -> None:
        assert filter_by_date([], "2024-05-01", "2024-05-01") == []
