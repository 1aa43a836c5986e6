"""SQLAlchemy table models for ingested news."""

import datetime

from sqlalchemy import Date, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class RegularNews(Base):
    __tablename__ = "regular_news"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    date: Mapped[datetime.date | None] = mapped_column(Date)
    commodities: Mapped[list[str] | None] = mapped_column(ARRAY(Text))


class SubscribedNews(Base):
    __tablename__ = "subscribed_news"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    date: Mapped[datetime.date | None] = mapped_column(Date)
    commodities: Mapped[list[str] | None] = mapped_column(ARRAY(Text))
    # Postgres folds the unquoted logoUrl column name to logourl
    logo_url: Mapped[str | None] = mapped_column("logourl", Text)
