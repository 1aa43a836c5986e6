"""Print counts of regular and subscribed news in the RDS database."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from sqlalchemy import func, select

load_dotenv()

from rds_postgres.connection import get_session
from rds_postgres.models import RegularNews, SubscribedNews

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def get_counts() -> tuple[int, int]:
    """Return (regular_count, subscribed_count)."""
    with get_session() as session:
        regular_count = session.execute(select(func.count()).select_from(RegularNews)).scalar_one()
        subscribed_count = session.execute(select(func.count()).select_from(SubscribedNews)).scalar_one()
    return regular_count, subscribed_count


def main() -> None:
    regular_count, subscribed_count = get_counts()
    print(f"Regular news: {regular_count}")
    print(f"Subscribed news: {subscribed_count}")


if __name__ == "__main__":
    main()
