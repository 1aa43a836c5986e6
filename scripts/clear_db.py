"""Remove all rows from the regular and subscribed news tables."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from sqlalchemy import delete

load_dotenv()

from rds_postgres.connection import get_session
from rds_postgres.models import RegularNews, SubscribedNews

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def clear_db() -> None:
    with get_session() as session:
        regular_deleted = session.execute(delete(RegularNews)).rowcount or 0
        subscribed_deleted = session.execute(delete(SubscribedNews)).rowcount or 0
        session.commit()

    logger.info(
        "Deleted %d regular_news, %d subscribed_news",
        regular_deleted,
        subscribed_deleted,
    )


def main() -> None:
    clear_db()


if __name__ == "__main__":
    main()
