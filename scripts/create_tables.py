"""Create the regular_news and subscribed_news tables if missing."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from sqlalchemy import inspect

load_dotenv()

from rds_postgres.connection import ensure_tables, get_engine

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    ensure_tables()
    table_names = inspect(get_engine()).get_table_names()
    logger.info("Tables present: %s", ", ".join(sorted(table_names)))


if __name__ == "__main__":
    main()
