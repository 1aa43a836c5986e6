"""Print rows from one of the news tables."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

TABLES = ("regular_news", "subscribed_news")


def _format_value(value: object, max_len: int = 100) -> str:
    if isinstance(value, str) and len(value) > max_len:
        return f"{value[:max_len]}..."
    return str(value) if value is not None else "None"


def main() -> None:
    parser = argparse.ArgumentParser(description="Print rows from a news table.")
    parser.add_argument("--table", required=True, choices=TABLES, help="Table name to print")
    parser.add_argument("--limit", type=int, default=50, help="Max rows to print")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    logger = logging.getLogger(__name__)

    load_dotenv()

    from sqlalchemy import text

    from rds_postgres.connection import get_session

    stmt = text(f"SELECT * FROM {args.table} ORDER BY date DESC LIMIT :limit")

    with get_session() as session:
        rows = session.execute(stmt, {"limit": args.limit}).mappings().all()

    logger.info("Fetched %d rows from %s", len(rows), args.table)
    for row in rows:
        formatted = {key: _format_value(value) for key, value in dict(row).items()}
        for key in sorted(formatted.keys()):
            print(f"{key}: {formatted[key]}")
        print("-" * 40)


if __name__ == "__main__":
    main()
