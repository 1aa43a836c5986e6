"""CLI for ingesting mining news for a date range."""

from __future__ import annotations

import argparse
import logging
from functools import partial

from dotenv import load_dotenv

from common.cli_helpers import parse_date, setup_logging
from common.local_io import save_jsonl_records_local
from ingest_news.collect_news import collect_all
from ingest_news.config import load_config, set_config

load_dotenv()

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ingest regular and subscribed news.")
    parser.add_argument(
        "--start-date",
        type=partial(parse_date, field_name="--start-date"),
        default=None,
        help="First day to include (YYYY-MM-DD, default: today).",
    )
    parser.add_argument(
        "--end-date",
        type=partial(parse_date, field_name="--end-date"),
        default=None,
        help="Last day to include (YYYY-MM-DD, default: today).",
    )
    parser.add_argument("--config", default=None, help="Config name in configs/ (default: prod).")
    parser.add_argument("--load-rds", action="store_true")
    parser.add_argument("--load-local", action="store_true")
    parser.add_argument("--output-dir", default="output")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_args(argv)

    config = load_config(args.config)
    set_config(config)

    result = collect_all(
        args.start_date,
        args.end_date,
        provider=config.provider,
        max_pages=config.pagination.max_pages,
    )

    if not result.regular_data and not result.subscribed_data:
        logger.warning("No articles collected")
        return

    if args.load_local:
        save_jsonl_records_local(
            [article.to_dict() for article in result.regular_data],
            "regular_news",
            args.output_dir,
        )
        save_jsonl_records_local(
            [article.to_dict() for article in result.subscribed_data],
            "subscribed_news",
            args.output_dir,
        )

    if args.load_rds:
        from persist_news.persist import persist
        from persist_news.unit_of_work import build_unit_of_work

        regular_inserted, subscribed_inserted = persist(result, build_unit_of_work(config))
        logger.info(
            "Loaded %d new regular and %d new subscribed articles",
            regular_inserted,
            subscribed_inserted,
        )


if __name__ == "__main__":
    main()
