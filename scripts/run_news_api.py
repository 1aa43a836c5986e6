#!/usr/bin/env python3
"""Launcher for the ingest API."""

from dotenv import load_dotenv


def main() -> None:
    load_dotenv()

    from news_api.main import main as run_api

    run_api()


if __name__ == "__main__":
    main()
