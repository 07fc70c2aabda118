from __future__ import annotations

import argparse
import asyncio
import sys

from backend.app.core.config import get_settings
from backend.app.core.logging import configure_logging
from backend.app.db.session import dispose_engine, init_db
from backend.app.services.article_store import ArticleStore
from backend.app.services.sync_service import get_sync_service


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="ChillVibes content sync tooling.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create database tables")
    subparsers.add_parser("sync", help="Run one full sync cycle (cleanup, fetch, balance, upsert)")

    generate = subparsers.add_parser("generate", help="Populate articles from the content generators")
    generate.add_argument(
        "--no-evergreen",
        action="store_true",
        help="Only generate the daily articles",
    )

    subparsers.add_parser("status", help="Show article counts per category")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> int:
    await init_db()
    try:
        if args.command == "init-db":
            print("Database schema ready.")
            return 0

        if args.command == "status":
            status = await ArticleStore().get_status()
            print(f"Total articles: {status.total_articles} ({status.realtime_articles} real-time)")
            for category, count in status.categories.items():
                print(f"  {category}: {count}")
            return 0

        service = get_sync_service()
        if args.command == "sync":
            result = await service.run_cycle()
        else:
            result = await service.generate_content(include_evergreen=not args.no_evergreen)
        print(result.message)
        return 0 if result.success else 1
    finally:
        await dispose_engine()


def main() -> int:
    args = parse_args(sys.argv[1:])
    settings = get_settings()
    configure_logging(settings.log_level, json_format=settings.log_json, log_file=settings.log_file)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    sys.exit(main())
