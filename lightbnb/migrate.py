"""
Schema and seed management for the LightBnB store.
Creates, drops, resets and seeds tables, and checks connectivity.

    python -m lightbnb.migrate create
    python -m lightbnb.migrate reset --confirm
"""

import asyncio
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from lightbnb.config import Settings, get_settings
from lightbnb.database import Store, create_store
from lightbnb.services.seed import seed_store

logger = logging.getLogger(__name__)


class MigrationManager:
    """Runs schema and seed commands against one store."""

    def __init__(self, store: Store, settings: Settings):
        self.store = store
        self.settings = settings

    async def create_tables(self) -> None:
        logger.info("Creating tables")
        await self.store.create_tables()

    async def drop_tables(self) -> None:
        if self.settings.is_production:
            raise RuntimeError("Dropping tables is not allowed in production")
        logger.warning("Dropping tables - all data will be lost!")
        await self.store.drop_tables()

    async def seed_database(self, data_dir: Optional[Path] = None) -> None:
        """Seed the database with the bundled dataset."""
        logger.info("Seeding database with initial data")
        counts = await seed_store(self.store, data_dir or self.settings.seed_data_dir)
        for table, count in counts.items():
            logger.info(f"  {table}: {count} rows")

    async def reset_database(self, data_dir: Optional[Path] = None) -> None:
        """Reset the database by dropping, recreating and reseeding all tables."""
        if not (self.settings.is_development or self.settings.is_testing):
            raise RuntimeError("Database reset is only allowed in development or test mode")

        await self.drop_tables()
        await self.create_tables()
        await self.seed_database(data_dir)
        logger.info("Database reset completed")

    async def check(self) -> bool:
        connected = await self.store.ping()
        if connected:
            info = await self.store.get_database_info()
            logger.info(f"Database version: {info.get('database_version')}")
        return connected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LightBnB schema and seed management")
    parser.add_argument("--database-url", help="Override the configured database URL")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create", help="Create all tables")
    subparsers.add_parser("drop", help="Drop all tables")

    seed_parser = subparsers.add_parser("seed", help="Seed database with the bundled dataset")
    seed_parser.add_argument("--data-dir", type=Path, help="Directory holding the dataset files")

    reset_parser = subparsers.add_parser("reset", help="Drop, recreate and seed (development only)")
    reset_parser.add_argument("--data-dir", type=Path, help="Directory holding the dataset files")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    subparsers.add_parser("check", help="Check database connectivity")
    return parser


async def run_command(args: argparse.Namespace, settings: Settings) -> int:
    store = create_store(settings)
    manager = MigrationManager(store, settings)

    try:
        if args.command == "create":
            await manager.create_tables()
        elif args.command == "drop":
            await manager.drop_tables()
        elif args.command == "seed":
            await manager.seed_database(args.data_dir)
        elif args.command == "reset":
            await manager.reset_database(args.data_dir)
        elif args.command == "check":
            return 0 if await manager.check() else 1
        return 0
    finally:
        await store.close()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI interface for schema management."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.database_url:
        settings = Settings(**{**settings.model_dump(), "database_url": args.database_url})

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "reset" and not args.confirm:
        print("Database reset requires --confirm flag")
        return 1

    try:
        return asyncio.run(run_command(args, settings))
    except Exception as e:
        logger.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
