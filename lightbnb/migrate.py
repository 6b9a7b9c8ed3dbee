"""
Schema bootstrap command.
Creates, drops or resets the LightBnB tables and checks connectivity.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from lightbnb import configure_logging
from lightbnb.config import get_settings
from lightbnb.database import (
    create_engine,
    create_schema,
    drop_schema,
    check_database_connection,
    close_engine,
)

logger = logging.getLogger(__name__)


async def run_command(command: str) -> bool:
    """
    Run one schema command against the configured database.

    Returns:
        True on success
    """
    settings = get_settings()
    engine = create_engine(settings)
    try:
        if command == "check":
            return await check_database_connection(engine)

        if command in ("drop", "reset"):
            logger.warning("Dropping all tables - all data will be lost!")
            await drop_schema(engine, settings)
        if command in ("create", "reset"):
            await create_schema(engine)
        return True
    finally:
        await close_engine(engine)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LightBnB schema management")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create", help="Create missing tables")
    subparsers.add_parser("check", help="Check database connectivity")

    drop_parser = subparsers.add_parser("drop", help="Drop all tables")
    drop_parser.add_argument("--confirm", action="store_true", help="Confirm dropping tables")

    reset_parser = subparsers.add_parser("reset", help="Drop and recreate all tables")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command in ("drop", "reset") and not args.confirm:
        print(f"Database {args.command} requires --confirm flag")
        return 1

    configure_logging()

    try:
        ok = asyncio.run(run_command(args.command))
    except Exception as e:
        logger.error(f"Command failed: {e}")
        return 1
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
