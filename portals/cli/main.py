"""
Console entry point.

Usage:
    python -m portals.cli employees
    python -m portals.cli banking
    python -m portals.cli enrollment
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from portals.cli.banking import BankingConsole
from portals.cli.employees import EmployeeConsole
from portals.cli.enrollment import EnrollmentConsole
from portals.database.mongo import MongoConnection, ensure_indexes
from portals.repositories.account import AccountRepository
from portals.repositories.employee import EmployeeRepository
from portals.repositories.enrollment import EnrollmentRepository
from portals.utils.config import get_settings
from portals.utils.logger import get_logger, setup_logging

PORTALS = ("employees", "banking", "enrollment")


def build_console(portal: str, connection: MongoConnection):
    """Create the console for ``portal`` on an open connection."""
    if portal == "employees":
        return EmployeeConsole(
            EmployeeRepository(connection.employees),
            page_size=connection.settings.EMPLOYEE_PAGE_SIZE
        )
    if portal == "banking":
        return BankingConsole(AccountRepository(connection.accounts))
    if portal == "enrollment":
        return EnrollmentConsole(EnrollmentRepository(connection.enrollment_db))
    raise ValueError(f"Unknown portal: {portal}")


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the selected console."""
    parser = argparse.ArgumentParser(description="MongoDB-backed demo portals.")
    parser.add_argument("portal", choices=PORTALS, help="Console to start")
    parser.add_argument(
        "--mongodb-url",
        help="MongoDB connection string (defaults to MONGODB_URL)"
    )
    args = parser.parse_args(argv)

    load_dotenv()
    # Keep log output from interleaving with the menu
    setup_logging(console_level=logging.WARNING)
    logger = get_logger(__name__)

    with MongoConnection(url=args.mongodb_url, settings=get_settings()) as connection:
        ensure_indexes(connection)
        logger.info(f"Starting {args.portal} console")
        build_console(args.portal, connection).run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
