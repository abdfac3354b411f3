"""
Import employees from a semicolon-delimited CSV file.

Usage:
    python -m app.commands.import_employees
    python -m app.commands.import_employees data/employees.csv
"""

import argparse
import sys
from typing import Optional

from sqlmodel import Session

from app.core.cache import CacheStore, RedisClient
from app.core.config import settings
from app.core.database import create_db_and_tables, engine
from app.core.exceptions import EmployeeImportError
from app.core.logging import get_logger, setup_logging
from app.repositories import (
    SqlDepartmentRepository,
    SqlEmployeeRepository,
    SqlLocationRepository,
)
from app.services.employee_import import EmployeeImporter, ImportSummary
from app.services.employee_listing import EmployeeListingService

logger = get_logger(__name__)


def run_import(source_path: str, bind=None) -> int:
    """
    Import one file and invalidate the cached employee listing.

    The listing is invalidated whenever at least one employee was stored,
    including runs that abort part way through.

    Returns:
        Process exit status: 0 on success, 1 if the import was aborted
    """
    bind = bind or engine
    create_db_and_tables(bind)
    summary = ImportSummary()

    with Session(bind) as session:
        employee_repo = SqlEmployeeRepository(session)
        importer = EmployeeImporter(
            employee_repo,
            SqlDepartmentRepository(session),
            SqlLocationRepository(session),
        )
        try:
            importer.import_file(source_path, summary)
        except EmployeeImportError as e:
            logger.error(f"Import failed: {e}")
            return 1
        finally:
            if summary.employees_imported:
                listing = EmployeeListingService(
                    employee_repo,
                    CacheStore(RedisClient.get_client()),
                    invalidate_pages=settings.EMPLOYEES_CACHE_INVALIDATE_PAGES,
                )
                listing.invalidate()

    logger.info(f"Import completed successfully ({summary.employees_imported} employee(s))")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Import employees from a CSV file")
    parser.add_argument(
        "path",
        nargs="?",
        default=settings.IMPORT_FILE_PATH,
        help=f"CSV file to import (default: {settings.IMPORT_FILE_PATH})",
    )
    args = parser.parse_args(argv)

    setup_logging(settings.LOG_LEVEL)
    try:
        return run_import(args.path)
    finally:
        RedisClient.close()


if __name__ == "__main__":
    sys.exit(main())
