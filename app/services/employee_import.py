"""
CSV bulk import of employees.

The source is a semicolon-delimited file with one header row followed by one
employee per row. Every record must have as many fields as the header; blank
lines are skipped. Rows are processed strictly in file order:

1. Resolve the department (columns 10-14) with get-or-create on the five levels
2. Resolve the location (column 6) with get-or-create on the name
3. Build the employee from the fixed column layout
4. Persist it

The first failure aborts the run with an EmployeeImportError. Rows stored
before the failure stay stored; there is no rollback.

Optional columns are parsed leniently: an empty string becomes None, and an
empty or non-numeric score becomes None. Only a non-empty response date that
does not match DD/MM/YYYY is fatal.
"""

import csv
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Union

from app.core.exceptions import EmployeeImportError, RepositoryError
from app.core.logging import get_logger
from app.core.parsing import parse_optional_int, parse_optional_str
from app.models.department import DEPARTMENT_LEVELS, Department, Location
from app.models.employee import SURVEY_FIELDS, Employee
from app.repositories.base import (
    DepartmentRepository,
    EmployeeRepository,
    Found,
    LocationRepository,
)

logger = get_logger(__name__)

CSV_DELIMITER = ";"
RESPONSE_DATE_FORMAT = "%d/%m/%Y"

# Column layout
COL_NAME = 0
COL_EMAIL = 1
COL_CORPORATE_EMAIL = 2
# Column 3 holds the area, which repeats company level 4 and is not stored
COL_POSITION = 4
COL_ROLE = 5
COL_LOCATION = 6
COL_TIME_AT_COMPANY = 7
COL_GENDER = 8
COL_GENERATION = 9
COL_DEPARTMENT_START = 10
COL_RESPONSE_DATE = 15
COL_SURVEY_START = 16
COL_OPEN_ENPS = 32

MIN_COLUMNS = COL_OPEN_ENPS


@dataclass
class ImportSummary:
    """Counters for one import run."""

    employees_imported: int = 0
    departments_created: int = 0
    locations_created: int = 0


def parse_response_date(raw: str) -> Optional[date]:
    """
    Parse a DD/MM/YYYY response date. Empty input means no date.

    Raises:
        ValueError: if the value is not empty and does not match the layout
    """
    if raw == "":
        return None
    return datetime.strptime(raw, RESPONSE_DATE_FORMAT).date()


def build_employee(record: list[str], department_id: int, location_id: int) -> Employee:
    """
    Map one CSV record onto an unsaved Employee.

    Raises:
        ValueError: if the response date is malformed
    """
    employee = Employee(
        name=record[COL_NAME],
        email=record[COL_EMAIL],
        corporate_email=record[COL_CORPORATE_EMAIL],
        department_id=department_id,
        position=parse_optional_str(record[COL_POSITION]),
        role=parse_optional_str(record[COL_ROLE]),
        location_id=location_id,
        time_at_company=parse_optional_str(record[COL_TIME_AT_COMPANY]),
        gender=parse_optional_str(record[COL_GENDER]),
        generation=parse_optional_str(record[COL_GENERATION]),
    )

    try:
        employee.response_date = parse_response_date(record[COL_RESPONSE_DATE])
    except ValueError as e:
        raise ValueError(
            f"invalid date format for response_date {record[COL_RESPONSE_DATE]!r}: {e}"
        ) from e

    # Score and comment columns alternate, one pair per survey question
    for offset, field_name in enumerate(SURVEY_FIELDS):
        column = COL_SURVEY_START + 2 * offset
        setattr(employee, field_name, parse_optional_int(record[column]))
        setattr(employee, f"{field_name}_comments", parse_optional_str(record[column + 1]))

    if len(record) > COL_OPEN_ENPS:
        employee.open_enps = parse_optional_str(record[COL_OPEN_ENPS])

    return employee


class EmployeeImporter:
    """
    Imports employees from a CSV file, creating departments and locations on demand.

    Args:
        employee_repo: Employee storage
        department_repo: Department storage
        location_repo: Location storage
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        department_repo: DepartmentRepository,
        location_repo: LocationRepository,
    ):
        self.employee_repo = employee_repo
        self.department_repo = department_repo
        self.location_repo = location_repo

    def import_file(
        self,
        source_path: Union[str, Path],
        summary: Optional[ImportSummary] = None,
    ) -> ImportSummary:
        """
        Run the import for one file.

        Args:
            source_path: CSV file to read
            summary: Counters to update as records are stored. Pass one in to
                know what was persisted when the run aborts.

        Returns:
            Counters for the run

        Raises:
            EmployeeImportError: on the first structural, decoding or storage failure
        """
        if summary is None:
            summary = ImportSummary()
        logger.info(f"Starting employee import from {source_path}")

        try:
            handle = open(source_path, newline="", encoding="utf-8")
        except OSError as e:
            raise EmployeeImportError(f"failed to open file {source_path}: {e}") from e

        with handle:
            reader = csv.reader(handle, delimiter=CSV_DELIMITER)

            try:
                header = next(reader)
            except StopIteration:
                raise EmployeeImportError("failed to read header: file is empty", field="header")
            except csv.Error as e:
                raise EmployeeImportError(f"failed to read header: {e}", field="header") from e
            except UnicodeDecodeError as e:
                raise EmployeeImportError(
                    f"failed to read header: file is not valid UTF-8 ({e})", field="header"
                ) from e

            while True:
                try:
                    record = next(reader)
                except StopIteration:
                    break
                except csv.Error as e:
                    raise EmployeeImportError(
                        f"error reading record: {e}", line=reader.line_num
                    ) from e
                except UnicodeDecodeError as e:
                    # Decoding runs ahead of the reader, so only the last good line is known
                    raise EmployeeImportError(
                        f"error reading record after line {reader.line_num}: "
                        f"file is not valid UTF-8 ({e})",
                        field="record",
                    ) from e

                if not record:
                    continue

                if len(record) != len(header):
                    raise EmployeeImportError(
                        f"wrong number of fields: expected {len(header)}, got {len(record)}",
                        line=reader.line_num,
                        field="record",
                    )

                self._import_record(record, reader.line_num, summary)

        logger.info(
            f"Employee import completed: {summary.employees_imported} employee(s), "
            f"{summary.departments_created} new department(s), "
            f"{summary.locations_created} new location(s)"
        )
        return summary

    def _import_record(self, record: list[str], line: int, summary: ImportSummary) -> None:
        if len(record) < MIN_COLUMNS:
            raise EmployeeImportError(
                f"expected at least {MIN_COLUMNS} columns, got {len(record)}",
                line=line,
                field="record",
            )

        levels = record[COL_DEPARTMENT_START : COL_DEPARTMENT_START + DEPARTMENT_LEVELS]
        try:
            department_id = self.get_or_create_department(levels, summary)
        except (RepositoryError, ValueError) as e:
            raise EmployeeImportError(
                f"error creating department: {e}", line=line, field="department"
            ) from e

        try:
            location_id = self.get_or_create_location(record[COL_LOCATION], summary)
        except RepositoryError as e:
            raise EmployeeImportError(
                f"error creating location: {e}", line=line, field="location"
            ) from e

        try:
            employee = build_employee(record, department_id, location_id)
        except ValueError as e:
            raise EmployeeImportError(
                f"error creating employee from record: {e}",
                line=line,
                field="response_date",
            ) from e

        try:
            self.employee_repo.create(employee)
        except RepositoryError as e:
            raise EmployeeImportError(
                f"error creating employee in repository: {e}", line=line, field="employee"
            ) from e

        summary.employees_imported += 1

    def get_or_create_department(
        self, levels: list[str], summary: Optional[ImportSummary] = None
    ) -> int:
        """
        Return the id of the department with exactly these five levels, creating it if absent.

        Raises:
            ValueError: if levels does not have five elements
            RepositoryError: if the lookup or the insert fails
        """
        if len(levels) != DEPARTMENT_LEVELS:
            raise ValueError(
                f"invalid department data: expected {DEPARTMENT_LEVELS} levels, got {len(levels)}"
            )

        result = self.department_repo.find_by_levels(levels)
        if isinstance(result, Found):
            return result.item.id

        department_id = self.department_repo.create(Department.from_levels(levels))
        if summary is not None:
            summary.departments_created += 1
        logger.debug(f"Created department {department_id} for {' / '.join(levels)}")
        return department_id

    def get_or_create_location(
        self, name: str, summary: Optional[ImportSummary] = None
    ) -> int:
        """
        Return the id of the location with this exact name, creating it if absent.

        Raises:
            RepositoryError: if the lookup or the insert fails
        """
        result = self.location_repo.find_by_name(name)
        if isinstance(result, Found):
            return result.item.id

        location_id = self.location_repo.create(Location(name=name))
        if summary is not None:
            summary.locations_created += 1
        logger.debug(f"Created location {location_id} for '{name}'")
        return location_id
