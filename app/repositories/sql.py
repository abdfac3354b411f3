"""
SQLModel-backed repositories.

Every write commits immediately, so a failure in a later operation never
rolls back rows that were already stored.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, func, select

from app.core.exceptions import RepositoryError
from app.core.logging import get_logger
from app.core.parsing import INT64_MAX
from app.models.department import DEPARTMENT_LEVELS, Department, Location
from app.models.employee import Employee, EmployeeBase
from app.repositories.base import NOT_FOUND, Found, Lookup

logger = get_logger(__name__)


@contextmanager
def _storage_errors(session: Session, operation: str) -> Iterator[None]:
    """Roll back and re-raise SQLAlchemy failures as RepositoryError."""
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Database error while {operation}: {e}")
        raise RepositoryError(f"error {operation}: {e}") from e


class SqlEmployeeRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, employee: Employee) -> Employee:
        with _storage_errors(self.session, "creating employee"):
            self.session.add(employee)
            self.session.commit()
            self.session.refresh(employee)
        logger.debug(f"Created employee {employee.id}")
        return employee

    def find_all(self) -> list[Employee]:
        with _storage_errors(self.session, "listing employees"):
            return list(self.session.exec(select(Employee).order_by(Employee.id)).all())

    def find_all_paginated(self, page: int, page_size: int) -> tuple[list[Employee], int]:
        offset = (page - 1) * page_size
        with _storage_errors(self.session, "listing employees"):
            total = self.session.exec(select(func.count()).select_from(Employee)).one()
            # No row can sit past the 64-bit offset limit
            if offset > INT64_MAX:
                return [], total
            statement = (
                select(Employee).order_by(Employee.id).offset(offset).limit(page_size)
            )
            employees = list(self.session.exec(statement).all())
        return employees, total

    def find_by_id(self, employee_id: int) -> Lookup[Employee]:
        with _storage_errors(self.session, f"finding employee {employee_id}"):
            employee = self.session.get(Employee, employee_id)
        if employee is None:
            return NOT_FOUND
        return Found(employee)

    def update(self, employee: Employee) -> Lookup[Employee]:
        with _storage_errors(self.session, f"updating employee {employee.id}"):
            existing = self.session.get(Employee, employee.id)
            if existing is None:
                return NOT_FOUND
            for name in EmployeeBase.model_fields:
                setattr(existing, name, getattr(employee, name))
            self.session.add(existing)
            self.session.commit()
            self.session.refresh(existing)
        return Found(existing)

    def delete(self, employee_id: int) -> None:
        with _storage_errors(self.session, f"deleting employee {employee_id}"):
            employee = self.session.get(Employee, employee_id)
            if employee is None:
                logger.info(f"Employee {employee_id} not found, nothing to delete")
                return
            self.session.delete(employee)
            self.session.commit()


class SqlDepartmentRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, department: Department) -> int:
        with _storage_errors(self.session, "creating department"):
            self.session.add(department)
            self.session.commit()
            self.session.refresh(department)
        return department.id

    def find_all(self) -> list[Department]:
        with _storage_errors(self.session, "listing departments"):
            return list(
                self.session.exec(select(Department).order_by(Department.id)).all()
            )

    def find_by_levels(self, levels: list[str] | tuple[str, ...]) -> Lookup[Department]:
        if len(levels) != DEPARTMENT_LEVELS:
            raise ValueError(
                f"expected {DEPARTMENT_LEVELS} department levels, got {len(levels)}"
            )
        statement = select(Department).where(
            Department.company_level0 == levels[0],
            Department.company_level1 == levels[1],
            Department.company_level2 == levels[2],
            Department.company_level3 == levels[3],
            Department.company_level4 == levels[4],
        )
        with _storage_errors(self.session, "finding department"):
            department = self.session.exec(statement).first()
        if department is None:
            return NOT_FOUND
        return Found(department)


class SqlLocationRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, location: Location) -> int:
        with _storage_errors(self.session, "creating location"):
            self.session.add(location)
            self.session.commit()
            self.session.refresh(location)
        return location.id

    def find_by_name(self, name: str) -> Lookup[Location]:
        statement = select(Location).where(Location.name == name)
        with _storage_errors(self.session, f"finding location '{name}'"):
            location = self.session.exec(statement).first()
        if location is None:
            return NOT_FOUND
        return Found(location)
