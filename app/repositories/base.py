"""
Repository contracts for employees, departments and locations.

Lookups return a tagged result, Found(item) or NOT_FOUND, so callers never
depend on a storage library's "no rows" convention. Any other storage failure
is raised as RepositoryError.
"""

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, Union

from app.models.department import Department, Location
from app.models.employee import Employee

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A lookup that matched a stored row."""

    item: T


class NotFound:
    """A lookup that matched nothing. Use the NOT_FOUND singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = NotFound()

Lookup = Union[Found[T], NotFound]


class EmployeeRepository(Protocol):
    def create(self, employee: Employee) -> Employee:
        """Persist a new employee and return it with its assigned id."""
        ...

    def find_all(self) -> list[Employee]: ...

    def find_all_paginated(self, page: int, page_size: int) -> tuple[list[Employee], int]:
        """Return one page of employees (1-indexed) and the total row count."""
        ...

    def find_by_id(self, employee_id: int) -> Lookup[Employee]: ...

    def update(self, employee: Employee) -> Lookup[Employee]:
        """Replace every field of the employee identified by employee.id."""
        ...

    def delete(self, employee_id: int) -> None: ...


class DepartmentRepository(Protocol):
    def create(self, department: Department) -> int:
        """Persist a new department and return its id."""
        ...

    def find_all(self) -> list[Department]: ...

    def find_by_levels(self, levels: list[str] | tuple[str, ...]) -> Lookup[Department]:
        """Find the department whose five levels all match exactly."""
        ...


class LocationRepository(Protocol):
    def create(self, location: Location) -> int:
        """Persist a new location and return its id."""
        ...

    def find_by_name(self, name: str) -> Lookup[Location]: ...
