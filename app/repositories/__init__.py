"""
Storage access for employees, departments and locations.
"""

from app.repositories.base import (
    NOT_FOUND,
    DepartmentRepository,
    EmployeeRepository,
    Found,
    LocationRepository,
    Lookup,
    NotFound,
)
from app.repositories.sql import (
    SqlDepartmentRepository,
    SqlEmployeeRepository,
    SqlLocationRepository,
)

__all__ = [
    "NOT_FOUND",
    "Found",
    "NotFound",
    "Lookup",
    "EmployeeRepository",
    "DepartmentRepository",
    "LocationRepository",
    "SqlEmployeeRepository",
    "SqlDepartmentRepository",
    "SqlLocationRepository",
]
