"""
Database models and schemas module.
Contains all SQLModel table definitions and Pydantic schemas.
"""

from app.models.department import (
    DEPARTMENT_LEVELS,
    Department,
    DepartmentCreate,
    DepartmentPublic,
    Location,
)
from app.models.employee import (
    SURVEY_FIELDS,
    Employee,
    EmployeeCreate,
    EmployeeListResponse,
    EmployeePublic,
)

__all__ = [
    "DEPARTMENT_LEVELS",
    "Department",
    "DepartmentCreate",
    "DepartmentPublic",
    "Location",
    "SURVEY_FIELDS",
    "Employee",
    "EmployeeCreate",
    "EmployeeListResponse",
    "EmployeePublic",
]
