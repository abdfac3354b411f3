"""
Department and location models.

A department is identified by its five-level company hierarchy path; a location by its name.
Both natural keys are unique at the database level.
"""

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

DEPARTMENT_LEVELS = 5


class DepartmentBase(SQLModel):
    company_level0: str = Field(max_length=255)
    company_level1: str = Field(max_length=255)
    company_level2: str = Field(max_length=255)
    company_level3: str = Field(max_length=255)
    company_level4: str = Field(max_length=255)

    @property
    def levels(self) -> tuple[str, str, str, str, str]:
        """The hierarchy path as a tuple, level 0 first."""
        return (
            self.company_level0,
            self.company_level1,
            self.company_level2,
            self.company_level3,
            self.company_level4,
        )


class Department(DepartmentBase, table=True):
    """ORM model for the departments table."""

    __tablename__ = "departments"
    __table_args__ = (
        UniqueConstraint(
            "company_level0",
            "company_level1",
            "company_level2",
            "company_level3",
            "company_level4",
            name="uq_departments_levels",
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    @classmethod
    def from_levels(cls, levels: list[str] | tuple[str, ...]) -> "Department":
        """Build an unsaved department from a five-element hierarchy path."""
        if len(levels) != DEPARTMENT_LEVELS:
            raise ValueError(
                f"expected {DEPARTMENT_LEVELS} department levels, got {len(levels)}"
            )
        return cls(
            company_level0=levels[0],
            company_level1=levels[1],
            company_level2=levels[2],
            company_level3=levels[3],
            company_level4=levels[4],
        )


class DepartmentCreate(DepartmentBase):
    """Request body for creating a department."""


class DepartmentPublic(DepartmentBase):
    id: int


class Location(SQLModel, table=True):
    """ORM model for the locations table."""

    __tablename__ = "locations"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, unique=True)
