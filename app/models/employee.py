"""
Employee database model and schemas.

An employee carries three required identity fields plus optional HR attributes
and the answers of the engagement survey (Likert scores with free-text comments).
Optional attributes are nullable: an absent value is stored as NULL, never as
an empty string or zero.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

# Likert-scale survey questions, in CSV column order. Each has a "<name>_comments" field.
SURVEY_FIELDS = (
    "position_interest",
    "contribution",
    "learning_development",
    "feedback",
    "manager_interaction",
    "career_clarity",
    "retention_expectation",
    "enps",
)


class EmployeeBase(SQLModel):
    """Fields shared by the table model and the request/response schemas."""

    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    corporate_email: str = Field(max_length=255)

    # Organization
    department_id: Optional[int] = Field(default=None, foreign_key="departments.id")
    position: Optional[str] = Field(default=None, max_length=100)
    role: Optional[str] = Field(default=None, max_length=100)
    location_id: Optional[int] = Field(default=None, foreign_key="locations.id")

    # Demographics
    time_at_company: Optional[str] = Field(default=None, max_length=50)
    gender: Optional[str] = Field(default=None, max_length=50)
    generation: Optional[str] = Field(default=None, max_length=50)

    # Survey
    response_date: Optional[date] = Field(default=None)
    position_interest: Optional[int] = Field(default=None)
    position_interest_comments: Optional[str] = Field(default=None)
    contribution: Optional[int] = Field(default=None)
    contribution_comments: Optional[str] = Field(default=None)
    learning_development: Optional[int] = Field(default=None)
    learning_development_comments: Optional[str] = Field(default=None)
    feedback: Optional[int] = Field(default=None)
    feedback_comments: Optional[str] = Field(default=None)
    manager_interaction: Optional[int] = Field(default=None)
    manager_interaction_comments: Optional[str] = Field(default=None)
    career_clarity: Optional[int] = Field(default=None)
    career_clarity_comments: Optional[str] = Field(default=None)
    retention_expectation: Optional[int] = Field(default=None)
    retention_expectation_comments: Optional[str] = Field(default=None)
    enps: Optional[int] = Field(default=None)
    enps_comments: Optional[str] = Field(default=None)
    open_enps: Optional[str] = Field(default=None)


class Employee(EmployeeBase, table=True):
    """ORM model for the employees table."""

    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)


class EmployeeCreate(EmployeeBase):
    """Request body for creating or fully replacing an employee."""

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Maria Souza",
                "email": "maria@example.com",
                "corporate_email": "maria.souza@company.com",
                "department_id": 3,
                "position": "Analyst",
                "role": "Data Analyst",
                "location_id": 1,
                "response_date": "2022-01-20",
                "enps": 9,
            }
        }


class EmployeePublic(EmployeeBase):
    """Employee as returned by the API."""

    id: int


class EmployeeListResponse(BaseModel):
    """
    Paginated employee listing envelope.

    Serialized with camelCase keys: employees, totalCount, page, pageSize, totalPages.
    """

    model_config = ConfigDict(populate_by_name=True)

    employees: list[EmployeePublic]
    total_count: int = PydanticField(alias="totalCount")
    page: int
    page_size: int = PydanticField(alias="pageSize")
    total_pages: int = PydanticField(alias="totalPages")
