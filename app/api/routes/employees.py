from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from app.api.dependencies import (
    CurrentUserDep,
    EmployeeRepositoryDep,
    ListingServiceDep,
)
from app.core.logging import get_logger
from app.models.employee import Employee, EmployeeCreate, EmployeePublic
from app.repositories import Found

logger = get_logger(__name__)

router = APIRouter(
    prefix="/employees",
    tags=["employees"],
    responses={404: {"description": "Employee not found"}},
)


@router.get("")
def list_employees(
    service: ListingServiceDep,
    current_user: CurrentUserDep,
    page: Annotated[Optional[str], Query()] = None,
    page_size: Annotated[Optional[str], Query(alias="pageSize")] = None,
) -> Response:
    """
    List employees, one page at a time.

    Invalid or missing values fall back to page 1 and a page size of 10;
    page sizes above 100 also fall back to 10. Pages are served from the cache
    for up to five minutes.

    Returns:
        {"employees": [...], "totalCount", "page", "pageSize", "totalPages"}
    """
    logger.info(
        f"Listing employees for {current_user.sub} (page={page!r}, pageSize={page_size!r})"
    )
    payload = service.list_employees(page, page_size)
    return Response(content=payload, media_type="application/json")


@router.post("", response_model=EmployeePublic, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_in: EmployeeCreate,
    repository: EmployeeRepositoryDep,
    service: ListingServiceDep,
    current_user: CurrentUserDep,
) -> Employee:
    """Create an employee and invalidate the employee listing cache."""
    logger.info(f"Creating employee {employee_in.corporate_email} by {current_user.sub}")
    employee = repository.create(Employee.model_validate(employee_in))
    service.invalidate()
    logger.info(f"Employee created: {employee.id}")
    return employee


@router.get("/{employee_id}", response_model=EmployeePublic)
def get_employee(
    employee_id: int,
    repository: EmployeeRepositoryDep,
    current_user: CurrentUserDep,
) -> Employee:
    """
    Get a single employee by ID.

    Raises:
        HTTPException: 404 if the employee does not exist
    """
    result = repository.find_by_id(employee_id)
    if not isinstance(result, Found):
        logger.warning(f"Employee with ID {employee_id} not found")
        raise HTTPException(status_code=404, detail="Employee not found")
    return result.item


@router.put("/{employee_id}", response_model=EmployeePublic)
def update_employee(
    employee_id: int,
    employee_in: EmployeeCreate,
    repository: EmployeeRepositoryDep,
    service: ListingServiceDep,
    current_user: CurrentUserDep,
) -> Employee:
    """
    Replace every field of an existing employee.

    Fields left out of the body are stored as null.

    Raises:
        HTTPException: 404 if the employee does not exist
    """
    logger.info(f"Updating employee {employee_id} by {current_user.sub}")
    employee = Employee.model_validate(employee_in)
    employee.id = employee_id

    result = repository.update(employee)
    if not isinstance(result, Found):
        logger.warning(f"Update attempted for non-existent employee {employee_id}")
        raise HTTPException(status_code=404, detail="Employee not found")

    service.invalidate()
    return result.item


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int,
    repository: EmployeeRepositoryDep,
    service: ListingServiceDep,
    current_user: CurrentUserDep,
) -> None:
    """Delete an employee. Cache invalidation failures do not fail the request."""
    logger.info(f"Deleting employee {employee_id} by {current_user.sub}")
    repository.delete(employee_id)
    service.invalidate()
