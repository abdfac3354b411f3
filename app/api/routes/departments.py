from fastapi import APIRouter, status

from app.api.dependencies import CurrentUserDep, DepartmentRepositoryDep
from app.core.logging import get_logger
from app.models.department import Department, DepartmentCreate, DepartmentPublic

logger = get_logger(__name__)

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=list[DepartmentPublic])
def list_departments(
    repository: DepartmentRepositoryDep,
    current_user: CurrentUserDep,
) -> list[Department]:
    """List every department with its five hierarchy levels."""
    departments = repository.find_all()
    logger.info(f"Retrieved {len(departments)} department(s)")
    return departments


@router.post("", response_model=DepartmentPublic, status_code=status.HTTP_201_CREATED)
def create_department(
    department_in: DepartmentCreate,
    repository: DepartmentRepositoryDep,
    current_user: CurrentUserDep,
) -> Department:
    department = Department.model_validate(department_in)
    department.id = repository.create(department)
    logger.info(f"Department created: {department.id} by {current_user.sub}")
    return department
