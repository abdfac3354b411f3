"""
Shared API dependencies.
Contains reusable dependency functions for FastAPI endpoints.
Centralizes database sessions, repositories, the cache store and authentication.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from app.core.cache import CacheStore, RedisClient
from app.core.config import settings
from app.core.database import get_session
from app.core.security import TokenData, get_current_user
from app.repositories import (
    DepartmentRepository,
    EmployeeRepository,
    SqlDepartmentRepository,
    SqlEmployeeRepository,
)
from app.services.employee_listing import EmployeeListingService

# Database session dependency
# Use this type annotation in route handlers to get automatic session injection
SessionDep = Annotated[Session, Depends(get_session)]

# Current User dependency for security
CurrentUserDep = Annotated[TokenData, Depends(get_current_user)]


def get_cache_store() -> CacheStore:
    return CacheStore(RedisClient.get_client())


def get_employee_repository(session: SessionDep) -> EmployeeRepository:
    return SqlEmployeeRepository(session)


def get_department_repository(session: SessionDep) -> DepartmentRepository:
    return SqlDepartmentRepository(session)


EmployeeRepositoryDep = Annotated[EmployeeRepository, Depends(get_employee_repository)]
DepartmentRepositoryDep = Annotated[
    DepartmentRepository, Depends(get_department_repository)
]
CacheStoreDep = Annotated[CacheStore, Depends(get_cache_store)]


def get_listing_service(
    repository: EmployeeRepositoryDep,
    cache: CacheStoreDep,
) -> EmployeeListingService:
    return EmployeeListingService(
        repository,
        cache,
        ttl_seconds=settings.EMPLOYEES_CACHE_TTL_SECONDS,
        invalidate_pages=settings.EMPLOYEES_CACHE_INVALIDATE_PAGES,
    )


ListingServiceDep = Annotated[EmployeeListingService, Depends(get_listing_service)]
