"""
Cache-aside paginated employee listing.

Read path:
1. Normalize page/pageSize and derive the cache key from the normalized values
2. On a cache hit, return the stored payload bytes unchanged
3. On a miss (or any cache error), read the page from storage, serialize the
   envelope, store it with the TTL and return it

Writes to employees call invalidate(), which always removes the base
"employees" key. Paginated keys are only removed when invalidate_pages is
enabled; otherwise they expire with their TTL.
"""

from typing import Any

from app.core.cache import CacheStore, get_cache_key
from app.core.logging import get_logger
from app.core.parsing import parse_int_or_default
from app.models.employee import EmployeeListResponse, EmployeePublic
from app.repositories.base import EmployeeRepository

logger = get_logger(__name__)

EMPLOYEES_CACHE_NAMESPACE = "employees"
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_CACHE_TTL_SECONDS = 300


def normalize_pagination(page: Any, page_size: Any) -> tuple[int, int]:
    """
    Validate raw pagination input.

    page falls back to 1 when absent, non-numeric or below 1.
    page_size falls back to 10 when absent, non-numeric, below 1 or above 100.
    """
    effective_page = parse_int_or_default(page, DEFAULT_PAGE)
    if effective_page < 1:
        effective_page = DEFAULT_PAGE

    effective_size = parse_int_or_default(page_size, DEFAULT_PAGE_SIZE)
    if effective_size < 1 or effective_size > MAX_PAGE_SIZE:
        effective_size = DEFAULT_PAGE_SIZE

    return effective_page, effective_size


def employees_cache_key(page: int, page_size: int) -> str:
    return get_cache_key(EMPLOYEES_CACHE_NAMESPACE, page=page, size=page_size)


def total_pages(total_count: int, page_size: int) -> int:
    """Integer ceiling of total_count / page_size."""
    return (total_count + page_size - 1) // page_size


class EmployeeListingService:
    """
    Serves employee pages through the cache.

    Args:
        repository: Employee storage
        cache: Cache store for serialized pages
        ttl_seconds: Lifetime of a cached page
        invalidate_pages: Also clear every paginated key on invalidate()
    """

    def __init__(
        self,
        repository: EmployeeRepository,
        cache: CacheStore,
        ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
        invalidate_pages: bool = False,
    ):
        self.repository = repository
        self.cache = cache
        self.ttl_seconds = ttl_seconds
        self.invalidate_pages = invalidate_pages

    def list_employees(self, page: Any = None, page_size: Any = None) -> bytes:
        """
        Return the serialized page envelope for the requested page.

        Raises:
            RepositoryError: if storage fails on a cache miss
        """
        page, page_size = normalize_pagination(page, page_size)
        cache_key = employees_cache_key(page, page_size)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Serving employees page {page} (size {page_size}) from cache")
            return cached

        employees, total_count = self.repository.find_all_paginated(page, page_size)
        response = EmployeeListResponse(
            employees=[EmployeePublic.model_validate(e) for e in employees],
            total_count=total_count,
            page=page,
            page_size=page_size,
            total_pages=total_pages(total_count, page_size),
        )
        payload = response.model_dump_json(by_alias=True).encode("utf-8")

        if not self.cache.set(cache_key, payload, self.ttl_seconds):
            logger.warning(f"Employees page {page} was not cached under {cache_key}")

        logger.info(
            f"Retrieved {len(employees)} employee(s) for page {page} "
            f"(size {page_size}, total {total_count})"
        )
        return payload

    def invalidate(self) -> None:
        """Drop cached listings after an employee write. Never raises."""
        base_key = get_cache_key(EMPLOYEES_CACHE_NAMESPACE)
        if not self.cache.delete(base_key):
            logger.warning(f"Failed to invalidate cache key {base_key}")

        if self.invalidate_pages:
            cleared = self.cache.clear_pattern(f"{EMPLOYEES_CACHE_NAMESPACE}:*")
            logger.debug(f"Cleared {cleared} paginated employee cache entries")
