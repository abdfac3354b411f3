import os

# Must be set before app modules read their settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.api.dependencies import (
    get_cache_store,
    get_department_repository,
    get_employee_repository,
)
from app.core.cache import CacheStore
from app.core.database import build_engine, create_db_and_tables
from app.core.security import TokenData, get_current_user
from app.main import app
from tests.fakes import (
    FakeRedis,
    InMemoryDepartmentRepository,
    InMemoryEmployeeRepository,
)


@pytest.fixture
def sql_engine():
    """A fresh in-memory SQLite database per test."""
    engine = build_engine("sqlite://")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(sql_engine):
    """Create a database session for testing."""
    with Session(sql_engine) as session:
        yield session


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def cache_store(fake_redis):
    return CacheStore(fake_redis)


@pytest.fixture
def employee_repo():
    return InMemoryEmployeeRepository()


@pytest.fixture
def department_repo():
    return InMemoryDepartmentRepository()


@pytest.fixture
def client(employee_repo, department_repo, cache_store):
    """Test client with in-memory storage, a fake cache and an authenticated user."""
    app.dependency_overrides[get_employee_repository] = lambda: employee_repo
    app.dependency_overrides[get_department_repository] = lambda: department_repo
    app.dependency_overrides[get_cache_store] = lambda: cache_store
    app.dependency_overrides[get_current_user] = lambda: TokenData(sub="tester")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(employee_repo, department_repo, cache_store):
    """Test client with in-memory storage but real token validation."""
    app.dependency_overrides[get_employee_repository] = lambda: employee_repo
    app.dependency_overrides[get_department_repository] = lambda: department_repo
    app.dependency_overrides[get_cache_store] = lambda: cache_store
    yield TestClient(app)
    app.dependency_overrides.clear()
