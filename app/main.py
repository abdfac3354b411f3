"""
HR Records Service - Main Application Entry Point.

This service stores employee, department and location records and exposes:
- Paginated employee listing with Redis caching
- Employee CRUD with cache invalidation
- Department listing and creation
- JWT login for the protected /api routes
"""

from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes.auth import router as auth_router
from app.api.routes.departments import router as departments_router
from app.api.routes.employees import router as employees_router
from app.core.cache import RedisClient
from app.core.config import settings
from app.core.database import create_db_and_tables
from app.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Startup
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting HR Records Service...")

    logger.info("Creating database and tables...")
    create_db_and_tables()
    logger.info("Database and tables created successfully")

    logger.info("Initializing Redis client...")
    if RedisClient.ping():
        logger.info("Redis client connected successfully")
    else:
        logger.warning("Redis connection failed, employee listings will not be cached")

    logger.info("HR Records Service startup complete")

    yield

    # Shutdown
    logger.info("HR Records Service shutting down...")

    logger.info("Closing Redis client...")
    RedisClient.close()
    logger.info("Redis client closed")

    logger.info("HR Records Service shutdown complete")


# Initialize FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="HR Records Service - Employees, departments and locations with cached listings",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

register_error_handlers(app)


# Include routers
api_router = APIRouter(prefix="/api")
api_router.include_router(employees_router)
api_router.include_router(departments_router)

app.include_router(auth_router)
app.include_router(api_router)


@app.get("/ping", tags=["health"])
async def ping():
    return {"status": "ok", "message": "pong"}


# Health check endpoint
@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint for container orchestration and monitoring.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/ready", tags=["health"])
def readiness_check():
    """
    Readiness check endpoint for Kubernetes.
    The service still answers without Redis, but listings are not cached.
    """
    redis_ready = RedisClient.ping()

    return {
        "status": "ready" if redis_ready else "degraded",
        "checks": {
            "redis": "ok" if redis_ready else "error",
        },
    }


@app.get("/", tags=["root"])
async def root():
    """
    Root endpoint with service information.
    """
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }
