"""FastAPI application: main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from lostfound.config import get_settings
from lostfound.infrastructure.database import engine, Base
from lostfound.core.logging import configure_logging
from lostfound.core.middleware import setup_middleware
from lostfound.core.exceptions import AppError, global_exception_handler, request_validation_handler

# Import all models so SQLAlchemy knows about them
from lostfound.domain.models.account import Account  # noqa: F401
from lostfound.domain.models.item import Item  # noqa: F401
from lostfound.domain.models.reference import Category, Location  # noqa: F401

# Import routers
from lostfound.interfaces.api.auth import router as auth_router
from lostfound.interfaces.api.items import router as items_router
from lostfound.interfaces.api.reference import router as reference_router
from lostfound.interfaces.api.stats import router as stats_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    logger.info("Starting Lost & Found API...", env=settings.ENVIRONMENT)

    if settings.CREATE_TABLES_ON_STARTUP:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created/verified")

    yield

    engine.dispose()
    logger.info("Lost & Found API stopped")


app = FastAPI(
    title="Campus Lost & Found API",
    description="Register, log in, and report lost or found items on campus",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)

# AppError is handled inside the routing layer; the bare Exception handler
# is Starlette's last-resort 500 page.
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(auth_router)
app.include_router(items_router)
app.include_router(reference_router)
app.include_router(stats_router)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Lost & Found API running..."


@app.get("/health")
def health():
    return {"status": "healthy"}
