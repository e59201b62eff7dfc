# Standard library imports
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.v1 import USERS_ROUTE_PREFIX, user_router
from .core.config import PROJECT_ROOT, get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .infrastructure.db.database_initializer import DatabaseInitializer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Bootstraps the users store (table creation and seed user) before the
    first request is served. A failure here aborts startup.
    """
    container = get_container()
    initializer = container.get(DatabaseInitializer)
    await initializer.initialize()
    logger.info(f"Users store ready at {container.settings.resolved_database_path()}")
    
    yield
    
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    load_dotenv(PROJECT_ROOT / ".env")
    
    setup_logging(get_settings().log_level)
    
    application = FastAPI(
        title="Users API",
        version="1.0.0",
        description="Users CRUD API backed by a single-table SQLite store",
        lifespan=lifespan
    )
    
    application.include_router(user_router, prefix=USERS_ROUTE_PREFIX)
    
    return application


# Create application instance
app = create_application()
