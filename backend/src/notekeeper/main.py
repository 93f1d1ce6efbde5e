# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import auth_router, health_router, notes_router
from .config import get_settings
from .core.errors import register_exception_handlers
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import create_tables, dispose_engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Notekeeper application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # Tests provide their own engine and schema
    if os.getenv("NOTEKEEPER_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to NOTEKEEPER_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down Notekeeper application")
    await dispose_engine()


app = FastAPI(
    title=settings.app_name,
    description="Personal notes API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(notes_router)
app.include_router(health_router)


@app.get("/")
async def root():
    return {"data": "hello"}


def run() -> None:
    """Serve the app with uvicorn using host/port from settings."""
    import uvicorn

    uvicorn.run(
        "notekeeper.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,  # keep the dictConfig set up above
    )


if __name__ == "__main__":
    run()
