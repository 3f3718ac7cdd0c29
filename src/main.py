"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import auth, calendar, notes, posts, stats, subtasks, todos
from src.api.errors import register_exception_handlers
from src.config import get_settings
from src.database import init_db
from src.logging_config import configure_logging

settings = get_settings()

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    if settings.create_tables_on_startup:
        logger.info("Creating database tables")
        init_db()
    logger.info(f"Mi Todoes API started ({settings.environment})")
    yield


app = FastAPI(
    title="Mi Todoes API",
    description="Personal todos with subtasks, notes, due dates and progress stats",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

# Register routers; static /todos/... paths come before /todos/{todo_id}
app.include_router(auth.router)
app.include_router(stats.router)
app.include_router(calendar.router)
app.include_router(todos.router)
app.include_router(subtasks.router)
app.include_router(notes.router)
app.include_router(posts.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
