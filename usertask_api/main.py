"""Main FastAPI application for the UserTask API."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from usertask_api import __version__
from usertask_api.config import get_settings
from usertask_api.db.init import init_db
from usertask_api.middleware.cors import add_cors_middleware
from usertask_api.routers import tasks_router, users_router
from usertask_api.utils.logger import setup_logging

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="UserTask API",
    description="REST API for user accounts and personal to-do tasks",
    version=__version__,
)

# Add CORS middleware
add_cors_middleware(app, settings)


@app.on_event("startup")
async def startup_event():
    """Initialize database tables on startup."""
    init_db()
    logger.info("Application startup complete.")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 with the joined messages."""
    messages = [error.get("msg", "Invalid value") for error in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": ", ".join(messages)},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


app.include_router(users_router, prefix="/api")  # /api/users/...
app.include_router(tasks_router, prefix="/api")  # /api/tasks/...


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "usertask_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
