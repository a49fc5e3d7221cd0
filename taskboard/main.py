"""
Taskboard API - FastAPI Backend
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard import __version__
from taskboard.api.routers import insight, projects, tasks
from taskboard.config import get_settings
from taskboard.db import init_db
from taskboard.errors import NotFoundError
from taskboard.logging import setup_logging
from taskboard.services.insight import credential_available

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready at %s", settings.database_url)
    if credential_available(settings.gemini_api_key):
        logger.info("Gemini insights enabled (model %s)", settings.gemini_model)
    else:
        logger.info("GEMINI_API_KEY not set, insights use local fallback")
    yield


app = FastAPI(
    title="Taskboard API",
    description="Projects, tasks and AI-assisted summaries",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message})


app.include_router(projects.router, prefix="/api/projects", tags=["Projects"])
app.include_router(tasks.router, prefix="/api/tasks", tags=["Tasks"])
app.include_router(insight.router, prefix="/api/ai", tags=["AI"])


@app.get("/api/health")
async def health():
    return {"status": "ok", "message": "Server is running"}
