"""FastAPI entry point. Registers middleware, API routers, error handlers and the lifecycle scheduler."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from institute_admin.config import settings
from institute_admin.database import Base, engine
from institute_admin.errors import InstituteAdminError
import institute_admin.models  # noqa: F401 - registers models on Base.metadata
from institute_admin.routers import attendance, batches, courses, leads, notifications, students, webhooks
from institute_admin.services.scheduler import start_scheduler, stop_scheduler

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    if settings.LIFECYCLE_SCHEDULER_ENABLED:
        start_scheduler()
    yield
    if settings.LIFECYCLE_SCHEDULER_ENABLED:
        stop_scheduler()


app = FastAPI(
    title="Institute Admin API",
    description="Batches, students, courses, attendance and notifications for a training institute",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InstituteAdminError)
async def domain_error_handler(request: Request, exc: InstituteAdminError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


app.include_router(batches.router)
app.include_router(courses.router)
app.include_router(students.router)
app.include_router(notifications.router)
app.include_router(attendance.router)
app.include_router(leads.router)
app.include_router(webhooks.router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Institute Admin API"}
