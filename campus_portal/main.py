import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from campus_portal.api import (
    routes_announcement,
    routes_assignment,
    routes_attendance,
    routes_course,
    routes_dashboard,
    routes_grade
)
from campus_portal.core.config import settings
from campus_portal.core.logging_config import configure_logging, RequestLoggingMiddleware
from campus_portal.providers.base import RecordProviderError

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("campus_portal")

if settings.RECORD_PROVIDER == "sql":
    # create tables on first start
    from campus_portal.db import database
    from campus_portal.providers import sql  # noqa: F401  registers the models on Base
    database.Base.metadata.create_all(bind=database.engine)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(RecordProviderError)
async def record_provider_error_handler(request: Request, exc: RecordProviderError):
    logger.error("Record store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Failed to load {exc.resource}. Please try again."},
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to the Campus Portal API"}

app.include_router(routes_dashboard.router, prefix="/dashboard", tags=["Dashboard"])
app.include_router(routes_course.router, prefix="/courses", tags=["Courses"])
app.include_router(routes_grade.router, prefix="/grades", tags=["Grades"])
app.include_router(routes_attendance.router, prefix="/attendance", tags=["Attendance"])
app.include_router(routes_announcement.router, prefix="/announcements", tags=["Announcements"])
app.include_router(routes_assignment.router, prefix="/assignments", tags=["Assignments"])
