import logging
from functools import lru_cache

from campus_portal.core.config import settings
from campus_portal.providers.base import RecordProvider
from campus_portal.providers.memory import MemoryRecordProvider, load_fixture
from campus_portal.providers.remote import RemoteRecordProvider

logger = logging.getLogger(__name__)

COURSES = "courses"
GRADES = "grades"
ATTENDANCE = "attendance"
ANNOUNCEMENTS = "announcements"
ASSIGNMENTS = "assignments"

RESOURCES = (COURSES, GRADES, ATTENDANCE, ANNOUNCEMENTS, ASSIGNMENTS)

# local field name -> remote record API field name
REMOTE_FIELD_MAPS = {
    COURSES: {
        "id": "Id",
        "enrollment_status": "enrollmentStatus",
    },
    GRADES: {
        "id": "Id",
        "course_id": "courseId",
        "assignment_name": "assignmentName",
        "max_score": "maxScore",
        "graded_date": "gradedDate",
    },
    ATTENDANCE: {
        "id": "Id",
        "course_id": "courseId",
    },
    ANNOUNCEMENTS: {
        "id": "Id",
        "course_id": "courseId",
    },
    ASSIGNMENTS: {
        "id": "Id",
        "course_id": "courseId",
        "due_date": "dueDate",
    },
}


def build_provider(resource: str, kind: str) -> RecordProvider:
    if kind == "memory":
        return MemoryRecordProvider(
            resource,
            load_fixture(resource, settings.FIXTURE_DIR or None),
            latency_ms=(settings.SIMULATED_LATENCY_MIN_MS, settings.SIMULATED_LATENCY_MAX_MS),
        )
    if kind == "remote":
        return RemoteRecordProvider(
            resource,
            settings.REMOTE_API_URL,
            field_map=REMOTE_FIELD_MAPS[resource],
            api_key=settings.REMOTE_API_KEY,
            timeout=settings.REMOTE_API_TIMEOUT,
        )
    if kind == "sql":
        # imported lazily so the memory and remote setups never load the ORM
        from campus_portal.db.database import SessionLocal
        from campus_portal.providers.sql import MODELS, SqlRecordProvider
        return SqlRecordProvider(resource, MODELS[resource], SessionLocal)
    raise ValueError(f"Unknown record provider: {kind!r}")


@lru_cache(maxsize=None)
def get_provider(resource: str) -> RecordProvider:
    logger.info("Using %s record provider for %s", settings.RECORD_PROVIDER, resource)
    return build_provider(resource, settings.RECORD_PROVIDER)


def course_records() -> RecordProvider:
    return get_provider(COURSES)


def grade_records() -> RecordProvider:
    return get_provider(GRADES)


def attendance_records() -> RecordProvider:
    return get_provider(ATTENDANCE)


def announcement_records() -> RecordProvider:
    return get_provider(ANNOUNCEMENTS)


def assignment_records() -> RecordProvider:
    return get_provider(ASSIGNMENTS)
