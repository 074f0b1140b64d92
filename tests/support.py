from campus_portal.providers.memory import MemoryRecordProvider, load_fixture
from campus_portal.providers.registry import RESOURCES


def fixture_providers():
    """Fresh, latency-free in-memory providers seeded from the shipped fixtures."""
    return {resource: MemoryRecordProvider(resource, load_fixture(resource)) for resource in RESOURCES}


def grade(course_id, score, max_score=100, weight=1.0, **extra):
    record = {"course_id": course_id, "score": score, "max_score": max_score, "weight": weight}
    record.update(extra)
    return record


def attendance(status, course_id=1, **extra):
    record = {"course_id": course_id, "status": status, "date": "2026-09-01"}
    record.update(extra)
    return record
