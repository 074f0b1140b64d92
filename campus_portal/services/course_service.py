import logging
from typing import Dict, List, Optional
from fastapi import HTTPException
from campus_portal.providers.base import RecordProvider
from campus_portal.schemas.course_schema import CourseCreate, CourseUpdate
from campus_portal.services import list_filters

logger = logging.getLogger(__name__)

# == Course list (filter + sort)
def get_all_courses(
    provider: RecordProvider,
    query: Optional[str] = None,
    department: Optional[str] = None,
    enrollment_status: Optional[str] = None,
    sort_by: Optional[str] = "name",
) -> List[Dict]:
    courses = provider.list()
    courses = list_filters.filter_courses(courses, query, department, enrollment_status)
    return list_filters.sort_courses(courses, sort_by)

def get_course_by_id(provider: RecordProvider, course_id: int) -> Dict:
    course = provider.get(course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course

def get_enrolled_courses(provider: RecordProvider) -> List[Dict]:
    return [c for c in provider.list() if c.get("enrollment_status") == "enrolled"]

def get_course_credits(provider: RecordProvider) -> Dict[int, int]:
    """Credits per course id, the lookup the GPA calculation weights by."""
    return {
        c["id"]: c["credits"]
        for c in provider.list()
        if c.get("credits") is not None
    }

def get_course_summary(provider: RecordProvider) -> Dict:
    courses = provider.list()
    return {
        "total": len(courses),
        "enrolled": sum(1 for c in courses if c.get("enrollment_status") == "enrolled"),
        "waitlisted": sum(1 for c in courses if c.get("enrollment_status") == "waitlisted"),
        "departments": list_filters.departments(courses),
    }

# == Create / update / delete
def create_course(provider: RecordProvider, data: CourseCreate) -> Dict:
    record = data.model_dump(mode="json")
    # new courses always start as enrolled
    record["enrollment_status"] = "enrolled"
    course = provider.insert(record)
    logger.info("Created course #%s %s", course["id"], course.get("code"))
    return course

def update_course(provider: RecordProvider, course_id: int, data: CourseUpdate) -> Dict:
    course = provider.update(course_id, data.model_dump(mode="json", exclude_unset=True))
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course

def delete_course(provider: RecordProvider, course_id: int) -> Dict:
    course = provider.delete(course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    logger.info("Deleted course #%s", course_id)
    return course
