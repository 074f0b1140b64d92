import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional
from fastapi import HTTPException
from campus_portal.core.config import settings
from campus_portal.providers.base import RecordProvider
from campus_portal.schemas.grade_schema import GradeCreate, GradeUpdate
from campus_portal.services import grade_aggregator, list_filters
from campus_portal.services.course_service import get_course_credits

logger = logging.getLogger(__name__)

# == Grade list
def get_all_grades(
    provider: RecordProvider,
    course_id: Optional[int] = None,
    sort_by: Optional[str] = "recent",
    courses: Optional[List[Dict]] = None,
) -> List[Dict]:
    grades = list_filters.filter_grades(provider.list(), course_id)
    return list_filters.sort_grades(grades, sort_by, courses or [])

def get_grade_by_id(provider: RecordProvider, grade_id: int) -> Dict:
    grade = provider.get(grade_id)
    if not grade:
        raise HTTPException(status_code=404, detail="Grade not found")
    return grade

def get_grades_by_course(provider: RecordProvider, course_id: int) -> List[Dict]:
    return list_filters.filter_grades(provider.list(), course_id)

# == GPA (weighted by course credits)
def calculate_gpa(grade_provider: RecordProvider, course_provider: RecordProvider) -> Dict:
    grades = grade_provider.list()
    credits = get_course_credits(course_provider)
    default_credits = settings.DEFAULT_COURSE_CREDITS
    return {
        "gpa": grade_aggregator.calculate_gpa(grades, credits, default_credits),
        "total_credits": grade_aggregator.total_graded_credits(grades, credits, default_credits),
    }

def get_grade_summary(grade_provider: RecordProvider, course_provider: RecordProvider) -> Dict:
    """Everything the grades page shows above the grade table."""
    grades = grade_provider.list()
    courses = course_provider.list()
    credits = {c["id"]: c["credits"] for c in courses if c.get("credits") is not None}
    default_credits = settings.DEFAULT_COURSE_CREDITS

    return {
        "gpa": grade_aggregator.calculate_gpa(grades, credits, default_credits),
        "total_grades": len(grades),
        "average_score": grade_aggregator.average_score(grades),
        "distribution": grade_aggregator.grade_distribution(grades),
        "courses": grade_aggregator.course_breakdown(grades, courses, default_credits),
        "recent": list_filters.recent_grades(grades, limit=3),
    }

# == Create / update / delete
def create_grade(provider: RecordProvider, data: GradeCreate) -> Dict:
    record = data.model_dump(mode="json")
    record["graded_date"] = datetime.now(timezone.utc).isoformat()
    grade = provider.insert(record)
    logger.info("Posted grade #%s for course %s", grade["id"], grade["course_id"])
    return grade

def update_grade(provider: RecordProvider, grade_id: int, data: GradeUpdate) -> Dict:
    grade = provider.update(grade_id, data.model_dump(mode="json", exclude_unset=True))
    if not grade:
        raise HTTPException(status_code=404, detail="Grade not found")
    return grade

def delete_grade(provider: RecordProvider, grade_id: int) -> Dict:
    grade = provider.delete(grade_id)
    if not grade:
        raise HTTPException(status_code=404, detail="Grade not found")
    logger.info("Deleted grade #%s", grade_id)
    return grade
