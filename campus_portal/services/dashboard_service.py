import logging
from typing import Dict, List
from campus_portal.core.config import settings
from campus_portal.providers.base import RecordProvider, RecordProviderError
from campus_portal.services import attendance_aggregator, grade_aggregator, list_filters
from campus_portal.services.attendance_service import build_course_attendance_stats

logger = logging.getLogger(__name__)

RECENT_ANNOUNCEMENTS = 4
RECENT_GRADES = 5


def fetch_or_empty(provider: RecordProvider, notices: List[str]) -> List[Dict]:
    """
    Load every record of one provider for a dashboard widget.

    A failing store must not take the whole dashboard down: the error is
    logged, a notice is added for the client and the widget gets an empty
    list, which the aggregators turn into zero values.
    """
    try:
        return provider.list()
    except RecordProviderError as e:
        logger.warning("Dashboard fetch failed for %s: %s", provider.resource, e)
        notices.append(f"Failed to load {provider.resource}. Please try again.")
        return []


# == Student dashboard
def get_student_dashboard(
    course_provider: RecordProvider,
    grade_provider: RecordProvider,
    attendance_provider: RecordProvider,
    assignment_provider: RecordProvider,
    announcement_provider: RecordProvider,
) -> Dict:
    notices: List[str] = []
    courses = fetch_or_empty(course_provider, notices)
    grades = fetch_or_empty(grade_provider, notices)
    attendance = fetch_or_empty(attendance_provider, notices)
    assignments = fetch_or_empty(assignment_provider, notices)
    announcements = fetch_or_empty(announcement_provider, notices)

    enrolled = [c for c in courses if c.get("enrollment_status") == "enrolled"]
    credits = {c["id"]: c["credits"] for c in courses if c.get("credits") is not None}
    upcoming = list_filters.upcoming_assignments(assignments)
    course_attendance = build_course_attendance_stats(attendance, courses)
    per_course = {s["course_id"]: s for s in course_attendance}

    return {
        "overview": {
            "gpa": grade_aggregator.calculate_gpa(grades, credits, settings.DEFAULT_COURSE_CREDITS),
            "total_courses": len(enrolled),
            "pending_assignments": len(upcoming),
            "attendance_rate": attendance_aggregator.overall_rate_from_courses(per_course),
        },
        "courses": enrolled,
        "upcoming_assignments": upcoming,
        "course_attendance": course_attendance,
        "announcements": list_filters.newest_first(announcements)[:RECENT_ANNOUNCEMENTS],
        "notices": notices,
    }


# == Faculty dashboard
def get_faculty_dashboard(course_provider: RecordProvider, grade_provider: RecordProvider) -> Dict:
    notices: List[str] = []
    courses = fetch_or_empty(course_provider, notices)
    grades = fetch_or_empty(grade_provider, notices)

    return {
        "overview": {
            "total_courses": len(courses),
            "total_grades": len(grades),
            "average_score": grade_aggregator.average_score(grades),
        },
        "courses": courses,
        "recent_grades": list_filters.recent_grades(grades, limit=RECENT_GRADES),
        "notices": notices,
    }
