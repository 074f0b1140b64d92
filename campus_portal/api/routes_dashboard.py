from fastapi import APIRouter, Depends
from campus_portal.providers.base import RecordProvider
from campus_portal.providers.registry import (
    announcement_records,
    assignment_records,
    attendance_records,
    course_records,
    grade_records
)
from campus_portal.schemas.dashboard_schema import StudentDashboard, FacultyDashboard
from campus_portal.services.dashboard_service import get_student_dashboard, get_faculty_dashboard

router = APIRouter()

@router.get("/student", response_model=StudentDashboard)
def student_dashboard(
    courses: RecordProvider = Depends(course_records),
    grades: RecordProvider = Depends(grade_records),
    attendance: RecordProvider = Depends(attendance_records),
    assignments: RecordProvider = Depends(assignment_records),
    announcements: RecordProvider = Depends(announcement_records),
):
    return get_student_dashboard(courses, grades, attendance, assignments, announcements)

@router.get("/faculty", response_model=FacultyDashboard)
def faculty_dashboard(
    courses: RecordProvider = Depends(course_records),
    grades: RecordProvider = Depends(grade_records),
):
    return get_faculty_dashboard(courses, grades)
