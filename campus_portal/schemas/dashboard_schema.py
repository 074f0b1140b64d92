from typing import List
from pydantic import BaseModel
from campus_portal.schemas.course_schema import CourseResponse
from campus_portal.schemas.grade_schema import GradeResponse
from campus_portal.schemas.attendance_schema import CourseAttendanceStats
from campus_portal.schemas.assignment_schema import AssignmentResponse
from campus_portal.schemas.announcement_schema import AnnouncementResponse

class StudentOverview(BaseModel):
    gpa: float
    total_courses: int
    pending_assignments: int
    attendance_rate: float

class StudentDashboard(BaseModel):
    overview: StudentOverview
    courses: List[CourseResponse]
    upcoming_assignments: List[AssignmentResponse]
    course_attendance: List[CourseAttendanceStats]
    announcements: List[AnnouncementResponse]
    notices: List[str] = []

class FacultyOverview(BaseModel):
    total_courses: int
    total_grades: int
    average_score: float

class FacultyDashboard(BaseModel):
    overview: FacultyOverview
    courses: List[CourseResponse]
    recent_grades: List[GradeResponse]
    notices: List[str] = []
