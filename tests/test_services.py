import unittest
from datetime import datetime, timezone

from fastapi import HTTPException

from campus_portal.providers.registry import ANNOUNCEMENTS, ASSIGNMENTS, ATTENDANCE, COURSES, GRADES
from campus_portal.schemas.announcement_schema import AnnouncementCreate, AnnouncementUpdate
from campus_portal.schemas.assignment_schema import AssignmentCreate
from campus_portal.schemas.course_schema import CourseCreate, CourseUpdate
from campus_portal.schemas.grade_schema import GradeCreate
from campus_portal.services import (
    announcement_service,
    assignment_service,
    attendance_service,
    course_service,
    grade_service,
)
from tests.support import fixture_providers


class CourseServiceTests(unittest.TestCase):
    def setUp(self):
        self.courses = fixture_providers()[COURSES]

    def test_credits_lookup(self):
        self.assertEqual(course_service.get_course_credits(self.courses), {1: 3, 2: 4, 3: 3, 4: 4, 5: 3, 6: 3})

    def test_summary(self):
        summary = course_service.get_course_summary(self.courses)
        self.assertEqual(summary["total"], 6)
        self.assertEqual(summary["enrolled"], 5)
        self.assertEqual(summary["waitlisted"], 1)

    def test_create_forces_enrolled(self):
        course = course_service.create_course(self.courses, CourseCreate(
            code="CS-501", name="Advanced Data Structures", credits=3,
            department="Computer Science", professor="Dr. Sarah Chen",
        ))
        self.assertEqual(course["id"], 7)
        self.assertEqual(course["enrollment_status"], "enrolled")

    def test_update_and_missing(self):
        course = course_service.update_course(self.courses, 6, CourseUpdate(enrollment_status="enrolled"))
        self.assertEqual(course["enrollment_status"], "enrolled")
        self.assertEqual(course["code"], "PSY-101")
        with self.assertRaises(HTTPException) as ctx:
            course_service.get_course_by_id(self.courses, 404)
        self.assertEqual(ctx.exception.status_code, 404)


class GradeServiceTests(unittest.TestCase):
    def setUp(self):
        providers = fixture_providers()
        self.grades = providers[GRADES]
        self.courses = providers[COURSES]

    def test_gpa_uses_course_credits(self):
        # course GPAs 3.0, 2.0, 3.7, 1.3, 3.3 over 3, 4, 3, 4, 3 credits
        self.assertEqual(grade_service.calculate_gpa(self.grades, self.courses), {"gpa": 2.54, "total_credits": 17})

    def test_summary(self):
        summary = grade_service.get_grade_summary(self.grades, self.courses)
        self.assertEqual(summary["total_grades"], 12)
        self.assertEqual(summary["average_score"], 86.1)
        self.assertEqual(summary["distribution"], {"A": 6, "B": 2, "C": 4, "D": 0, "F": 0})
        self.assertEqual([g["id"] for g in summary["recent"]], [12, 3, 10])
        by_course = {row["course_id"]: row for row in summary["courses"]}
        self.assertEqual(by_course[4]["grade_points"], 1.3)
        self.assertEqual(by_course[3]["percentage"], 96.4)

    def test_create_stamps_graded_date(self):
        grade = grade_service.create_grade(self.grades, GradeCreate(
            course_id=1, assignment_name="Quiz 2", score=45, max_score=50, weight=0.1,
        ))
        self.assertEqual(grade["id"], 13)
        self.assertTrue(grade["graded_date"])

    def test_gpa_with_no_grades(self):
        for record in self.grades.list():
            self.grades.delete(record["id"])
        self.assertEqual(grade_service.calculate_gpa(self.grades, self.courses)["gpa"], 0)


class AttendanceServiceTests(unittest.TestCase):
    def setUp(self):
        providers = fixture_providers()
        self.attendance = providers[ATTENDANCE]
        self.courses = providers[COURSES]

    def test_overall_stats(self):
        stats = attendance_service.get_attendance_stats(self.attendance)
        self.assertEqual(stats["total"], 20)
        self.assertEqual(stats["present"], 14)
        self.assertEqual(stats["absent"], 4)
        self.assertEqual(stats["holidays"], 2)
        self.assertEqual(stats["attendance_rate"], 77.8)
        self.assertEqual(stats["standing"], "Average")

    def test_course_stats(self):
        stats = attendance_service.get_attendance_stats(self.attendance, course_id=3)
        self.assertEqual(stats["attendance_rate"], 100.0)
        self.assertEqual(stats["standing"], "Excellent")

    def test_per_course_stats(self):
        rows = {s["course_id"]: s for s in attendance_service.get_course_attendance_stats(self.attendance, self.courses)}
        self.assertEqual(rows[1]["attendance_rate"], 75)
        self.assertEqual(rows[4]["attendance_rate"], 67)
        self.assertEqual(rows[4]["course_code"], "PHYS-201")

    def test_orphaned_course_gets_placeholder(self):
        self.attendance.insert({"course_id": 77, "date": "2026-09-30", "status": "present"})
        rows = {s["course_id"]: s for s in attendance_service.get_course_attendance_stats(self.attendance, self.courses)}
        self.assertEqual(rows[77]["course_code"], "Unknown course")


class AnnouncementServiceTests(unittest.TestCase):
    def setUp(self):
        self.announcements = fixture_providers()[ANNOUNCEMENTS]

    def test_counts(self):
        now = datetime(2026, 10, 15, tzinfo=timezone.utc)
        self.assertEqual(
            announcement_service.get_announcement_counts(self.announcements, now),
            {"total": 6, "high": 2, "academic": 2, "recent": 3},
        )

    def test_recent_limit(self):
        recent = announcement_service.get_recent_announcements(self.announcements, limit=2)
        self.assertEqual([a["id"] for a in recent], [4, 2])

    def test_create_then_make_general(self):
        created = announcement_service.create_announcement(self.announcements, AnnouncementCreate(
            title="Quiz moved", content="Quiz 3 moves to Friday.", category="academic",
            priority="low", author="Dr. Sarah Chen", course_id=1,
        ))
        self.assertEqual(created["id"], 7)
        updated = announcement_service.update_announcement(
            self.announcements, created["id"], AnnouncementUpdate(course_id=None)
        )
        self.assertIsNone(updated["course_id"])
        self.assertEqual(updated["title"], "Quiz moved")


class AssignmentServiceTests(unittest.TestCase):
    def setUp(self):
        self.assignments = fixture_providers()[ASSIGNMENTS]

    def test_upcoming(self):
        now = datetime(2026, 10, 19, tzinfo=timezone.utc)
        upcoming = assignment_service.get_upcoming_assignments(self.assignments, now)
        self.assertEqual([a["id"] for a in upcoming], [2, 4, 1])

    def test_create_and_submit(self):
        created = assignment_service.create_assignment(self.assignments, AssignmentCreate(
            course_id=2, title="Problem Set 5", due_date=datetime(2027, 11, 20, tzinfo=timezone.utc),
        ))
        self.assertFalse(created["submitted"])
        self.assertEqual(created["status"], "pending")
        submitted = assignment_service.submit_assignment(self.assignments, created["id"])
        self.assertTrue(submitted["submitted"])
        self.assertEqual(submitted["status"], "submitted")

    def test_submit_missing(self):
        with self.assertRaises(HTTPException):
            assignment_service.submit_assignment(self.assignments, 999)


if __name__ == "__main__":
    unittest.main()
