import unittest
from datetime import date, datetime, timezone

from campus_portal.services import list_filters
from campus_portal.providers.memory import load_fixture


def ids(records):
    return [r["id"] for r in records]


class CourseFilterTests(unittest.TestCase):
    def setUp(self):
        self.courses = load_fixture("courses")

    def test_query_matches_name_code_and_professor_case_insensitively(self):
        self.assertEqual(ids(list_filters.filter_courses(self.courses, query="chen")), [1])
        self.assertEqual(ids(list_filters.filter_courses(self.courses, query="cs-3")), [1, 5])
        self.assertEqual(ids(list_filters.filter_courses(self.courses, query="ALGEBRA")), [2])

    def test_department_filter(self):
        self.assertEqual(ids(list_filters.filter_courses(self.courses, department="Computer Science")), [1, 5])

    def test_missing_department_yields_empty_list(self):
        self.assertEqual(list_filters.filter_courses(self.courses, department="Astronomy"), [])

    def test_query_and_filters_compose(self):
        result = list_filters.filter_courses(self.courses, query="dr.", department="Computer Science")
        self.assertEqual(ids(result), [1, 5])
        result = list_filters.filter_courses(self.courses, enrollment_status="waitlisted")
        self.assertEqual(ids(result), [6])

    def test_sort_by_name(self):
        self.assertEqual(ids(list_filters.sort_courses(self.courses, "name")), [1, 5, 6, 2, 4, 3])

    def test_sort_by_credits_descending_is_stable(self):
        self.assertEqual(ids(list_filters.sort_courses(self.courses, "credits")), [2, 4, 1, 3, 5, 6])
        shuffled = [self.courses[i] for i in (5, 2, 0, 3, 4, 1)]
        self.assertEqual(ids(list_filters.sort_courses(shuffled, "credits")), [4, 2, 6, 3, 1, 5])

    def test_unknown_sort_key_keeps_order(self):
        self.assertEqual(ids(list_filters.sort_courses(self.courses, "popularity")), [1, 2, 3, 4, 5, 6])

    def test_departments_in_first_seen_order(self):
        self.assertEqual(
            list_filters.departments(self.courses),
            ["Computer Science", "Mathematics", "English", "Physics", "Psychology"],
        )


class GradeSortTests(unittest.TestCase):
    def setUp(self):
        self.grades = load_fixture("grades")
        self.courses = load_fixture("courses")

    def test_filter_by_course(self):
        self.assertEqual(ids(list_filters.filter_grades(self.grades, 2)), [4, 5, 6])
        self.assertEqual(list_filters.filter_grades(self.grades, 42), [])

    def test_recent_first(self):
        self.assertEqual(ids(list_filters.recent_grades(self.grades, 3)), [12, 3, 10])

    def test_by_score_percentage(self):
        ordered = list_filters.sort_grades(self.grades, "score")
        self.assertEqual(ordered[0]["id"], 8)
        self.assertEqual(ordered[-1]["id"], 5)

    def test_by_course_code_with_unknown_course_last(self):
        grades = [
            {"id": 1, "course_id": 99, "score": 1, "max_score": 1},
            {"id": 2, "course_id": 5, "score": 1, "max_score": 1},
            {"id": 3, "course_id": 1, "score": 1, "max_score": 1},
            {"id": 4, "course_id": 2, "score": 1, "max_score": 1},
        ]
        # CS-301, CS-350, MATH-240, then the unknown course
        self.assertEqual(ids(list_filters.sort_grades(grades, "course", self.courses)), [3, 2, 4, 1])

    def test_by_assignment_name(self):
        ordered = list_filters.sort_grades(self.grades, "assignment")
        names = [g["assignment_name"].casefold() for g in ordered]
        self.assertEqual(names, sorted(names))


class AnnouncementSearchTests(unittest.TestCase):
    def setUp(self):
        self.announcements = load_fixture("announcements")

    def test_newest_first(self):
        self.assertEqual(ids(list_filters.newest_first(self.announcements)), [4, 2, 6, 3, 5, 1])

    def test_text_search_over_title_content_author(self):
        self.assertEqual(ids(list_filters.search_announcements(self.announcements, query="exam")), [5, 1])
        self.assertEqual(ids(list_filters.search_announcements(self.announcements, query="rahman")), [6])

    def test_course_filter_keeps_general_announcements(self):
        self.assertEqual(ids(list_filters.search_announcements(self.announcements, course_id=1)), [2, 3, 5, 1])

    def test_general_only(self):
        self.assertEqual(ids(list_filters.search_announcements(self.announcements, general_only=True)), [3, 5, 1])

    def test_category_and_priority(self):
        result = list_filters.search_announcements(self.announcements, category="administrative", priority="high")
        self.assertEqual(ids(result), [4])
        self.assertEqual(list_filters.search_announcements(self.announcements, category="sports"), [])


class AttendanceAndAssignmentTests(unittest.TestCase):
    def test_date_range_and_course(self):
        records = load_fixture("attendance")
        result = list_filters.filter_attendance(records, 1, date(2026, 9, 9), date(2026, 9, 16))
        self.assertEqual(ids(result), [2, 3, 4])
        self.assertEqual(ids(list_filters.sort_attendance(result)), [4, 3, 2])

    def test_upcoming_assignments(self):
        now = datetime(2026, 10, 19, tzinfo=timezone.utc)
        upcoming = list_filters.upcoming_assignments(load_fixture("assignments"), now)
        self.assertEqual(ids(upcoming), [2, 4, 1])

    def test_parse_timestamp_accepts_mixed_inputs(self):
        self.assertEqual(
            list_filters.parse_timestamp("2026-09-01T10:00:00Z"),
            datetime(2026, 9, 1, 10, tzinfo=timezone.utc),
        )
        self.assertEqual(list_filters.parse_timestamp(date(2026, 9, 1)), datetime(2026, 9, 1, tzinfo=timezone.utc))
        self.assertEqual(list_filters.parse_timestamp(None), list_filters.EPOCH)
        self.assertEqual(list_filters.parse_timestamp("not a date"), list_filters.EPOCH)


if __name__ == "__main__":
    unittest.main()
