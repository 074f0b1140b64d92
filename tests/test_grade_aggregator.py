import unittest

from campus_portal.services.grade_aggregator import (
    GPA_SCALE,
    UNKNOWN_COURSE,
    average_score,
    calculate_gpa,
    course_breakdown,
    course_weighted_percentage,
    grade_distribution,
    percentage_to_gpa,
    total_graded_credits,
)
from tests.support import grade


class PercentageToGpaTests(unittest.TestCase):
    def test_breakpoints_are_inclusive(self):
        expected = {
            97: 4.0, 93: 3.7, 90: 3.3, 87: 3.0, 83: 2.7, 80: 2.3,
            77: 2.0, 73: 1.7, 70: 1.3, 67: 1.0, 60: 0.7,
        }
        for pct, points in expected.items():
            self.assertEqual(percentage_to_gpa(pct), points, pct)

    def test_values_just_below_a_breakpoint_fall_to_the_lower_tier(self):
        self.assertEqual(percentage_to_gpa(93), 3.7)
        self.assertEqual(percentage_to_gpa(92.9), 3.3)
        self.assertEqual(percentage_to_gpa(59.9), 0.0)
        self.assertEqual(percentage_to_gpa(96.99), 3.7)

    def test_extremes(self):
        self.assertEqual(percentage_to_gpa(100), 4.0)
        self.assertEqual(percentage_to_gpa(120), 4.0)
        self.assertEqual(percentage_to_gpa(0), 0.0)
        self.assertEqual(percentage_to_gpa(-5), 0.0)

    def test_monotonic_non_decreasing(self):
        previous = percentage_to_gpa(0)
        for tenth in range(0, 1001):
            current = percentage_to_gpa(tenth / 10)
            self.assertGreaterEqual(current, previous)
            previous = current

    def test_scale_is_ordered_highest_first(self):
        bounds = [lower for lower, _ in GPA_SCALE]
        self.assertEqual(bounds, sorted(bounds, reverse=True))


class CourseWeightedPercentageTests(unittest.TestCase):
    def test_equal_weights(self):
        grades = [grade(1, 90, weight=0.5), grade(1, 80, weight=0.5)]
        pct = course_weighted_percentage(grades)
        self.assertAlmostEqual(pct, 85.0)
        self.assertEqual(percentage_to_gpa(pct), 2.7)

    def test_weights_need_not_sum_to_one(self):
        grades = [grade(1, 45, max_score=50, weight=0.2), grade(1, 70, weight=0.2)]
        self.assertAlmostEqual(course_weighted_percentage(grades), 80.0)

    def test_empty_or_weightless_is_zero(self):
        self.assertEqual(course_weighted_percentage([]), 0.0)
        self.assertEqual(course_weighted_percentage([grade(1, 90, weight=0)]), 0.0)

    def test_non_positive_max_score_is_skipped(self):
        grades = [grade(1, 10, max_score=0, weight=0.5), grade(1, 80, weight=0.5)]
        self.assertAlmostEqual(course_weighted_percentage(grades), 80.0)


class CalculateGpaTests(unittest.TestCase):
    def test_no_grades(self):
        self.assertEqual(calculate_gpa([]), 0)
        self.assertEqual(calculate_gpa([], {1: 3}), 0)

    def test_single_course(self):
        grades = [grade(1, 90, weight=0.5), grade(1, 80, weight=0.5)]
        self.assertEqual(calculate_gpa(grades, {1: 3}), 2.7)

    def test_credit_weighting(self):
        # course 1: 98% -> 4.0 over 1 credit, course 2: 50% -> 0.0 over 3 credits
        grades = [grade(1, 98), grade(2, 50)]
        self.assertEqual(calculate_gpa(grades, {1: 1, 2: 3}), 1.0)
        self.assertEqual(calculate_gpa(grades, {1: 3, 2: 1}), 3.0)

    def test_unknown_course_uses_default_credits(self):
        grades = [grade(1, 98), grade(99, 50)]
        self.assertEqual(calculate_gpa(grades, {1: 3}, default_credits=3), 2.0)
        self.assertEqual(calculate_gpa(grades, {1: 3}, default_credits=1), 3.0)

    def test_rounded_to_two_decimals(self):
        # (4.0 * 3 + 3.7 * 4) / 7 = 3.828...
        grades = [grade(1, 99), grade(2, 95)]
        self.assertEqual(calculate_gpa(grades, {1: 3, 2: 4}), 3.83)

    def test_weightless_course_does_not_count(self):
        grades = [grade(1, 98), grade(2, 10, weight=0)]
        self.assertEqual(calculate_gpa(grades, {1: 3, 2: 4}), 4.0)
        self.assertEqual(total_graded_credits(grades, {1: 3, 2: 4}), 3)

    def test_zero_total_credits(self):
        self.assertEqual(calculate_gpa([grade(1, 98)], {1: 0}), 0)


class GradeStatisticsTests(unittest.TestCase):
    def test_distribution(self):
        grades = [grade(1, s) for s in (95, 90, 85, 75, 65, 30)]
        self.assertEqual(grade_distribution(grades), {"A": 2, "B": 1, "C": 1, "D": 1, "F": 1})

    def test_average_score(self):
        self.assertEqual(average_score([]), 0.0)
        self.assertEqual(average_score([grade(1, 9, max_score=10), grade(1, 40, max_score=50)]), 85.0)

    def test_breakdown_uses_placeholder_for_unknown_course(self):
        courses = [{"id": 1, "code": "CS-301", "name": "Data Structures", "credits": 4}]
        rows = course_breakdown([grade(1, 90), grade(7, 70)], courses, default_credits=3)
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[0]["course_code"], "CS-301")
        self.assertEqual(rows[0]["credits"], 4)
        self.assertEqual(rows[0]["grade_points"], 3.3)
        self.assertEqual(rows[1]["course_name"], UNKNOWN_COURSE)
        self.assertEqual(rows[1]["credits"], 3)
        self.assertEqual(rows[1]["grade_points"], 1.3)


if __name__ == "__main__":
    unittest.main()
