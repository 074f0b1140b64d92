from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from campus_portal.services.list_filters import group_by_course
from campus_portal.utils.rounding import round_half_up

UNKNOWN_COURSE = "Unknown course"

# (lower bound inclusive, grade points), highest tier first
GPA_SCALE: List[Tuple[float, float]] = [
    (97, 4.0),
    (93, 3.7),
    (90, 3.3),
    (87, 3.0),
    (83, 2.7),
    (80, 2.3),
    (77, 2.0),
    (73, 1.7),
    (70, 1.3),
    (67, 1.0),
    (60, 0.7),
]

LETTER_SCALE: List[Tuple[str, float]] = [
    ("A", 90),
    ("B", 80),
    ("C", 70),
    ("D", 60),
]


def percentage_to_gpa(percentage: float) -> float:
    for lower, points in GPA_SCALE:
        if percentage >= lower:
            return points
    return 0.0


def grade_percentage(grade: Mapping[str, Any]) -> float:
    max_score = grade.get("max_score") or 0
    if max_score <= 0:
        return 0.0
    return grade.get("score", 0) / max_score * 100


def course_weighted_percentage(grades: Iterable[Mapping[str, Any]]) -> float:
    """Weighted percentage of one course's grades; 0 when nothing carries weight."""
    weighted_score = 0.0
    total_weight = 0.0
    for grade in grades:
        if (grade.get("max_score") or 0) <= 0:
            continue
        weight = grade.get("weight") or 0
        weighted_score += grade_percentage(grade) * weight
        total_weight += weight
    if total_weight <= 0:
        return 0.0
    return weighted_score / total_weight


def _has_weight(grades: List[Mapping[str, Any]]) -> bool:
    return sum(g.get("weight") or 0 for g in grades if (g.get("max_score") or 0) > 0) > 0


def calculate_gpa(
    grades: Iterable[Mapping[str, Any]],
    course_credits: Optional[Mapping[Any, int]] = None,
    default_credits: int = 3,
) -> float:
    """
    Credit-weighted GPA over every course that has weighted grades.

    ``course_credits`` comes from the course registry; courses missing from
    it count with ``default_credits``. Returns 0 when there is nothing to
    average.
    """
    course_credits = course_credits or {}
    total_points = 0.0
    total_credits = 0

    for course_id, course_grades in group_by_course(grades).items():
        if not _has_weight(course_grades):
            continue
        points = percentage_to_gpa(course_weighted_percentage(course_grades))
        credits = course_credits.get(course_id, default_credits)
        total_points += points * credits
        total_credits += credits

    if total_credits <= 0:
        return 0.0
    return round_half_up(total_points / total_credits, 2)


def total_graded_credits(
    grades: Iterable[Mapping[str, Any]],
    course_credits: Optional[Mapping[Any, int]] = None,
    default_credits: int = 3,
) -> int:
    course_credits = course_credits or {}
    return sum(
        course_credits.get(course_id, default_credits)
        for course_id, course_grades in group_by_course(grades).items()
        if _has_weight(course_grades)
    )


def letter_for(percentage: float) -> str:
    for letter, lower in LETTER_SCALE:
        if percentage >= lower:
            return letter
    return "F"


def grade_distribution(grades: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    distribution = {"A": 0, "B": 0, "C": 0, "D": 0, "F": 0}
    for grade in grades:
        distribution[letter_for(grade_percentage(grade))] += 1
    return distribution


def average_score(grades: Iterable[Mapping[str, Any]]) -> float:
    percentages = [grade_percentage(g) for g in grades]
    if not percentages:
        return 0.0
    return round_half_up(sum(percentages) / len(percentages), 1)


def course_breakdown(
    grades: Iterable[Mapping[str, Any]],
    courses: Iterable[Mapping[str, Any]],
    default_credits: int = 3,
) -> List[Dict[str, Any]]:
    """Per-course percentage and grade points, only for courses that have grades."""
    courses_by_id = {c.get("id"): c for c in courses}
    breakdown = []
    for course_id, course_grades in group_by_course(grades).items():
        course = courses_by_id.get(course_id)
        percentage = course_weighted_percentage(course_grades)
        breakdown.append({
            "course_id": course_id,
            "course_code": course.get("code", "") if course else "",
            "course_name": course.get("name", UNKNOWN_COURSE) if course else UNKNOWN_COURSE,
            "credits": course.get("credits", default_credits) if course else default_credits,
            "grade_count": len(course_grades),
            "percentage": round_half_up(percentage, 1),
            "grade_points": percentage_to_gpa(percentage),
        })
    return breakdown
