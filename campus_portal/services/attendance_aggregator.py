from typing import Any, Dict, Iterable, Mapping

from campus_portal.services.list_filters import group_by_course
from campus_portal.utils.rounding import round_half_up

PRESENT = "present"
ABSENT = "absent"
HOLIDAY = "holiday"

# overall figures keep one decimal, per-course figures are whole percents
OVERALL_RATE_DIGITS = 1
COURSE_RATE_DIGITS = 0

STANDINGS = [
    (90, "Excellent"),
    (80, "Good"),
    (70, "Average"),
]


def attendance_rate(present: int, held: int, ndigits: int = OVERALL_RATE_DIGITS) -> float:
    """Percentage of held classes attended; 0 when no class was held."""
    if held <= 0:
        return 0.0
    return round_half_up(present / held * 100, ndigits)


def _tally(records: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    counts = {"total": 0, "present": 0, "absent": 0, "holidays": 0}
    for record in records:
        counts["total"] += 1
        status = record.get("status")
        if status == PRESENT:
            counts["present"] += 1
        elif status == ABSENT:
            counts["absent"] += 1
        elif status == HOLIDAY:
            counts["holidays"] += 1
    return counts


def aggregate(records: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Tally attendance records into present/absent/holiday counts.

    Holidays are days with no class, so they are left out of the rate's
    denominator: ``present / (total - holidays) * 100``.
    """
    stats = _tally(records)
    stats["attendance_rate"] = attendance_rate(
        stats["present"], stats["total"] - stats["holidays"], OVERALL_RATE_DIGITS
    )
    return stats


def per_course_aggregate(
    records: Iterable[Mapping[str, Any]],
    ndigits: int = COURSE_RATE_DIGITS,
) -> Dict[Any, Dict[str, Any]]:
    per_course = {}
    for course_id, course_records in group_by_course(records).items():
        stats = _tally(course_records)
        stats["course_id"] = course_id
        stats["attendance_rate"] = attendance_rate(
            stats["present"], stats["total"] - stats["holidays"], ndigits
        )
        per_course[course_id] = stats
    return per_course


def overall_rate_from_courses(per_course: Mapping[Any, Mapping[str, Any]]) -> float:
    present = sum(s["present"] for s in per_course.values())
    held = sum(s["total"] - s["holidays"] for s in per_course.values())
    return attendance_rate(present, held, COURSE_RATE_DIGITS)


def attendance_standing(rate: float) -> str:
    for lower, label in STANDINGS:
        if rate >= lower:
            return label
    return "Poor"
