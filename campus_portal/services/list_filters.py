"""
List narrowing and ordering used by the course, grade, attendance,
announcement and assignment endpoints.

All helpers take and return plain lists of record dicts. Sorting relies on
Python's stable sort, so records that compare equal keep their input order
(also when sorting in descending order).
"""
from collections import OrderedDict
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

Record = Dict[str, Any]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

GENERAL = "general"


def parse_timestamp(value: Any) -> datetime:
    """ISO string / date / datetime -> aware datetime (naive values are taken as UTC)."""
    if value is None or value == "":
        return EPOCH
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return EPOCH
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def text_key(value: Any) -> str:
    # case-insensitive collation, close to what a browser's localeCompare gives
    return str(value or "").casefold()


def matches_query(record: Mapping[str, Any], query: Optional[str], fields: Sequence[str]) -> bool:
    if not query:
        return True
    q = query.casefold()
    return any(q in str(record.get(f) or "").casefold() for f in fields)


def group_by_course(records: Iterable[Mapping[str, Any]]) -> "OrderedDict[Any, List[Mapping[str, Any]]]":
    groups: "OrderedDict[Any, List[Mapping[str, Any]]]" = OrderedDict()
    for record in records:
        groups.setdefault(record.get("course_id"), []).append(record)
    return groups


# == Courses

COURSE_SEARCH_FIELDS = ("name", "code", "professor")


def filter_courses(
    courses: Iterable[Record],
    query: Optional[str] = None,
    department: Optional[str] = None,
    enrollment_status: Optional[str] = None,
) -> List[Record]:
    filtered = [c for c in courses if matches_query(c, query, COURSE_SEARCH_FIELDS)]
    if department:
        filtered = [c for c in filtered if c.get("department") == department]
    if enrollment_status:
        filtered = [c for c in filtered if c.get("enrollment_status") == enrollment_status]
    return filtered


def sort_courses(courses: Iterable[Record], sort_by: Optional[str] = "name") -> List[Record]:
    courses = list(courses)
    if sort_by in ("name", "code", "professor"):
        return sorted(courses, key=lambda c: text_key(c.get(sort_by)))
    if sort_by == "credits":
        return sorted(courses, key=lambda c: c.get("credits") or 0, reverse=True)
    return courses


def departments(courses: Iterable[Record]) -> List[str]:
    seen = []
    for course in courses:
        dept = course.get("department")
        if dept and dept not in seen:
            seen.append(dept)
    return seen


# == Grades

def filter_grades(grades: Iterable[Record], course_id: Optional[int] = None) -> List[Record]:
    if course_id is None:
        return list(grades)
    return [g for g in grades if g.get("course_id") == course_id]


def _score_ratio(grade: Mapping[str, Any]) -> float:
    max_score = grade.get("max_score") or 0
    return grade.get("score", 0) / max_score if max_score > 0 else 0.0


def sort_grades(
    grades: Iterable[Record],
    sort_by: Optional[str] = "recent",
    courses: Iterable[Record] = (),
) -> List[Record]:
    grades = list(grades)
    if sort_by == "recent":
        return sorted(grades, key=lambda g: parse_timestamp(g.get("graded_date")), reverse=True)
    if sort_by == "score":
        return sorted(grades, key=_score_ratio, reverse=True)
    if sort_by == "assignment":
        return sorted(grades, key=lambda g: text_key(g.get("assignment_name")))
    if sort_by == "course":
        codes = {c.get("id"): text_key(c.get("code")) for c in courses}
        # grades of unknown courses go last, in input order
        return sorted(
            grades,
            key=lambda g: (0, codes[g.get("course_id")]) if g.get("course_id") in codes else (1, ""),
        )
    return grades


def recent_grades(grades: Iterable[Record], limit: int = 3) -> List[Record]:
    return sort_grades(grades, "recent")[:limit]


# == Attendance

def filter_attendance(
    records: Iterable[Record],
    course_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[Record]:
    filtered = list(records)
    if start_date is not None:
        start = parse_timestamp(start_date)
        filtered = [r for r in filtered if parse_timestamp(r.get("date")) >= start]
    if end_date is not None:
        end = parse_timestamp(end_date)
        filtered = [r for r in filtered if parse_timestamp(r.get("date")) <= end]
    if course_id is not None:
        filtered = [r for r in filtered if r.get("course_id") == course_id]
    return filtered


def sort_attendance(records: Iterable[Record]) -> List[Record]:
    return sorted(records, key=lambda r: parse_timestamp(r.get("date")), reverse=True)


# == Announcements

ANNOUNCEMENT_SEARCH_FIELDS = ("title", "content", "author")


def newest_first(announcements: Iterable[Record]) -> List[Record]:
    return sorted(announcements, key=lambda a: parse_timestamp(a.get("timestamp")), reverse=True)


def search_announcements(
    announcements: Iterable[Record],
    query: Optional[str] = None,
    category: Optional[str] = None,
    priority: Optional[str] = None,
    course_id: Optional[int] = None,
    general_only: bool = False,
) -> List[Record]:
    """
    Text search plus exact filters, newest first.

    A ``course_id`` keeps that course's announcements together with the
    general ones (no course); ``general_only`` keeps only the general ones.
    """
    filtered = [a for a in announcements if matches_query(a, query, ANNOUNCEMENT_SEARCH_FIELDS)]
    if category:
        filtered = [a for a in filtered if a.get("category") == category]
    if priority:
        filtered = [a for a in filtered if a.get("priority") == priority]
    if general_only:
        filtered = [a for a in filtered if a.get("course_id") is None]
    elif course_id is not None:
        filtered = [a for a in filtered if a.get("course_id") in (course_id, None)]
    return newest_first(filtered)


# == Assignments

def upcoming_assignments(assignments: Iterable[Record], now: Optional[datetime] = None) -> List[Record]:
    now = now or datetime.now(timezone.utc)
    upcoming = [
        a for a in assignments
        if parse_timestamp(a.get("due_date")) > now and not a.get("submitted")
    ]
    return sorted(upcoming, key=lambda a: parse_timestamp(a.get("due_date")))
