import logging
from datetime import date
from typing import Dict, List, Optional
from fastapi import HTTPException
from campus_portal.providers.base import RecordProvider
from campus_portal.schemas.attendance_schema import AttendanceCreate, AttendanceUpdate
from campus_portal.services import attendance_aggregator, list_filters
from campus_portal.services.grade_aggregator import UNKNOWN_COURSE

logger = logging.getLogger(__name__)

# == Attendance records (newest first)
def get_attendance_records(
    provider: RecordProvider,
    course_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[Dict]:
    records = list_filters.filter_attendance(provider.list(), course_id, start_date, end_date)
    return list_filters.sort_attendance(records)

def get_attendance_by_id(provider: RecordProvider, record_id: int) -> Dict:
    record = provider.get(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Attendance record not found")
    return record

def get_attendance_by_course(provider: RecordProvider, course_id: int) -> List[Dict]:
    return list_filters.filter_attendance(provider.list(), course_id=course_id)

# == Statistics
def get_attendance_stats(provider: RecordProvider, course_id: Optional[int] = None) -> Dict:
    records = provider.list()
    if course_id is not None:
        records = list_filters.filter_attendance(records, course_id=course_id)
    stats = attendance_aggregator.aggregate(records)
    stats["standing"] = attendance_aggregator.attendance_standing(stats["attendance_rate"])
    return stats

def build_course_attendance_stats(records: List[Dict], courses: List[Dict]) -> List[Dict]:
    codes = {c.get("id"): c.get("code") for c in courses}
    course_stats = []
    for course_id, stats in attendance_aggregator.per_course_aggregate(records).items():
        stats["course_code"] = codes.get(course_id) or UNKNOWN_COURSE
        stats["standing"] = attendance_aggregator.attendance_standing(stats["attendance_rate"])
        course_stats.append(stats)
    return course_stats

def get_course_attendance_stats(provider: RecordProvider, course_provider: RecordProvider) -> List[Dict]:
    return build_course_attendance_stats(provider.list(), course_provider.list())

# == Create / update / delete
def create_attendance(provider: RecordProvider, data: AttendanceCreate) -> Dict:
    record = provider.insert(data.model_dump(mode="json"))
    logger.info("Recorded %s for course %s on %s", record["status"], record["course_id"], record["date"])
    return record

def update_attendance(provider: RecordProvider, record_id: int, data: AttendanceUpdate) -> Dict:
    record = provider.update(record_id, data.model_dump(mode="json", exclude_unset=True))
    if not record:
        raise HTTPException(status_code=404, detail="Attendance record not found")
    return record

def delete_attendance(provider: RecordProvider, record_id: int) -> Dict:
    record = provider.delete(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Attendance record not found")
    return record
