from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends
from campus_portal.providers.base import RecordProvider
from campus_portal.providers.registry import attendance_records, course_records
from campus_portal.schemas.attendance_schema import (
    AttendanceCreate,
    AttendanceUpdate,
    AttendanceResponse,
    AttendanceStats,
    CourseAttendanceStats
)
from campus_portal.services.attendance_service import (
    get_attendance_records,
    get_attendance_by_id,
    get_attendance_by_course,
    get_attendance_stats,
    get_course_attendance_stats,
    create_attendance,
    update_attendance,
    delete_attendance
)

router = APIRouter()

@router.get("", response_model=List[AttendanceResponse])
def list_attendance(
    course_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    provider: RecordProvider = Depends(attendance_records),
):
    return get_attendance_records(provider, course_id, start_date, end_date)

@router.get("/stats", response_model=AttendanceStats)
def attendance_stats(course_id: Optional[int] = None, provider: RecordProvider = Depends(attendance_records)):
    return get_attendance_stats(provider, course_id)

@router.get("/stats/courses", response_model=List[CourseAttendanceStats])
def course_attendance_stats(
    provider: RecordProvider = Depends(attendance_records),
    courses: RecordProvider = Depends(course_records),
):
    return get_course_attendance_stats(provider, courses)

@router.get("/course/{course_id}", response_model=List[AttendanceResponse])
def list_course_attendance(course_id: int, provider: RecordProvider = Depends(attendance_records)):
    return get_attendance_by_course(provider, course_id)

@router.get("/{record_id}", response_model=AttendanceResponse)
def get_attendance(record_id: int, provider: RecordProvider = Depends(attendance_records)):
    return get_attendance_by_id(provider, record_id)

@router.post("", response_model=AttendanceResponse, status_code=201)
def record_attendance(data: AttendanceCreate, provider: RecordProvider = Depends(attendance_records)):
    return create_attendance(provider, data)

@router.put("/{record_id}", response_model=AttendanceResponse)
def update_attendance_endpoint(record_id: int, data: AttendanceUpdate, provider: RecordProvider = Depends(attendance_records)):
    return update_attendance(provider, record_id, data)

@router.delete("/{record_id}", response_model=AttendanceResponse)
def delete_attendance_endpoint(record_id: int, provider: RecordProvider = Depends(attendance_records)):
    return delete_attendance(provider, record_id)
