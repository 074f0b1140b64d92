from typing import List, Literal, Optional
from fastapi import APIRouter, Depends
from campus_portal.providers.base import RecordProvider
from campus_portal.providers.registry import course_records
from campus_portal.schemas.course_schema import CourseCreate, CourseUpdate, CourseResponse, CourseSummary
from campus_portal.services.course_service import (
    get_all_courses,
    get_course_by_id,
    get_enrolled_courses,
    get_course_summary,
    create_course,
    update_course,
    delete_course
)

router = APIRouter()

@router.get("", response_model=List[CourseResponse])
def list_courses(
    query: Optional[str] = None,
    department: Optional[str] = None,
    enrollment_status: Optional[Literal["enrolled", "waitlisted"]] = None,
    sort_by: Literal["name", "code", "professor", "credits"] = "name",
    provider: RecordProvider = Depends(course_records),
):
    return get_all_courses(provider, query, department, enrollment_status, sort_by)

@router.get("/enrolled", response_model=List[CourseResponse])
def list_enrolled_courses(provider: RecordProvider = Depends(course_records)):
    return get_enrolled_courses(provider)

@router.get("/summary", response_model=CourseSummary)
def course_summary(provider: RecordProvider = Depends(course_records)):
    return get_course_summary(provider)

@router.get("/{course_id}", response_model=CourseResponse)
def get_course(course_id: int, provider: RecordProvider = Depends(course_records)):
    return get_course_by_id(provider, course_id)

@router.post("", response_model=CourseResponse, status_code=201)
def create_course_endpoint(data: CourseCreate, provider: RecordProvider = Depends(course_records)):
    return create_course(provider, data)

@router.put("/{course_id}", response_model=CourseResponse)
def update_course_endpoint(course_id: int, data: CourseUpdate, provider: RecordProvider = Depends(course_records)):
    return update_course(provider, course_id, data)

@router.delete("/{course_id}", response_model=CourseResponse)
def delete_course_endpoint(course_id: int, provider: RecordProvider = Depends(course_records)):
    return delete_course(provider, course_id)
