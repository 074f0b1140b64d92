from typing import List, Literal, Optional
from fastapi import APIRouter, Depends
from campus_portal.providers.base import RecordProvider
from campus_portal.providers.registry import course_records, grade_records
from campus_portal.schemas.grade_schema import GradeCreate, GradeUpdate, GradeResponse, GPAResponse, GradeSummary
from campus_portal.services.grade_service import (
    get_all_grades,
    get_grade_by_id,
    get_grades_by_course,
    calculate_gpa,
    get_grade_summary,
    create_grade,
    update_grade,
    delete_grade
)

router = APIRouter()

@router.get("", response_model=List[GradeResponse])
def list_grades(
    course_id: Optional[int] = None,
    sort_by: Literal["recent", "course", "score", "assignment"] = "recent",
    provider: RecordProvider = Depends(grade_records),
    courses: RecordProvider = Depends(course_records),
):
    # course codes are only needed to order by course
    course_list = courses.list() if sort_by == "course" else []
    return get_all_grades(provider, course_id, sort_by, course_list)

@router.get("/gpa", response_model=GPAResponse)
def get_gpa(
    provider: RecordProvider = Depends(grade_records),
    courses: RecordProvider = Depends(course_records),
):
    return calculate_gpa(provider, courses)

@router.get("/summary", response_model=GradeSummary)
def grade_summary(
    provider: RecordProvider = Depends(grade_records),
    courses: RecordProvider = Depends(course_records),
):
    return get_grade_summary(provider, courses)

@router.get("/course/{course_id}", response_model=List[GradeResponse])
def list_course_grades(course_id: int, provider: RecordProvider = Depends(grade_records)):
    return get_grades_by_course(provider, course_id)

@router.get("/{grade_id}", response_model=GradeResponse)
def get_grade(grade_id: int, provider: RecordProvider = Depends(grade_records)):
    return get_grade_by_id(provider, grade_id)

@router.post("", response_model=GradeResponse, status_code=201)
def post_grade(data: GradeCreate, provider: RecordProvider = Depends(grade_records)):
    return create_grade(provider, data)

@router.put("/{grade_id}", response_model=GradeResponse)
def update_grade_endpoint(grade_id: int, data: GradeUpdate, provider: RecordProvider = Depends(grade_records)):
    return update_grade(provider, grade_id, data)

@router.delete("/{grade_id}", response_model=GradeResponse)
def delete_grade_endpoint(grade_id: int, provider: RecordProvider = Depends(grade_records)):
    return delete_grade(provider, grade_id)
