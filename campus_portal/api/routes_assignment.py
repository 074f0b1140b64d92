from typing import List
from fastapi import APIRouter, Depends
from campus_portal.providers.base import RecordProvider
from campus_portal.providers.registry import assignment_records
from campus_portal.schemas.assignment_schema import AssignmentCreate, AssignmentUpdate, AssignmentResponse
from campus_portal.services.assignment_service import (
    get_all_assignments,
    get_assignment_by_id,
    get_assignments_by_course,
    get_upcoming_assignments,
    create_assignment,
    update_assignment,
    submit_assignment,
    delete_assignment
)

router = APIRouter()

@router.get("", response_model=List[AssignmentResponse])
def list_assignments(provider: RecordProvider = Depends(assignment_records)):
    return get_all_assignments(provider)

@router.get("/upcoming", response_model=List[AssignmentResponse])
def upcoming(provider: RecordProvider = Depends(assignment_records)):
    return get_upcoming_assignments(provider)

@router.get("/course/{course_id}", response_model=List[AssignmentResponse])
def by_course(course_id: int, provider: RecordProvider = Depends(assignment_records)):
    return get_assignments_by_course(provider, course_id)

@router.get("/{assignment_id}", response_model=AssignmentResponse)
def get_assignment(assignment_id: int, provider: RecordProvider = Depends(assignment_records)):
    return get_assignment_by_id(provider, assignment_id)

@router.post("", response_model=AssignmentResponse, status_code=201)
def create_assignment_endpoint(data: AssignmentCreate, provider: RecordProvider = Depends(assignment_records)):
    return create_assignment(provider, data)

@router.put("/{assignment_id}", response_model=AssignmentResponse)
def update_assignment_endpoint(assignment_id: int, data: AssignmentUpdate, provider: RecordProvider = Depends(assignment_records)):
    return update_assignment(provider, assignment_id, data)

@router.post("/{assignment_id}/submit", response_model=AssignmentResponse)
def submit(assignment_id: int, provider: RecordProvider = Depends(assignment_records)):
    return submit_assignment(provider, assignment_id)

@router.delete("/{assignment_id}", response_model=AssignmentResponse)
def delete_assignment_endpoint(assignment_id: int, provider: RecordProvider = Depends(assignment_records)):
    return delete_assignment(provider, assignment_id)
