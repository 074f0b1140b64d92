import logging
from datetime import datetime
from typing import Dict, List, Optional
from fastapi import HTTPException
from campus_portal.providers.base import RecordProvider
from campus_portal.schemas.assignment_schema import AssignmentCreate, AssignmentUpdate
from campus_portal.services import list_filters

logger = logging.getLogger(__name__)

def get_all_assignments(provider: RecordProvider) -> List[Dict]:
    return provider.list()

def get_assignment_by_id(provider: RecordProvider, assignment_id: int) -> Dict:
    assignment = provider.get(assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")
    return assignment

def get_assignments_by_course(provider: RecordProvider, course_id: int) -> List[Dict]:
    return [a for a in provider.list() if a.get("course_id") == course_id]

def get_upcoming_assignments(provider: RecordProvider, now: Optional[datetime] = None) -> List[Dict]:
    """Unsubmitted assignments due after ``now``, soonest first."""
    return list_filters.upcoming_assignments(provider.list(), now)

def create_assignment(provider: RecordProvider, data: AssignmentCreate) -> Dict:
    record = data.model_dump(mode="json")
    record["submitted"] = False
    record["status"] = "pending"
    assignment = provider.insert(record)
    logger.info("Created assignment #%s for course %s", assignment["id"], assignment["course_id"])
    return assignment

def update_assignment(provider: RecordProvider, assignment_id: int, data: AssignmentUpdate) -> Dict:
    assignment = provider.update(assignment_id, data.model_dump(mode="json", exclude_unset=True))
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")
    return assignment

def submit_assignment(provider: RecordProvider, assignment_id: int) -> Dict:
    assignment = provider.update(assignment_id, {"submitted": True, "status": "submitted"})
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")
    logger.info("Assignment #%s submitted", assignment_id)
    return assignment

def delete_assignment(provider: RecordProvider, assignment_id: int) -> Dict:
    assignment = provider.delete(assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")
    return assignment
