from typing import Literal, Optional
from pydantic import BaseModel, field_validator
from datetime import datetime

AssignmentStatus = Literal["pending", "submitted", "graded"]

class AssignmentCreate(BaseModel):
    course_id: int
    title: str
    due_date: datetime
    description: Optional[str] = None

class AssignmentUpdate(BaseModel):
    course_id: Optional[int] = None
    title: Optional[str] = None
    due_date: Optional[datetime] = None
    description: Optional[str] = None
    submitted: Optional[bool] = None
    status: Optional[AssignmentStatus] = None

    @field_validator("course_id", "title", "due_date", "submitted", "status")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class AssignmentResponse(BaseModel):
    id: int
    course_id: int
    title: str
    due_date: datetime
    submitted: bool
    status: AssignmentStatus
    description: Optional[str] = None

    class Config:
        from_attributes = True
