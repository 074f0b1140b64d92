from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

EnrollmentStatus = Literal["enrolled", "waitlisted"]

class CourseCreate(BaseModel):
    code: str
    name: str
    credits: int = Field(default=3, ge=0)
    department: str
    professor: str
    schedule: List[str] = []
    semester: Optional[str] = None
    description: Optional[str] = None

class CourseUpdate(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    credits: Optional[int] = Field(default=None, ge=0)
    department: Optional[str] = None
    professor: Optional[str] = None
    schedule: Optional[List[str]] = None
    enrollment_status: Optional[EnrollmentStatus] = None
    semester: Optional[str] = None
    description: Optional[str] = None

    @field_validator("code", "name", "credits", "department", "professor", "schedule", "enrollment_status")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class CourseResponse(BaseModel):
    id: int
    code: str
    name: str
    credits: int
    department: str
    professor: str
    schedule: List[str] = []
    enrollment_status: EnrollmentStatus
    semester: Optional[str] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True

class CourseSummary(BaseModel):
    total: int
    enrolled: int
    waitlisted: int
    departments: List[str]
