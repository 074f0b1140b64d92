from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

class GradeCreate(BaseModel):
    course_id: int
    assignment_name: str
    score: float = Field(ge=0)
    max_score: float = Field(gt=0)
    weight: float = Field(ge=0)

class GradeUpdate(BaseModel):
    course_id: Optional[int] = None
    assignment_name: Optional[str] = None
    score: Optional[float] = Field(default=None, ge=0)
    max_score: Optional[float] = Field(default=None, gt=0)
    weight: Optional[float] = Field(default=None, ge=0)

    @field_validator("course_id", "assignment_name", "score", "max_score", "weight")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class GradeResponse(BaseModel):
    id: int
    course_id: int
    assignment_name: str
    score: float
    max_score: float
    weight: float
    graded_date: Optional[datetime] = None

    class Config:
        from_attributes = True

class GPAResponse(BaseModel):
    gpa: float
    total_credits: int

class CourseGradeBreakdown(BaseModel):
    course_id: int
    course_code: str
    course_name: str
    credits: int
    grade_count: int
    percentage: float
    grade_points: float

class GradeSummary(BaseModel):
    gpa: float
    total_grades: int
    average_score: float
    distribution: Dict[str, int]
    courses: List[CourseGradeBreakdown]
    recent: List[GradeResponse]
