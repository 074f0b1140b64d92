from typing import Literal, Optional
from pydantic import BaseModel, field_validator
import datetime

AttendanceStatus = Literal["present", "absent", "holiday"]

class AttendanceCreate(BaseModel):
    course_id: int
    date: datetime.date
    status: AttendanceStatus
    remarks: Optional[str] = None

class AttendanceUpdate(BaseModel):
    course_id: Optional[int] = None
    date: Optional[datetime.date] = None
    status: Optional[AttendanceStatus] = None
    remarks: Optional[str] = None

    @field_validator("course_id", "date", "status")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class AttendanceResponse(BaseModel):
    id: int
    course_id: int
    date: datetime.date
    status: AttendanceStatus
    remarks: Optional[str] = None

    class Config:
        from_attributes = True

class AttendanceStats(BaseModel):
    total: int
    present: int
    absent: int
    holidays: int
    attendance_rate: float
    standing: str

class CourseAttendanceStats(AttendanceStats):
    course_id: int
    course_code: str
