from typing import Literal, Optional
from pydantic import BaseModel, field_validator
from datetime import datetime

Priority = Literal["high", "medium", "low"]

class AnnouncementCreate(BaseModel):
    title: str
    content: str
    category: str
    priority: Priority = "medium"
    author: str
    course_id: Optional[int] = None

class AnnouncementUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None
    author: Optional[str] = None
    course_id: Optional[int] = None

    # course_id stays nullable: null turns it into a general announcement
    @field_validator("title", "content", "category", "priority", "author")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class AnnouncementResponse(BaseModel):
    id: int
    title: str
    content: str
    category: str
    priority: Priority
    author: str
    timestamp: datetime
    course_id: Optional[int] = None

    class Config:
        from_attributes = True

class AnnouncementCounts(BaseModel):
    total: int
    high: int
    academic: int
    recent: int
