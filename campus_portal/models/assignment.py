from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Enum
from campus_portal.db.database import Base
import enum

class AssignmentStatus(enum.Enum):
    pending = "pending"
    submitted = "submitted"
    graded = "graded"

class Assignment(Base):
    __tablename__ = "ASSIGNMENTS"

    id = Column(Integer, primary_key=True, autoincrement=True)
    course_id = Column(Integer, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    due_date = Column(DateTime, nullable=False)
    submitted = Column(Boolean, default=False, nullable=False)
    status = Column(Enum(AssignmentStatus), default=AssignmentStatus.pending, nullable=False)
