from sqlalchemy import Column, Integer, String, Text, JSON, Enum
from campus_portal.db.database import Base
import enum

class EnrollmentStatus(enum.Enum):
    enrolled = "enrolled"
    waitlisted = "waitlisted"

class Course(Base):
    __tablename__ = "COURSES"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(20), nullable=False)
    name = Column(String(150), nullable=False)
    credits = Column(Integer, nullable=False, default=3)
    department = Column(String(100), nullable=False)
    professor = Column(String(100), nullable=False)
    schedule = Column(JSON, nullable=False, default=list)
    enrollment_status = Column(Enum(EnrollmentStatus), default=EnrollmentStatus.enrolled, nullable=False)
    semester = Column(String(50))
    description = Column(Text)
