from sqlalchemy import Column, Integer, Date, Enum, Text
from campus_portal.db.database import Base
import enum

class AttendanceStatus(enum.Enum):
    present = "present"
    absent = "absent"
    holiday = "holiday"

class Attendance(Base):
    __tablename__ = "ATTENDANCE"

    id = Column(Integer, primary_key=True, autoincrement=True)
    course_id = Column(Integer, nullable=False, index=True)
    date = Column(Date, nullable=False)
    status = Column(Enum(AttendanceStatus), nullable=False)
    remarks = Column(Text)
