from sqlalchemy import Column, Integer, Float, String, DateTime
from datetime import datetime
from campus_portal.db.database import Base

class Grade(Base):
    __tablename__ = "GRADES"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # no FK: orphaned course ids are tolerated and shown as "Unknown course"
    course_id = Column(Integer, nullable=False, index=True)
    assignment_name = Column(String(200), nullable=False)
    score = Column(Float, nullable=False)
    max_score = Column(Float, nullable=False)
    weight = Column(Float, nullable=False)
    graded_date = Column(DateTime, default=datetime.utcnow, nullable=False)
