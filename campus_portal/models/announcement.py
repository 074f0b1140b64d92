from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from datetime import datetime
from campus_portal.db.database import Base
import enum

class AnnouncementPriority(enum.Enum):
    high = "high"
    medium = "medium"
    low = "low"

class Announcement(Base):
    __tablename__ = "ANNOUNCEMENTS"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)
    priority = Column(Enum(AnnouncementPriority), default=AnnouncementPriority.medium, nullable=False)
    author = Column(String(100), nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False)
    # NULL means a general announcement
    course_id = Column(Integer, nullable=True)
