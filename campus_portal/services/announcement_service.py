import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from fastapi import HTTPException
from campus_portal.providers.base import RecordProvider
from campus_portal.schemas.announcement_schema import AnnouncementCreate, AnnouncementUpdate
from campus_portal.services import list_filters

logger = logging.getLogger(__name__)

RECENT_DAYS = 7

def get_all_announcements(provider: RecordProvider) -> List[Dict]:
    """All announcements, newest first."""
    return list_filters.newest_first(provider.list())

def get_announcement_by_id(provider: RecordProvider, announcement_id: int) -> Dict:
    announcement = provider.get(announcement_id)
    if not announcement:
        raise HTTPException(status_code=404, detail="Announcement not found")
    return announcement

def get_announcements_by_category(provider: RecordProvider, category: str) -> List[Dict]:
    return list_filters.search_announcements(provider.list(), category=category)

def get_announcements_by_priority(provider: RecordProvider, priority: str) -> List[Dict]:
    return list_filters.search_announcements(provider.list(), priority=priority)

def get_announcements_by_course(provider: RecordProvider, course_id: int) -> List[Dict]:
    """The course's own announcements plus the general ones."""
    return list_filters.search_announcements(provider.list(), course_id=course_id)

def get_recent_announcements(provider: RecordProvider, limit: int = 5) -> List[Dict]:
    return list_filters.newest_first(provider.list())[:limit]

def search_announcements(
    provider: RecordProvider,
    query: Optional[str] = None,
    category: Optional[str] = None,
    priority: Optional[str] = None,
    course_id: Optional[int] = None,
    general_only: bool = False,
) -> List[Dict]:
    return list_filters.search_announcements(
        provider.list(), query, category, priority, course_id, general_only
    )

def get_announcement_counts(provider: RecordProvider, now: Optional[datetime] = None) -> Dict:
    announcements = provider.list()
    since = (now or datetime.now(timezone.utc)) - timedelta(days=RECENT_DAYS)
    return {
        "total": len(announcements),
        "high": sum(1 for a in announcements if a.get("priority") == "high"),
        "academic": sum(1 for a in announcements if a.get("category") == "academic"),
        "recent": sum(
            1 for a in announcements
            if list_filters.parse_timestamp(a.get("timestamp")) >= since
        ),
    }

# == Create / update / delete
def create_announcement(provider: RecordProvider, data: AnnouncementCreate) -> Dict:
    record = data.model_dump(mode="json")
    record["timestamp"] = datetime.now(timezone.utc).isoformat()
    announcement = provider.insert(record)
    logger.info("Published announcement #%s: %s", announcement["id"], announcement["title"])
    return announcement

def update_announcement(provider: RecordProvider, announcement_id: int, data: AnnouncementUpdate) -> Dict:
    # course_id may be set back to None (general), so only unset fields are skipped
    announcement = provider.update(announcement_id, data.model_dump(mode="json", exclude_unset=True))
    if not announcement:
        raise HTTPException(status_code=404, detail="Announcement not found")
    return announcement

def delete_announcement(provider: RecordProvider, announcement_id: int) -> Dict:
    announcement = provider.delete(announcement_id)
    if not announcement:
        raise HTTPException(status_code=404, detail="Announcement not found")
    return announcement
