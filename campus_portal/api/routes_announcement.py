from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from campus_portal.providers.base import RecordProvider
from campus_portal.providers.registry import announcement_records
from campus_portal.schemas.announcement_schema import (
    AnnouncementCreate,
    AnnouncementUpdate,
    AnnouncementResponse,
    AnnouncementCounts
)
from campus_portal.services.announcement_service import (
    get_all_announcements,
    get_announcement_by_id,
    get_announcements_by_category,
    get_announcements_by_priority,
    get_announcements_by_course,
    get_recent_announcements,
    search_announcements,
    get_announcement_counts,
    create_announcement,
    update_announcement,
    delete_announcement
)

router = APIRouter()

@router.get("", response_model=List[AnnouncementResponse])
def list_announcements(provider: RecordProvider = Depends(announcement_records)):
    return get_all_announcements(provider)

@router.get("/search", response_model=List[AnnouncementResponse])
def search(
    query: Optional[str] = None,
    category: Optional[str] = None,
    priority: Optional[str] = None,
    course_id: Optional[int] = None,
    general: bool = False,
    provider: RecordProvider = Depends(announcement_records),
):
    return search_announcements(provider, query, category, priority, course_id, general)

@router.get("/recent", response_model=List[AnnouncementResponse])
def recent(limit: int = Query(5, ge=1, le=50), provider: RecordProvider = Depends(announcement_records)):
    return get_recent_announcements(provider, limit)

@router.get("/counts", response_model=AnnouncementCounts)
def counts(provider: RecordProvider = Depends(announcement_records)):
    return get_announcement_counts(provider)

@router.get("/category/{category}", response_model=List[AnnouncementResponse])
def by_category(category: str, provider: RecordProvider = Depends(announcement_records)):
    return get_announcements_by_category(provider, category)

@router.get("/priority/{priority}", response_model=List[AnnouncementResponse])
def by_priority(priority: str, provider: RecordProvider = Depends(announcement_records)):
    return get_announcements_by_priority(provider, priority)

@router.get("/course/{course_id}", response_model=List[AnnouncementResponse])
def by_course(course_id: int, provider: RecordProvider = Depends(announcement_records)):
    return get_announcements_by_course(provider, course_id)

@router.get("/{announcement_id}", response_model=AnnouncementResponse)
def get_announcement(announcement_id: int, provider: RecordProvider = Depends(announcement_records)):
    return get_announcement_by_id(provider, announcement_id)

@router.post("", response_model=AnnouncementResponse, status_code=201)
def publish(data: AnnouncementCreate, provider: RecordProvider = Depends(announcement_records)):
    return create_announcement(provider, data)

@router.put("/{announcement_id}", response_model=AnnouncementResponse)
def update_announcement_endpoint(announcement_id: int, data: AnnouncementUpdate, provider: RecordProvider = Depends(announcement_records)):
    return update_announcement(provider, announcement_id, data)

@router.delete("/{announcement_id}", response_model=AnnouncementResponse)
def delete_announcement_endpoint(announcement_id: int, provider: RecordProvider = Depends(announcement_records)):
    return delete_announcement(provider, announcement_id)
