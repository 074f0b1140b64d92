import enum
import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from campus_portal.models.announcement import Announcement
from campus_portal.models.assignment import Assignment
from campus_portal.models.attendance import Attendance
from campus_portal.models.course import Course
from campus_portal.models.grade import Grade
from campus_portal.providers.base import Record, RecordProvider, RecordProviderError

logger = logging.getLogger(__name__)

MODELS = {
    "courses": Course,
    "grades": Grade,
    "attendance": Attendance,
    "announcements": Announcement,
    "assignments": Assignment,
}


def _to_python(column_type, value):
    """Coerce JSON-shaped values (ISO strings) into what the column type accepts."""
    if value is None:
        return None
    try:
        python_type = column_type.python_type
    except NotImplementedError:
        return value
    if python_type is datetime and isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if python_type is datetime and isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    if python_type is date and isinstance(value, str):
        return date.fromisoformat(value[:10])
    if isinstance(python_type, type) and issubclass(python_type, enum.Enum) and not isinstance(value, enum.Enum):
        return python_type(value)
    return value


class SqlRecordProvider(RecordProvider):
    """Record provider backed by one SQLAlchemy model."""

    def __init__(self, resource: str, model, session_factory: sessionmaker):
        self.resource = resource
        self.model = model
        self._session_factory = session_factory
        self._columns = {c.key: c for c in inspect(model).columns}

    def _as_record(self, row) -> Record:
        record = {}
        for key in self._columns:
            value = getattr(row, key)
            if isinstance(value, enum.Enum):
                value = value.value
            record[key] = value
        return record

    def _values(self, data: Record) -> Record:
        return {
            k: _to_python(self._columns[k].type, v)
            for k, v in data.items()
            if k in self._columns and k != "id"
        }

    def list(self) -> List[Record]:
        db = self._session_factory()
        try:
            rows = db.query(self.model).order_by(self.model.id).all()
            return [self._as_record(r) for r in rows]
        except SQLAlchemyError as e:
            logger.error("Listing %s failed: %s", self.resource, e)
            raise RecordProviderError(self.resource, "database query failed") from e
        finally:
            db.close()

    def get(self, record_id: int) -> Optional[Record]:
        db = self._session_factory()
        try:
            row = db.get(self.model, int(record_id))
            return self._as_record(row) if row else None
        except SQLAlchemyError as e:
            logger.error("Loading %s #%s failed: %s", self.resource, record_id, e)
            raise RecordProviderError(self.resource, "database query failed") from e
        finally:
            db.close()

    def insert(self, data: Record) -> Record:
        db = self._session_factory()
        try:
            row = self.model(**self._values(data))
            db.add(row)
            db.commit()
            db.refresh(row)
            return self._as_record(row)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Inserting %s failed: %s", self.resource, e)
            raise RecordProviderError(self.resource, "database write failed") from e
        finally:
            db.close()

    def load(self, records: List[Record]) -> int:
        """Bulk insert records keeping their ids (used to seed from fixtures)."""
        db = self._session_factory()
        try:
            for record in records:
                db.add(self.model(id=int(record["id"]), **self._values(record)))
            db.commit()
            return len(records)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Loading %s failed: %s", self.resource, e)
            raise RecordProviderError(self.resource, "database write failed") from e
        finally:
            db.close()

    def update(self, record_id: int, data: Record) -> Optional[Record]:
        db = self._session_factory()
        try:
            row = db.get(self.model, int(record_id))
            if not row:
                return None
            for key, value in self._values(data).items():
                setattr(row, key, value)
            db.commit()
            db.refresh(row)
            return self._as_record(row)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Updating %s #%s failed: %s", self.resource, record_id, e)
            raise RecordProviderError(self.resource, "database write failed") from e
        finally:
            db.close()

    def delete(self, record_id: int) -> Optional[Record]:
        db = self._session_factory()
        try:
            row = db.get(self.model, int(record_id))
            if not row:
                return None
            record = self._as_record(row)
            db.delete(row)
            db.commit()
            return record
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Deleting %s #%s failed: %s", self.resource, record_id, e)
            raise RecordProviderError(self.resource, "database write failed") from e
        finally:
            db.close()
