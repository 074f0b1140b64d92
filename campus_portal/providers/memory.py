import copy
import json
import logging
import random
import threading
import time
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from campus_portal.providers.base import Record, RecordProvider

logger = logging.getLogger(__name__)

DEFAULT_FIXTURE_DIR = Path(__file__).resolve().parent.parent / "fixtures"


def load_fixture(resource: str, fixture_dir: Optional[str] = None) -> List[Record]:
    """Read ``<resource>.json`` from the fixture directory; a missing file seeds nothing."""
    path = Path(fixture_dir or DEFAULT_FIXTURE_DIR) / f"{resource}.json"
    if not path.exists():
        logger.warning("No fixture file for %s at %s", resource, path)
        return []
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


class MemoryRecordProvider(RecordProvider):
    """In-process record store keyed by id, seeded from fixture records."""

    def __init__(self, resource: str, records: Iterable[Record] = (), latency_ms: Tuple[int, int] = (0, 0)):
        self.resource = resource
        self._latency_ms = latency_ms
        self._lock = threading.RLock()
        self._records = {}
        for record in records:
            self._records[int(record["id"])] = dict(record)
        self._next_id = max(self._records, default=0) + 1

    def _delay(self):
        low, high = self._latency_ms
        if high <= 0:
            return
        time.sleep(random.uniform(low, high) / 1000.0)

    def list(self) -> List[Record]:
        self._delay()
        with self._lock:
            return [copy.deepcopy(r) for r in self._records.values()]

    def get(self, record_id: int) -> Optional[Record]:
        self._delay()
        with self._lock:
            record = self._records.get(int(record_id))
            return copy.deepcopy(record) if record is not None else None

    def insert(self, data: Record) -> Record:
        self._delay()
        with self._lock:
            record = {**data, "id": self._next_id}
            self._records[self._next_id] = record
            self._next_id += 1
            logger.debug("Inserted %s #%s", self.resource, record["id"])
            return copy.deepcopy(record)

    def update(self, record_id: int, data: Record) -> Optional[Record]:
        self._delay()
        with self._lock:
            record = self._records.get(int(record_id))
            if record is None:
                return None
            record.update({k: v for k, v in data.items() if k != "id"})
            return copy.deepcopy(record)

    def delete(self, record_id: int) -> Optional[Record]:
        self._delay()
        with self._lock:
            record = self._records.pop(int(record_id), None)
            if record is not None:
                logger.debug("Deleted %s #%s", self.resource, record_id)
            return record
