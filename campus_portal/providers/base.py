from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class RecordProviderError(Exception):
    """Raised when a record store cannot be reached or rejects a request."""

    def __init__(self, resource: str, message: str):
        self.resource = resource
        super().__init__(f"{resource}: {message}")


class RecordProvider(ABC):
    """
    Storage contract shared by every record backend.

    Records are flat dicts with snake_case keys and an integer ``id``.
    Every method returns copies, so callers may mutate what they get back.
    ``get``, ``update`` and ``delete`` return None for an unknown id.
    """

    resource: str = ""

    @abstractmethod
    def list(self) -> List[Record]:
        ...

    @abstractmethod
    def get(self, record_id: int) -> Optional[Record]:
        ...

    @abstractmethod
    def insert(self, data: Record) -> Record:
        ...

    @abstractmethod
    def update(self, record_id: int, data: Record) -> Optional[Record]:
        ...

    @abstractmethod
    def delete(self, record_id: int) -> Optional[Record]:
        ...
