"""Base service class with common store operations."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from cyberlab.db.store import ResourceStore
from cyberlab.schemas.common import RecordDTO

RecordType = TypeVar("RecordType", bound=RecordDTO)


class BaseService(Generic[RecordType]):
    """Base service with common CRUD operations."""

    def __init__(self, records: ResourceStore[RecordType]):
        self.records = records

    def get_by_id(self, id: str) -> RecordType | None:
        """Get record by id."""
        return self.records.get_by_id(id)

    def get_all(self) -> list[RecordType]:
        """Get all records."""
        return self.records.all()

    def create(self, data: BaseModel) -> RecordType:
        """Create record from a validated payload."""
        return self.records.create(self._fields(data))

    def update(self, id: str, data: BaseModel) -> RecordType | None:
        """Apply the fields present in a validated partial payload."""
        return self.records.update(id, self._fields(data))

    def delete_by_id(self, id: str) -> bool:
        """Delete record by id."""
        return self.records.delete(id)

    @staticmethod
    def _fields(data: BaseModel) -> dict[str, Any]:
        """Fields the caller actually supplied, keyed by attribute name."""
        return data.model_dump(exclude_unset=True)
