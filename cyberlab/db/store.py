"""In-memory resource store.

One ResourceStore per resource kind, grouped in a DataStore that is built
once per application and handed to request handlers. Nothing is persisted.
All access happens on the event loop thread, so no locking is done.
"""

import uuid
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, TypeVar

from cyberlab.schemas.architecture import ArchitectureDTO
from cyberlab.schemas.auth import UserRecord
from cyberlab.schemas.common import RecordDTO
from cyberlab.schemas.deployment import DeploymentDTO
from cyberlab.schemas.protocol import ProtocolDTO
from cyberlab.schemas.scenario import ScenarioDTO

RecordType = TypeVar("RecordType", bound=RecordDTO)

# Fields owned by the store, never taken from caller input
_MANAGED_FIELDS = ("id", "created_at", "updated_at")


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class ResourceStore(Generic[RecordType]):
    """Ordered collection of records of one resource kind."""

    def __init__(self, model: type[RecordType]):
        self.model = model
        self._records: dict[str, RecordType] = {}

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> list[RecordType]:
        """All records in insertion order."""
        return list(self._records.values())

    def get_by_id(self, id: str) -> RecordType | None:
        """Get record by id."""
        return self._records.get(id)

    def create(self, fields: dict[str, Any]) -> RecordType:
        """Create a record with a fresh id and timestamps."""
        now = utc_now()
        data = {k: v for k, v in fields.items() if k not in _MANAGED_FIELDS}
        record = self.model.model_validate({
            **data,
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
        })
        self._records[record.id] = record
        return record

    def add(self, record: RecordType) -> RecordType:
        """Insert a fully built record (seed data with fixed ids)."""
        if record.id in self._records:
            raise KeyError(f"Duplicate {self.model.__name__} id: {record.id}")
        self._records[record.id] = record
        return record

    def update(self, id: str, fields: dict[str, Any]) -> RecordType | None:
        """Shallow-merge fields into a record and refresh updated_at."""
        current = self._records.get(id)
        if current is None:
            return None

        changes = {k: v for k, v in fields.items() if k not in _MANAGED_FIELDS}
        record = self.model.model_validate({
            **current.model_dump(),
            **changes,
            "updated_at": self._next_timestamp(current.updated_at),
        })
        # Reassigning an existing key keeps its position
        self._records[id] = record
        return record

    def delete(self, id: str) -> bool:
        """Remove a record, returning whether it existed."""
        return self._records.pop(id, None) is not None

    def filter(self, predicate: Callable[[RecordType], bool]) -> list[RecordType]:
        """Records matching predicate, in insertion order."""
        return [r for r in self._records.values() if predicate(r)]

    @staticmethod
    def _next_timestamp(previous: datetime) -> datetime:
        # updated_at must move forward even within one clock tick
        now = utc_now()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now


class DataStore:
    """All resource collections of one application instance."""

    def __init__(self):
        self.protocols: ResourceStore[ProtocolDTO] = ResourceStore(ProtocolDTO)
        self.architectures: ResourceStore[ArchitectureDTO] = ResourceStore(ArchitectureDTO)
        self.scenarios: ResourceStore[ScenarioDTO] = ResourceStore(ScenarioDTO)
        self.deployments: ResourceStore[DeploymentDTO] = ResourceStore(DeploymentDTO)
        self.users: ResourceStore[UserRecord] = ResourceStore(UserRecord)
