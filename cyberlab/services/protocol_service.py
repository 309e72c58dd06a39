"""Protocol service."""

from cyberlab.db.store import DataStore
from cyberlab.schemas.protocol import ProtocolDTO
from cyberlab.services.base_service import BaseService


class ProtocolService(BaseService[ProtocolDTO]):
    """Protocol catalogue."""

    def __init__(self, store: DataStore):
        super().__init__(store.protocols)

    def search(
        self,
        category: str | None = None,
        complexity: str | None = None,
    ) -> list[ProtocolDTO]:
        """List protocols, optionally filtered by category and complexity."""
        return self.records.filter(
            lambda p: (not category or p.category == category)
            and (not complexity or p.complexity == complexity)
        )
