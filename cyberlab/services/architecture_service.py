"""Architecture service."""

from cyberlab.db.store import DataStore
from cyberlab.schemas.architecture import ArchitectureDTO
from cyberlab.services.base_service import BaseService


class ArchitectureService(BaseService[ArchitectureDTO]):
    """Network architecture catalogue."""

    def __init__(self, store: DataStore):
        super().__init__(store.architectures)

    def search(
        self,
        topology: str | None = None,
        difficulty: str | None = None,
        min_nodes: int | None = None,
        max_nodes: int | None = None,
    ) -> list[ArchitectureDTO]:
        """List architectures filtered by topology, difficulty and node count range."""
        low = min_nodes if min_nodes is not None else 0
        high = max_nodes if max_nodes is not None else float("inf")

        return self.records.filter(
            lambda a: (not topology or a.topology == topology)
            and (not difficulty or a.difficulty == difficulty)
            and low <= a.nodes_count <= high
        )
