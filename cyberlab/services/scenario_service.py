"""Scenario service."""

from cyberlab.db.store import DataStore
from cyberlab.schemas.scenario import ScenarioDTO
from cyberlab.services.base_service import BaseService


class ScenarioService(BaseService[ScenarioDTO]):
    """Test scenario catalogue."""

    def __init__(self, store: DataStore):
        super().__init__(store.scenarios)

    def search(
        self,
        test_type: str | None = None,
        complexity: str | None = None,
        max_duration: int | None = None,
    ) -> list[ScenarioDTO]:
        """List scenarios filtered by test type, complexity and maximum duration.

        Scenarios without a duration never match a duration filter.
        """

        def matches(scenario: ScenarioDTO) -> bool:
            if test_type and scenario.test_type != test_type:
                return False
            if complexity and scenario.complexity != complexity:
                return False
            if max_duration is not None:
                return scenario.duration is not None and scenario.duration <= max_duration
            return True

        return self.records.filter(matches)
