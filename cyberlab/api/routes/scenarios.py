"""Scenario API endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status

from cyberlab.core.deps import Store
from cyberlab.schemas.scenario import ScenarioCreate, ScenarioDTO, ScenarioUpdate
from cyberlab.services.scenario_service import ScenarioService

router = APIRouter()


@router.get("", response_model=list[ScenarioDTO])
async def get_scenarios(
    store: Store,
    test_type: Annotated[str | None, Query(alias="testType")] = None,
    complexity: str | None = None,
    max_duration: Annotated[int | None, Query(alias="maxDuration")] = None,
) -> list[ScenarioDTO]:
    """
    Get all scenarios.

    - **testType**: Filter by test type
    - **complexity**: Filter by complexity
    - **maxDuration**: Only scenarios lasting at most this many seconds
    """
    return ScenarioService(store).search(
        test_type=test_type,
        complexity=complexity,
        max_duration=max_duration,
    )


@router.get("/{scenario_id}", response_model=ScenarioDTO)
async def get_scenario(
    scenario_id: str,
    store: Store,
) -> ScenarioDTO:
    """Get scenario by ID."""
    scenario = ScenarioService(store).get_by_id(scenario_id)

    if not scenario:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Scenario not found",
        )

    return scenario


@router.post("", response_model=ScenarioDTO, status_code=status.HTTP_201_CREATED)
async def create_scenario(
    data: ScenarioCreate,
    store: Store,
) -> ScenarioDTO:
    """
    Create a scenario.

    - **name**: Scenario name
    - **testType**: ping, load, fault, performance or security
    - **complexity**: Basic, Intermediate or Advanced
    - **duration**: Optional duration in seconds
    """
    return ScenarioService(store).create(data)


@router.put("/{scenario_id}", response_model=ScenarioDTO)
async def update_scenario(
    scenario_id: str,
    data: ScenarioUpdate,
    store: Store,
) -> ScenarioDTO:
    """Update the supplied fields of a scenario."""
    scenario = ScenarioService(store).update(scenario_id, data)

    if not scenario:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Scenario not found",
        )

    return scenario


@router.delete("/{scenario_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_scenario(
    scenario_id: str,
    store: Store,
) -> Response:
    """Delete scenario."""
    if not ScenarioService(store).delete_by_id(scenario_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Scenario not found",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
