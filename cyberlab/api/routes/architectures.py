"""Architecture API endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status

from cyberlab.core.deps import Store
from cyberlab.schemas.architecture import (
    ArchitectureCreate,
    ArchitectureDTO,
    ArchitectureUpdate,
)
from cyberlab.services.architecture_service import ArchitectureService

router = APIRouter()


@router.get("", response_model=list[ArchitectureDTO])
async def get_architectures(
    store: Store,
    topology: str | None = None,
    difficulty: str | None = None,
    min_nodes: Annotated[int | None, Query(alias="minNodes")] = None,
    max_nodes: Annotated[int | None, Query(alias="maxNodes")] = None,
) -> list[ArchitectureDTO]:
    """
    Get all architectures.

    - **topology**: Filter by topology
    - **difficulty**: Filter by difficulty
    - **minNodes** / **maxNodes**: Inclusive node count range
    """
    return ArchitectureService(store).search(
        topology=topology,
        difficulty=difficulty,
        min_nodes=min_nodes,
        max_nodes=max_nodes,
    )


@router.get("/{architecture_id}", response_model=ArchitectureDTO)
async def get_architecture(
    architecture_id: str,
    store: Store,
) -> ArchitectureDTO:
    """Get architecture by ID."""
    architecture = ArchitectureService(store).get_by_id(architecture_id)

    if not architecture:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Architecture not found",
        )

    return architecture


@router.post("", response_model=ArchitectureDTO, status_code=status.HTTP_201_CREATED)
async def create_architecture(
    data: ArchitectureCreate,
    store: Store,
) -> ArchitectureDTO:
    """
    Create an architecture.

    - **name**: Architecture name
    - **topology**: linear, star, mesh, ring, tree or hybrid
    - **nodesCount**: Number of nodes (at least 1)
    - **difficulty**: Simple, Medium or Complex
    - **configuration**: Free-form topology configuration
    """
    return ArchitectureService(store).create(data)


@router.put("/{architecture_id}", response_model=ArchitectureDTO)
async def update_architecture(
    architecture_id: str,
    data: ArchitectureUpdate,
    store: Store,
) -> ArchitectureDTO:
    """Update the supplied fields of an architecture."""
    architecture = ArchitectureService(store).update(architecture_id, data)

    if not architecture:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Architecture not found",
        )

    return architecture


@router.delete("/{architecture_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_architecture(
    architecture_id: str,
    store: Store,
) -> Response:
    """Delete architecture."""
    if not ArchitectureService(store).delete_by_id(architecture_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Architecture not found",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
