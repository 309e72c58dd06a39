"""Deployment API endpoints."""

from typing import Annotated, Literal

import yaml
from fastapi import APIRouter, HTTPException, Query, Response, status

from cyberlab.core.deps import Lifecycle, Store
from cyberlab.core.exceptions import DeploymentStateError, ReferenceNotFoundError
from cyberlab.schemas.deployment import (
    DeploymentCreate,
    DeploymentDTO,
    DeploymentLog,
    DeploymentStopResponse,
    DeploymentUpdate,
)
from cyberlab.services.deployment_service import DeploymentService

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Deployment not found",
    )


@router.get("", response_model=list[DeploymentDTO])
async def get_deployments(
    store: Store,
    lifecycle: Lifecycle,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
) -> list[DeploymentDTO]:
    """
    Get all deployments.

    - **status**: Filter by status (pending, deploying, running, completed, failed, stopped)
    """
    return DeploymentService(store, lifecycle).search(status=status_filter)


@router.get("/{deployment_id}", response_model=DeploymentDTO)
async def get_deployment(
    deployment_id: str,
    store: Store,
    lifecycle: Lifecycle,
) -> DeploymentDTO:
    """Get deployment by ID."""
    deployment = DeploymentService(store, lifecycle).get_by_id(deployment_id)

    if not deployment:
        raise _not_found()

    return deployment


@router.post("", response_model=DeploymentDTO, status_code=status.HTTP_201_CREATED)
async def create_deployment(
    data: DeploymentCreate,
    store: Store,
    lifecycle: Lifecycle,
) -> DeploymentDTO:
    """
    Create a deployment and start its simulated provisioning.

    - **protocolId**: Existing protocol ID
    - **architectureId**: Existing architecture ID
    - **scenarioId**: Existing scenario ID
    - **name**: Deployment name
    - **resources**: Optional cpu/memory/storage requests
    """
    try:
        return DeploymentService(store, lifecycle).create_deployment(data)
    except ReferenceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e


@router.put("/{deployment_id}", response_model=DeploymentDTO)
async def update_deployment(
    deployment_id: str,
    data: DeploymentUpdate,
    store: Store,
    lifecycle: Lifecycle,
) -> DeploymentDTO:
    """Update the supplied fields of a deployment."""
    deployment = DeploymentService(store, lifecycle).update(deployment_id, data)

    if not deployment:
        raise _not_found()

    return deployment


@router.delete("/{deployment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_deployment(
    deployment_id: str,
    store: Store,
    lifecycle: Lifecycle,
) -> Response:
    """Delete deployment."""
    if not DeploymentService(store, lifecycle).delete_deployment(deployment_id):
        raise _not_found()

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{deployment_id}/logs", response_model=list[DeploymentLog])
async def get_deployment_logs(
    deployment_id: str,
    store: Store,
    lifecycle: Lifecycle,
) -> list[DeploymentLog]:
    """Get deployment logs in the order they were written."""
    logs = DeploymentService(store, lifecycle).get_logs(deployment_id)

    if logs is None:
        raise _not_found()

    return logs


@router.post("/{deployment_id}/stop", response_model=DeploymentStopResponse)
async def stop_deployment(
    deployment_id: str,
    store: Store,
    lifecycle: Lifecycle,
) -> DeploymentStopResponse:
    """Stop a running deployment."""
    try:
        deployment = DeploymentService(store, lifecycle).stop_deployment(deployment_id)
    except DeploymentStateError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e

    if not deployment:
        raise _not_found()

    return DeploymentStopResponse(message="Deployment stopped successfully")


@router.get("/{deployment_id}/manifest", response_model=None)
async def get_deployment_manifest(
    deployment_id: str,
    store: Store,
    lifecycle: Lifecycle,
    image: str = "nginx:latest",
    replicas: Annotated[int, Query(ge=1)] = 1,
    port: Annotated[int, Query(ge=1, le=65535)] = 80,
    output: Annotated[Literal["json", "yaml"], Query(alias="format")] = "json",
):
    """
    Get a Kubernetes Deployment manifest for a deployment.

    - **image**: Container image
    - **replicas**: Replica count
    - **port**: Container port
    - **format**: json or yaml
    """
    service = DeploymentService(store, lifecycle)
    deployment = service.get_by_id(deployment_id)

    if not deployment:
        raise _not_found()

    manifest = service.build_manifest(deployment, image=image, replicas=replicas, port=port)
    if output == "yaml":
        return Response(
            content=yaml.safe_dump(manifest, sort_keys=False),
            media_type="application/yaml",
        )
    return manifest
