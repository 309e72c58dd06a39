"""Protocol API endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from cyberlab.core.deps import Store
from cyberlab.schemas.protocol import ProtocolCreate, ProtocolDTO, ProtocolUpdate
from cyberlab.services.protocol_service import ProtocolService

router = APIRouter()


@router.get("", response_model=list[ProtocolDTO])
async def get_protocols(
    store: Store,
    category: str | None = None,
    complexity: str | None = None,
) -> list[ProtocolDTO]:
    """
    Get all protocols.

    - **category**: Filter by category (transport, routing, application, security)
    - **complexity**: Filter by complexity (Beginner, Intermediate, Advanced)
    """
    return ProtocolService(store).search(category=category, complexity=complexity)


@router.get("/{protocol_id}", response_model=ProtocolDTO)
async def get_protocol(
    protocol_id: str,
    store: Store,
) -> ProtocolDTO:
    """Get protocol by ID."""
    protocol = ProtocolService(store).get_by_id(protocol_id)

    if not protocol:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Protocol not found",
        )

    return protocol


@router.post("", response_model=ProtocolDTO, status_code=status.HTTP_201_CREATED)
async def create_protocol(
    data: ProtocolCreate,
    store: Store,
) -> ProtocolDTO:
    """
    Create a protocol.

    - **name**: Protocol name
    - **version**: Protocol version
    - **category**: transport, routing, application or security
    - **complexity**: Beginner, Intermediate or Advanced
    - **parameters**: Free-form protocol parameters
    """
    return ProtocolService(store).create(data)


@router.put("/{protocol_id}", response_model=ProtocolDTO)
async def update_protocol(
    protocol_id: str,
    data: ProtocolUpdate,
    store: Store,
) -> ProtocolDTO:
    """Update the supplied fields of a protocol."""
    protocol = ProtocolService(store).update(protocol_id, data)

    if not protocol:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Protocol not found",
        )

    return protocol


@router.delete("/{protocol_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_protocol(
    protocol_id: str,
    store: Store,
) -> Response:
    """Delete protocol."""
    if not ProtocolService(store).delete_by_id(protocol_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Protocol not found",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
