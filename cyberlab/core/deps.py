"""FastAPI dependencies for dependency injection."""

from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cyberlab.core.config import Settings
from cyberlab.core.security import decode_access_token
from cyberlab.db.store import DataStore
from cyberlab.workers.deployment_lifecycle import DeploymentLifecycle

# Security scheme
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_store(request: Request) -> DataStore:
    """Application data store."""
    return request.app.state.store


def get_lifecycle(request: Request) -> DeploymentLifecycle:
    """Application deployment lifecycle engine."""
    return request.app.state.lifecycle


def get_token_payload(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> dict[str, Any]:
    """Require a valid bearer token and return its claims."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials, settings)
    if not payload or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        )
    return payload


# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_app_settings)]
Store = Annotated[DataStore, Depends(get_store)]
Lifecycle = Annotated[DeploymentLifecycle, Depends(get_lifecycle)]
TokenPayload = Annotated[dict[str, Any], Depends(get_token_payload)]
