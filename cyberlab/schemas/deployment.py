"""Deployment schemas for API request/response."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from cyberlab.schemas.common import PAYLOAD_CONFIG, RecordDTO


class DeploymentStatus(str, Enum):
    """Deployment lifecycle states.

    COMPLETED and FAILED are part of the data model but no transition
    currently produces them.
    """

    PENDING = "pending"
    DEPLOYING = "deploying"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    STOPPED = "stopped"


class ResourceSpec(BaseModel):
    """Compute resources of a deployment (Kubernetes quantity strings)."""

    cpu: str | None = None
    memory: str | None = None
    storage: str | None = None


class ResourceRequest(BaseModel):
    """Resources requested in a deployment payload."""

    cpu: str = Field(None, min_length=1)
    memory: str = Field(None, min_length=1)
    storage: str = Field(None, min_length=1)

    model_config = {"extra": "forbid"}


class DeploymentLog(BaseModel):
    """Single deployment log entry."""

    timestamp: datetime
    level: str = "INFO"
    message: str


class DeploymentCreate(BaseModel):
    """Deployment creation schema."""

    protocol_id: str = Field(..., min_length=1, alias="protocolId")
    architecture_id: str = Field(..., min_length=1, alias="architectureId")
    scenario_id: str = Field(..., min_length=1, alias="scenarioId")
    name: str = Field(..., min_length=1)
    resources: ResourceRequest = None

    model_config = PAYLOAD_CONFIG


class DeploymentUpdate(BaseModel):
    """Deployment partial update schema."""

    name: str = Field(None, min_length=1)
    status: DeploymentStatus = None
    resources: ResourceRequest = None

    model_config = PAYLOAD_CONFIG


class DeploymentDTO(RecordDTO):
    """Deployment response schema."""

    protocol_id: str = Field(..., alias="protocolId")
    architecture_id: str = Field(..., alias="architectureId")
    scenario_id: str = Field(..., alias="scenarioId")
    name: str
    status: DeploymentStatus = DeploymentStatus.PENDING
    namespace: str = Field(..., alias="kubernetesNamespace")
    resources: ResourceSpec | None = None
    logs: list[DeploymentLog] = Field(default_factory=list)


class DeploymentStopResponse(BaseModel):
    """Deployment stop response schema."""

    message: str
