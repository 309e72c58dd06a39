"""Architecture (network topology) schemas for API request/response."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from cyberlab.schemas.common import PAYLOAD_CONFIG, Count, RecordDTO


class Topology(str, Enum):
    """Shape of the simulated network."""

    LINEAR = "linear"
    STAR = "star"
    MESH = "mesh"
    RING = "ring"
    TREE = "tree"
    HYBRID = "hybrid"


class ArchitectureDifficulty(str, Enum):
    """Difficulty rating of an architecture."""

    SIMPLE = "Simple"
    MEDIUM = "Medium"
    COMPLEX = "Complex"


class ArchitectureCreate(BaseModel):
    """Architecture creation schema."""

    name: str = Field(..., min_length=1)
    topology: Topology
    description: str = None
    nodes_count: Count = Field(..., alias="nodesCount")
    difficulty: ArchitectureDifficulty
    configuration: dict[str, Any] = None

    model_config = PAYLOAD_CONFIG


class ArchitectureUpdate(BaseModel):
    """Architecture partial update schema."""

    name: str = Field(None, min_length=1)
    topology: Topology = None
    description: str = None
    nodes_count: Count = Field(None, alias="nodesCount")
    difficulty: ArchitectureDifficulty = None
    configuration: dict[str, Any] = None

    model_config = PAYLOAD_CONFIG


class ArchitectureDTO(RecordDTO):
    """Architecture response schema."""

    name: str
    topology: Topology
    description: str | None = None
    nodes_count: int = Field(..., alias="nodesCount")
    difficulty: ArchitectureDifficulty
    configuration: dict[str, Any] = Field(default_factory=dict)
