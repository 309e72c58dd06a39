"""Protocol schemas for API request/response."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from cyberlab.schemas.common import PAYLOAD_CONFIG, RecordDTO


class ProtocolCategory(str, Enum):
    """Network layer a protocol belongs to."""

    TRANSPORT = "transport"
    ROUTING = "routing"
    APPLICATION = "application"
    SECURITY = "security"


class ProtocolComplexity(str, Enum):
    """Learning level of a protocol."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ProtocolCreate(BaseModel):
    """Protocol creation schema."""

    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    description: str = None
    category: ProtocolCategory
    complexity: ProtocolComplexity
    parameters: dict[str, Any] = None

    model_config = PAYLOAD_CONFIG


class ProtocolUpdate(BaseModel):
    """Protocol partial update schema."""

    name: str = Field(None, min_length=1)
    version: str = Field(None, min_length=1)
    description: str = None
    category: ProtocolCategory = None
    complexity: ProtocolComplexity = None
    parameters: dict[str, Any] = None

    model_config = PAYLOAD_CONFIG


class ProtocolDTO(RecordDTO):
    """Protocol response schema."""

    name: str
    version: str
    description: str | None = None
    category: ProtocolCategory
    complexity: ProtocolComplexity
    parameters: dict[str, Any] = Field(default_factory=dict)
