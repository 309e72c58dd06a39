"""Scenario (test type) schemas for API request/response."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from cyberlab.schemas.common import PAYLOAD_CONFIG, Count, RecordDTO


class ScenarioTestType(str, Enum):
    """Kind of test a scenario runs against the network."""

    PING = "ping"
    LOAD = "load"
    FAULT = "fault"
    PERFORMANCE = "performance"
    SECURITY = "security"


class ScenarioComplexity(str, Enum):
    """Complexity rating of a scenario."""

    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ScenarioCreate(BaseModel):
    """Scenario creation schema."""

    name: str = Field(..., min_length=1)
    test_type: ScenarioTestType = Field(..., alias="testType")
    description: str = None
    complexity: ScenarioComplexity
    duration: Count = Field(None, description="Duration in seconds")
    parameters: dict[str, Any] = None

    model_config = PAYLOAD_CONFIG


class ScenarioUpdate(BaseModel):
    """Scenario partial update schema."""

    name: str = Field(None, min_length=1)
    test_type: ScenarioTestType = Field(None, alias="testType")
    description: str = None
    complexity: ScenarioComplexity = None
    duration: Count = None
    parameters: dict[str, Any] = None

    model_config = PAYLOAD_CONFIG


class ScenarioDTO(RecordDTO):
    """Scenario response schema."""

    name: str
    test_type: ScenarioTestType = Field(..., alias="testType")
    description: str | None = None
    complexity: ScenarioComplexity
    duration: int | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)
