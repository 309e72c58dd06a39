"""Pydantic schemas for API request/response validation."""

from cyberlab.schemas.architecture import (
    ArchitectureCreate,
    ArchitectureDifficulty,
    ArchitectureDTO,
    ArchitectureUpdate,
    Topology,
)
from cyberlab.schemas.auth import (
    AuthResponse,
    UserDTO,
    UserLogin,
    UserRecord,
    UserRegister,
    UserRole,
)
from cyberlab.schemas.deployment import (
    DeploymentCreate,
    DeploymentDTO,
    DeploymentLog,
    DeploymentStatus,
    DeploymentStopResponse,
    DeploymentUpdate,
    ResourceRequest,
    ResourceSpec,
)
from cyberlab.schemas.protocol import (
    ProtocolCategory,
    ProtocolComplexity,
    ProtocolCreate,
    ProtocolDTO,
    ProtocolUpdate,
)
from cyberlab.schemas.scenario import (
    ScenarioComplexity,
    ScenarioCreate,
    ScenarioDTO,
    ScenarioTestType,
    ScenarioUpdate,
)
from cyberlab.schemas.yaml_config import (
    YamlDeployment,
    YamlParsed,
    YamlSectionReport,
    YamlValidationResult,
)

__all__ = [
    # Architecture
    "ArchitectureCreate",
    "ArchitectureDifficulty",
    "ArchitectureDTO",
    "ArchitectureUpdate",
    "Topology",
    # Auth
    "AuthResponse",
    "UserDTO",
    "UserLogin",
    "UserRecord",
    "UserRegister",
    "UserRole",
    # Deployment
    "DeploymentCreate",
    "DeploymentDTO",
    "DeploymentLog",
    "DeploymentStatus",
    "DeploymentStopResponse",
    "DeploymentUpdate",
    "ResourceRequest",
    "ResourceSpec",
    # Protocol
    "ProtocolCategory",
    "ProtocolComplexity",
    "ProtocolCreate",
    "ProtocolDTO",
    "ProtocolUpdate",
    # Scenario
    "ScenarioComplexity",
    "ScenarioCreate",
    "ScenarioDTO",
    "ScenarioTestType",
    "ScenarioUpdate",
    # YAML
    "YamlDeployment",
    "YamlParsed",
    "YamlSectionReport",
    "YamlValidationResult",
]
