"""Service layer."""

from cyberlab.services.architecture_service import ArchitectureService
from cyberlab.services.auth_service import AuthService
from cyberlab.services.base_service import BaseService
from cyberlab.services.deployment_service import DeploymentService
from cyberlab.services.protocol_service import ProtocolService
from cyberlab.services.scenario_service import ScenarioService
from cyberlab.services.user_service import UserService
from cyberlab.services.yaml_service import YamlService

__all__ = [
    "ArchitectureService",
    "AuthService",
    "BaseService",
    "DeploymentService",
    "ProtocolService",
    "ScenarioService",
    "UserService",
    "YamlService",
]
