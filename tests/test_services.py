"""Tests for service layer."""

import pytest

from cyberlab.core.exceptions import EmailAlreadyExistsError, ReferenceNotFoundError
from cyberlab.core.security import decode_access_token
from cyberlab.db.store import DataStore
from cyberlab.schemas.architecture import ArchitectureDTO
from cyberlab.schemas.auth import UserRegister, UserRole
from cyberlab.schemas.deployment import DeploymentCreate, DeploymentStatus
from cyberlab.schemas.protocol import ProtocolDTO, ProtocolUpdate
from cyberlab.schemas.scenario import ScenarioDTO
from cyberlab.services.architecture_service import ArchitectureService
from cyberlab.services.auth_service import AuthService
from cyberlab.services.deployment_service import DeploymentService
from cyberlab.services.protocol_service import ProtocolService
from cyberlab.services.scenario_service import ScenarioService
from cyberlab.services.user_service import UserService
from cyberlab.workers.deployment_lifecycle import DeploymentLifecycle


@pytest.fixture
def lifecycle(store: DataStore) -> DeploymentLifecycle:
    """Unstarted lifecycle engine over the test store."""
    return DeploymentLifecycle(store.deployments, start_delay=60, ready_delay=60)


def test_protocol_service_update(store: DataStore, sample_protocols: list[ProtocolDTO]):
    """Test only supplied fields are applied."""
    service = ProtocolService(store)
    protocol = sample_protocols[0]

    updated = service.update(
        protocol.id,
        ProtocolUpdate.model_validate({"version": "v6"}),
    )

    assert updated.version == "v6"
    assert updated.description == "Reliable transport"


def test_architecture_service_search(
    store: DataStore, sample_architectures: list[ArchitectureDTO]
):
    """Test combined architecture filters."""
    service = ArchitectureService(store)

    assert [a.name for a in service.search(min_nodes=6)] == ["Star", "Mesh"]
    assert [a.name for a in service.search(difficulty="Complex", max_nodes=12)] == ["Mesh"]
    assert service.search(topology="ring") == []
    assert len(service.search()) == 3


def test_scenario_service_search(store: DataStore, sample_scenarios: list[ScenarioDTO]):
    """Test scenario filters."""
    service = ScenarioService(store)

    assert [s.name for s in service.search(max_duration=900)] == ["Ping", "Load"]
    assert [s.name for s in service.search(test_type="security")] == ["Open ended"]
    assert service.search(test_type="security", max_duration=10000) == []


def test_deployment_service_create(
    store: DataStore, lifecycle: DeploymentLifecycle, deployment_payload: dict
):
    """Test deployment creation through the service."""
    service = DeploymentService(store, lifecycle)

    deployment = service.create_deployment(DeploymentCreate.model_validate(deployment_payload))

    assert deployment.status == DeploymentStatus.PENDING
    assert deployment.resources.cpu == "500m"
    assert service.search(status="pending") == [deployment]
    assert lifecycle.pending_transitions(deployment.id) == [DeploymentStatus.DEPLOYING]


def test_deployment_service_missing_reference(
    store: DataStore, lifecycle: DeploymentLifecycle, deployment_payload: dict
):
    """Test dangling references are refused before anything is stored."""
    service = DeploymentService(store, lifecycle)
    data = DeploymentCreate.model_validate({**deployment_payload, "scenarioId": "missing"})

    with pytest.raises(ReferenceNotFoundError) as exc_info:
        service.create_deployment(data)

    assert exc_info.value.message == "Scenario not found"
    assert service.get_all() == []


def test_deployment_service_ignores_later_reference_deletes(
    store: DataStore,
    lifecycle: DeploymentLifecycle,
    deployment_payload: dict,
    sample_protocols: list[ProtocolDTO],
):
    """Test references are only checked at creation."""
    service = DeploymentService(store, lifecycle)
    deployment = service.create_deployment(DeploymentCreate.model_validate(deployment_payload))

    ProtocolService(store).delete_by_id(sample_protocols[0].id)

    assert service.get_by_id(deployment.id).protocol_id == sample_protocols[0].id


def test_build_manifest(
    store: DataStore, lifecycle: DeploymentLifecycle, deployment_payload: dict
):
    """Test manifest defaults."""
    service = DeploymentService(store, lifecycle)
    deployment = service.create_deployment(DeploymentCreate.model_validate(deployment_payload))

    manifest = service.build_manifest(deployment)

    assert manifest["metadata"]["namespace"] == deployment.namespace
    assert manifest["spec"]["selector"] == {"matchLabels": {"app": "TCP Linear Test"}}
    container = manifest["spec"]["template"]["spec"]["containers"][0]
    assert container["image"] == "nginx:latest"
    assert container["ports"] == [{"containerPort": 80}]


def test_user_service_create(store: DataStore):
    """Test user creation."""
    user_service = UserService(store)

    user = user_service.create_user(
        email="new@cyberlab.com",
        password="password123",
        first_name="New",
        last_name="User",
    )

    assert user.role == UserRole.USER
    assert user.hashed_password != "password123"
    assert user_service.get_by_email("new@cyberlab.com") == user


def test_user_service_authenticate(store: DataStore):
    """Test user authentication."""
    user_service = UserService(store)
    user_service.create_user(
        email="auth@cyberlab.com",
        password="password123",
        first_name="Auth",
        last_name="User",
        role=UserRole.ADMIN,
    )

    user = user_service.authenticate("auth@cyberlab.com", "password123")
    assert user is not None
    assert user.role == UserRole.ADMIN

    assert user_service.authenticate("auth@cyberlab.com", "wrong") is None
    assert user_service.authenticate("nobody@cyberlab.com", "password123") is None


def test_user_to_dto_hides_password(store: DataStore):
    """Test the response schema carries no password hash."""
    user_service = UserService(store)
    user = user_service.create_user(
        email="dto@cyberlab.com", password="password123", first_name="D", last_name="T"
    )

    dto = user_service.to_dto(user)

    assert "hashed_password" not in dto.model_dump()
    assert dto.model_dump(by_alias=True)["firstName"] == "D"


def test_auth_service_register_and_login(store: DataStore):
    """Test registration issues a token usable for login."""
    auth_service = AuthService(store)

    registered = auth_service.register(UserRegister(
        email="reg@cyberlab.com",
        password="secret123",
        first_name="Reg",
        last_name="User",
    ))
    logged_in = auth_service.login("reg@cyberlab.com", "secret123")

    assert logged_in.user.id == registered.user.id
    assert decode_access_token(logged_in.token)["sub"] == registered.user.id
    assert auth_service.login("reg@cyberlab.com", "nope") is None

    with pytest.raises(EmailAlreadyExistsError):
        auth_service.register(UserRegister(
            email="reg@cyberlab.com",
            password="secret123",
            first_name="Reg",
            last_name="Again",
        ))
