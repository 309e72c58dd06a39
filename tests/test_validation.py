"""Tests for payload validation and error messages."""

import pytest

from cyberlab.core.exceptions import PayloadValidationError
from cyberlab.core.validation import validate_payload
from cyberlab.schemas.architecture import ArchitectureCreate, ArchitectureUpdate
from cyberlab.schemas.auth import UserRegister
from cyberlab.schemas.deployment import DeploymentCreate, DeploymentUpdate
from cyberlab.schemas.protocol import ProtocolCreate, ProtocolUpdate
from cyberlab.schemas.scenario import ScenarioCreate, ScenarioUpdate


def error_for(model, data) -> str:
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(model, data)
    return exc_info.value.message


@pytest.mark.parametrize(
    "model, data, message",
    [
        (ProtocolCreate, {}, '"name" is required'),
        (
            ProtocolCreate,
            {"name": "TCP", "version": "v4", "category": "physical", "complexity": "Beginner"},
            '"category" must be one of [transport, routing, application, security]',
        ),
        (
            ProtocolCreate,
            {"name": "", "version": "v4", "category": "transport", "complexity": "Beginner"},
            '"name" is not allowed to be empty',
        ),
        (
            ProtocolCreate,
            {"name": 5, "version": "v4", "category": "transport", "complexity": "Beginner"},
            '"name" must be a string',
        ),
        (
            ProtocolCreate,
            {
                "name": "TCP",
                "version": "v4",
                "category": "transport",
                "complexity": "Beginner",
                "parameters": [1, 2],
            },
            '"parameters" must be of type object',
        ),
        (
            ArchitectureCreate,
            {"name": "Ring", "topology": "ring", "nodesCount": 0, "difficulty": "Simple"},
            '"nodesCount" must be greater than or equal to 1',
        ),
        (
            ArchitectureCreate,
            {"name": "Ring", "topology": "ring", "nodesCount": 2.5, "difficulty": "Simple"},
            '"nodesCount" must be an integer',
        ),
        (
            ArchitectureCreate,
            {"name": "Ring", "topology": "ring", "nodesCount": "many", "difficulty": "Simple"},
            '"nodesCount" must be a number',
        ),
        (
            ScenarioCreate,
            {"name": "Ping", "testType": "ping", "complexity": "Basic", "duration": 0},
            '"duration" must be greater than or equal to 1',
        ),
        (
            DeploymentCreate,
            {
                "protocolId": "p",
                "architectureId": "a",
                "scenarioId": "s",
                "name": "Run",
                "resources": {"gpu": "1"},
            },
            '"resources.gpu" is not allowed',
        ),
        (
            DeploymentUpdate,
            {"status": "paused"},
            '"status" must be one of [pending, deploying, running, completed, failed, stopped]',
        ),
        (
            UserRegister,
            {"email": "not-an-email", "password": "secret123", "firstName": "A", "lastName": "B"},
            '"email" must be a valid email',
        ),
        (
            UserRegister,
            {"email": "a@b..c", "password": "secret123", "firstName": "A", "lastName": "B"},
            '"email" must be a valid email',
        ),
        (
            ArchitectureCreate,
            {"name": "Ring", "topology": "ring", "nodesCount": True, "difficulty": "Simple"},
            '"nodesCount" must be a number',
        ),
        (
            ScenarioCreate,
            {"name": "Ping", "testType": "ping", "complexity": "Basic", "duration": False},
            '"duration" must be a number',
        ),
        (
            ProtocolCreate,
            {
                "name": "TCP",
                "version": "v4",
                "description": None,
                "parameters": None,
                "category": "transport",
                "complexity": "Beginner",
            },
            '"description" must be a string',
        ),
        (
            UserRegister,
            {"email": "a@b.co", "password": "123", "firstName": "A", "lastName": "B"},
            '"password" length must be at least 6 characters long',
        ),
    ],
)
def test_error_messages(model, data, message):
    """Test the reported message for common failures."""
    assert error_for(model, data) == message


def test_first_error_wins():
    """Test only the first failing field is reported, in declaration order."""
    message = error_for(
        ProtocolCreate,
        {"version": "", "category": "nope", "complexity": "nope"},
    )

    assert message == '"name" is required'


def test_unknown_field_reported_after_known_fields():
    """Test unknown fields are rejected once the known fields pass."""
    valid = {"name": "TCP", "version": "v4", "category": "transport", "complexity": "Beginner"}

    assert error_for(ProtocolCreate, {**valid, "owner": "me"}) == '"owner" is not allowed'
    assert error_for(ProtocolCreate, {**valid, "owner": "me", "name": ""}) == (
        '"name" is not allowed to be empty'
    )


def test_description_may_be_empty():
    """Test description is the one string allowed to be empty."""
    protocol = validate_payload(
        ProtocolCreate,
        {
            "name": "TCP",
            "version": "v4",
            "description": "",
            "category": "transport",
            "complexity": "Beginner",
        },
    )

    assert protocol.description == ""


def test_update_schemas_accept_empty_payload():
    """Test every update field is optional."""
    assert validate_payload(ProtocolUpdate, {}).model_fields_set == set()
    assert validate_payload(ArchitectureUpdate, {}).model_fields_set == set()


def test_update_schemas_keep_field_constraints():
    """Test update fields are checked like create fields when present."""
    assert error_for(ArchitectureUpdate, {"nodesCount": -3}) == (
        '"nodesCount" must be greater than or equal to 1'
    )
    assert error_for(ProtocolUpdate, {"complexity": "Expert"}) == (
        '"complexity" must be one of [Beginner, Intermediate, Advanced]'
    )


def test_non_object_payload():
    """Test a list where an object is expected."""
    assert error_for(ProtocolCreate, ["TCP"]) == '"value" must be of type object'


@pytest.mark.parametrize(
    "model, data, message",
    [
        (ProtocolUpdate, {"name": None}, '"name" must be a string'),
        (ProtocolUpdate, {"description": None}, '"description" must be a string'),
        (ProtocolUpdate, {"parameters": None}, '"parameters" must be of type object'),
        (ArchitectureUpdate, {"nodesCount": None}, '"nodesCount" must be a number'),
        (ArchitectureUpdate, {"nodesCount": True}, '"nodesCount" must be a number'),
        (ScenarioUpdate, {"duration": None}, '"duration" must be a number'),
        (DeploymentUpdate, {"resources": None}, '"resources" must be of type object'),
        (DeploymentUpdate, {"resources": {"cpu": None}}, '"resources.cpu" must be a string'),
    ],
)
def test_update_schemas_reject_null(model, data, message):
    """Test an explicit null is an error rather than a no-op."""
    assert error_for(model, data) == message


def test_numeric_strings_still_count():
    """Test numeric strings are accepted for whole-number fields."""
    architecture = validate_payload(
        ArchitectureCreate,
        {"name": "Ring", "topology": "ring", "nodesCount": "5", "difficulty": "Simple"},
    )

    assert architecture.nodes_count == 5
    assert validate_payload(ScenarioUpdate, {"duration": "60"}).duration == 60
