"""Pytest configuration and fixtures."""

import asyncio
import os
from typing import AsyncGenerator

# Cheap password hashing for tests; must be set before settings are cached
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cyberlab.core.config import Settings
from cyberlab.db.store import DataStore
from cyberlab.main import create_app
from cyberlab.schemas.architecture import ArchitectureCreate, ArchitectureDTO
from cyberlab.schemas.protocol import ProtocolCreate, ProtocolDTO
from cyberlab.schemas.scenario import ScenarioCreate, ScenarioDTO
from cyberlab.services.architecture_service import ArchitectureService
from cyberlab.services.protocol_service import ProtocolService
from cyberlab.services.scenario_service import ScenarioService

# Lifecycle delays short enough to observe full provisioning in a test
START_DELAY = 0.05
READY_DELAY = 0.1


def make_settings(**overrides) -> Settings:
    """Test settings: no seed data, fast lifecycle."""
    values = {
        "seed_data": False,
        "deployment_start_delay": START_DELAY,
        "deployment_ready_delay": READY_DELAY,
    }
    values.update(overrides)
    return Settings(**values)


async def wait_for_status(
    client: AsyncClient, deployment_id: str, status: str, timeout: float = 3.0
) -> dict:
    """Poll a deployment until it reaches status."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while True:
        response = await client.get(f"/api/deployments/{deployment_id}")
        data = response.json()
        if data.get("status") == status or loop.time() > deadline:
            return data
        await asyncio.sleep(0.02)


@pytest_asyncio.fixture(scope="function")
async def app() -> AsyncGenerator[FastAPI, None]:
    """Fresh application with an empty store and a running scheduler."""
    application = create_app(make_settings())
    application.state.lifecycle.start()

    yield application

    application.state.lifecycle.shutdown()


@pytest_asyncio.fixture(scope="function")
async def seeded_app() -> AsyncGenerator[FastAPI, None]:
    """Fresh application with the demo seed data."""
    application = create_app(make_settings(seed_data=True))
    application.state.lifecycle.start()

    yield application

    application.state.lifecycle.shutdown()


@pytest_asyncio.fixture(scope="function")
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def seeded_client(seeded_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client over seeded data."""
    async with AsyncClient(
        transport=ASGITransport(app=seeded_app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def store(app: FastAPI) -> DataStore:
    """Store of the test application."""
    return app.state.store


@pytest.fixture
def sample_protocols(store: DataStore) -> list[ProtocolDTO]:
    """Create sample protocols."""
    service = ProtocolService(store)
    return [
        service.create(ProtocolCreate(
            name="TCP",
            version="v4",
            description="Reliable transport",
            category="transport",
            complexity="Beginner",
            parameters={"windowSize": 65535},
        )),
        service.create(ProtocolCreate(
            name="OSPF",
            version="v2",
            category="routing",
            complexity="Intermediate",
        )),
        service.create(ProtocolCreate(
            name="BGP",
            version="v4",
            category="routing",
            complexity="Advanced",
        )),
    ]


@pytest.fixture
def sample_architectures(store: DataStore) -> list[ArchitectureDTO]:
    """Create sample architectures."""
    service = ArchitectureService(store)
    return [
        service.create(ArchitectureCreate(
            name="Linear", topology="linear", nodes_count=5, difficulty="Simple"
        )),
        service.create(ArchitectureCreate(
            name="Star", topology="star", nodes_count=8, difficulty="Medium"
        )),
        service.create(ArchitectureCreate(
            name="Mesh", topology="mesh", nodes_count=12, difficulty="Complex"
        )),
    ]


@pytest.fixture
def sample_scenarios(store: DataStore) -> list[ScenarioDTO]:
    """Create sample scenarios."""
    service = ScenarioService(store)
    return [
        service.create(ScenarioCreate(
            name="Ping", test_type="ping", complexity="Basic", duration=300
        )),
        service.create(ScenarioCreate(
            name="Load", test_type="load", complexity="Intermediate", duration=900
        )),
        service.create(ScenarioCreate(
            name="Open ended", test_type="security", complexity="Advanced"
        )),
    ]


@pytest.fixture
def deployment_payload(
    sample_protocols: list[ProtocolDTO],
    sample_architectures: list[ArchitectureDTO],
    sample_scenarios: list[ScenarioDTO],
) -> dict:
    """Valid deployment creation body."""
    return {
        "protocolId": sample_protocols[0].id,
        "architectureId": sample_architectures[0].id,
        "scenarioId": sample_scenarios[0].id,
        "name": "TCP Linear Test",
        "resources": {"cpu": "500m", "memory": "1Gi"},
    }


@pytest_asyncio.fixture(scope="function")
async def auth_headers(client: AsyncClient) -> dict:
    """Register a user and return authorization headers."""
    response = await client.post(
        "/api/auth/register",
        json={
            "email": "student@cyberlab.com",
            "password": "secret123",
            "firstName": "Test",
            "lastName": "Student",
        },
    )
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}
