"""Seed data for a fresh in-memory store."""

from loguru import logger

from cyberlab.core.config import Settings
from cyberlab.core.security import get_password_hash
from cyberlab.db.store import DataStore, utc_now
from cyberlab.schemas.architecture import (
    ArchitectureDifficulty,
    ArchitectureDTO,
    Topology,
)
from cyberlab.schemas.auth import UserRecord, UserRole
from cyberlab.schemas.deployment import (
    DeploymentDTO,
    DeploymentLog,
    DeploymentStatus,
    ResourceSpec,
)
from cyberlab.schemas.protocol import (
    ProtocolCategory,
    ProtocolComplexity,
    ProtocolDTO,
)
from cyberlab.schemas.scenario import (
    ScenarioComplexity,
    ScenarioDTO,
    ScenarioTestType,
)


def seed_users(store: DataStore, settings: Settings) -> None:
    """Seed the admin user."""
    now = utc_now()
    store.users.add(
        UserRecord(
            id="user-001",
            email=settings.admin_email,
            hashed_password=get_password_hash(settings.admin_password, settings),
            first_name="Admin",
            last_name="User",
            role=UserRole.ADMIN,
            created_at=now,
            updated_at=now,
        )
    )
    logger.info("Seeded admin user")


def seed_protocols(store: DataStore) -> None:
    """Seed protocols."""
    now = utc_now()
    protocols = [
        ProtocolDTO(
            id="proto-001",
            name="TCP",
            version="v4",
            description="Transmission Control Protocol for reliable communication",
            category=ProtocolCategory.TRANSPORT,
            complexity=ProtocolComplexity.BEGINNER,
            parameters={"windowSize": 65535, "timeout": 30000},
            created_at=now,
            updated_at=now,
        ),
        ProtocolDTO(
            id="proto-002",
            name="OSPF",
            version="v2",
            description="Open Shortest Path First dynamic routing protocol",
            category=ProtocolCategory.ROUTING,
            complexity=ProtocolComplexity.INTERMEDIATE,
            parameters={"helloInterval": 10, "deadInterval": 40, "area": "0.0.0.0"},
            created_at=now,
            updated_at=now,
        ),
        ProtocolDTO(
            id="proto-003",
            name="BGP",
            version="v4",
            description="Border Gateway Protocol for inter-domain routing",
            category=ProtocolCategory.ROUTING,
            complexity=ProtocolComplexity.ADVANCED,
            parameters={"asNumber": 65000, "keepalive": 60, "holdtime": 180},
            created_at=now,
            updated_at=now,
        ),
    ]
    for protocol in protocols:
        store.protocols.add(protocol)
    logger.info(f"Seeded {len(protocols)} protocols")


def seed_architectures(store: DataStore) -> None:
    """Seed architectures."""
    now = utc_now()
    architectures = [
        ArchitectureDTO(
            id="arch-001",
            name="Basic Linear Network",
            topology=Topology.LINEAR,
            description="Simple linear topology for basic testing",
            nodes_count=5,
            difficulty=ArchitectureDifficulty.SIMPLE,
            configuration={"bandwidth": "100Mbps", "latency": "10ms"},
            created_at=now,
            updated_at=now,
        ),
        ArchitectureDTO(
            id="arch-002",
            name="Star Network Hub",
            topology=Topology.STAR,
            description="Centralized star topology with control point",
            nodes_count=8,
            difficulty=ArchitectureDifficulty.MEDIUM,
            configuration={
                "centralNode": "hub-01",
                "bandwidth": "1Gbps",
                "redundancy": False,
            },
            created_at=now,
            updated_at=now,
        ),
        ArchitectureDTO(
            id="arch-003",
            name="Mesh Network",
            topology=Topology.MESH,
            description="Complex mesh topology with multiple redundancy",
            nodes_count=12,
            difficulty=ArchitectureDifficulty.COMPLEX,
            configuration={
                "redundancyLevel": "high",
                "bandwidth": "10Gbps",
                "failoverTime": "1s",
            },
            created_at=now,
            updated_at=now,
        ),
    ]
    for architecture in architectures:
        store.architectures.add(architecture)
    logger.info(f"Seeded {len(architectures)} architectures")


def seed_scenarios(store: DataStore) -> None:
    """Seed scenarios."""
    now = utc_now()
    scenarios = [
        ScenarioDTO(
            id="scen-001",
            name="Basic Connectivity Test",
            test_type=ScenarioTestType.PING,
            description="Simple ping test to verify network connectivity",
            complexity=ScenarioComplexity.BASIC,
            duration=300,
            parameters={"packetSize": 64, "interval": 1000, "timeout": 5000},
            created_at=now,
            updated_at=now,
        ),
        ScenarioDTO(
            id="scen-002",
            name="Load Simulation Test",
            test_type=ScenarioTestType.LOAD,
            description="Stress test to evaluate network performance under load",
            complexity=ScenarioComplexity.INTERMEDIATE,
            duration=900,
            parameters={
                "concurrentConnections": 100,
                "dataRate": "10Mbps",
                "rampUpTime": 60,
            },
            created_at=now,
            updated_at=now,
        ),
        ScenarioDTO(
            id="scen-003",
            name="Fault Tolerance Test",
            test_type=ScenarioTestType.FAULT,
            description="Test network resilience by simulating failures",
            complexity=ScenarioComplexity.ADVANCED,
            duration=1800,
            parameters={
                "failureRate": 0.1,
                "recoveryTime": 30,
                "failureTypes": ["link", "node", "congestion"],
            },
            created_at=now,
            updated_at=now,
        ),
    ]
    for scenario in scenarios:
        store.scenarios.add(scenario)
    logger.info(f"Seeded {len(scenarios)} scenarios")


def seed_deployments(store: DataStore) -> None:
    """Seed one running deployment wired to the first protocol/architecture/scenario."""
    now = utc_now()
    store.deployments.add(
        DeploymentDTO(
            id="deploy-001",
            protocol_id="proto-001",
            architecture_id="arch-001",
            scenario_id="scen-001",
            name="TCP Linear Test",
            status=DeploymentStatus.RUNNING,
            namespace="cyberlab-tcp-001",
            resources=ResourceSpec(cpu="2000m", memory="4Gi", storage="10Gi"),
            logs=[
                DeploymentLog(
                    timestamp=now,
                    level="INFO",
                    message="Deployment started successfully",
                )
            ],
            created_at=now,
            updated_at=now,
        )
    )
    logger.info("Seeded 1 deployment")


def seed_all(store: DataStore, settings: Settings) -> None:
    """Seed all demo data."""
    logger.info("Starting store seeding...")

    seed_users(store, settings)
    seed_protocols(store)
    seed_architectures(store)
    seed_scenarios(store)
    seed_deployments(store)

    logger.info("Store seeding completed!")
