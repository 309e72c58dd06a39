"""Deployment service."""

from typing import Any

from cyberlab.core.exceptions import ReferenceNotFoundError
from cyberlab.db.store import DataStore
from cyberlab.schemas.deployment import (
    DeploymentCreate,
    DeploymentDTO,
    DeploymentLog,
)
from cyberlab.services.base_service import BaseService
from cyberlab.workers.deployment_lifecycle import DeploymentLifecycle


class DeploymentService(BaseService[DeploymentDTO]):
    """Deployment management on top of the lifecycle engine."""

    def __init__(self, store: DataStore, lifecycle: DeploymentLifecycle):
        super().__init__(store.deployments)
        self.store = store
        self.lifecycle = lifecycle

    def search(self, status: str | None = None) -> list[DeploymentDTO]:
        """List deployments, optionally filtered by status."""
        return self.records.filter(lambda d: not status or d.status == status)

    def create_deployment(self, data: DeploymentCreate) -> DeploymentDTO:
        """Create a deployment after checking its references.

        References are resolved protocol, architecture, scenario; the first
        missing one raises ReferenceNotFoundError.
        """
        if not self.store.protocols.get_by_id(data.protocol_id):
            raise ReferenceNotFoundError("Protocol")
        if not self.store.architectures.get_by_id(data.architecture_id):
            raise ReferenceNotFoundError("Architecture")
        if not self.store.scenarios.get_by_id(data.scenario_id):
            raise ReferenceNotFoundError("Scenario")

        return self.lifecycle.launch(self._fields(data))

    def delete_deployment(self, deployment_id: str) -> bool:
        """Delete a deployment."""
        deleted = self.delete_by_id(deployment_id)
        if deleted:
            self.lifecycle.discard(deployment_id)
        return deleted

    def get_logs(self, deployment_id: str) -> list[DeploymentLog] | None:
        """Get deployment logs in append order."""
        deployment = self.get_by_id(deployment_id)
        if not deployment:
            return None
        return deployment.logs

    def stop_deployment(self, deployment_id: str) -> DeploymentDTO | None:
        """Stop a running deployment."""
        return self.lifecycle.stop(deployment_id)

    @staticmethod
    def build_manifest(
        deployment: DeploymentDTO,
        image: str = "nginx:latest",
        replicas: int = 1,
        port: int = 80,
    ) -> dict[str, Any]:
        """Kubernetes Deployment manifest describing a deployment.

        Nothing is applied anywhere; the manifest is informational.
        """
        name = deployment.name or "cyberlab-deployment"
        resources = (
            deployment.resources.model_dump(exclude_none=True)
            if deployment.resources
            else {}
        )

        return {
            "apiVersion": "apps/v1",
            "kind": "Deployment",
            "metadata": {
                "name": name,
                "namespace": deployment.namespace or "default",
            },
            "spec": {
                "replicas": replicas,
                "selector": {"matchLabels": {"app": name}},
                "template": {
                    "metadata": {"labels": {"app": name}},
                    "spec": {
                        "containers": [
                            {
                                "name": name,
                                "image": image,
                                "ports": [{"containerPort": port}],
                                "resources": resources,
                            }
                        ]
                    },
                },
            },
        }
