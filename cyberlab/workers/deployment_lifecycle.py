"""Deployment lifecycle engine.

Drives deployments through the simulated provisioning sequence

    pending -> deploying -> running -> stopped

The two automatic transitions are date-triggered jobs on an APScheduler
AsyncIOScheduler, keyed by deployment id and target status. A job that
fires after its deployment was deleted does nothing. Cancelling those
jobs on delete is opt-in (``cancel_on_delete``).
"""

import re
import time
from datetime import timedelta
from typing import Any

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger

from cyberlab.core.exceptions import DeploymentStateError
from cyberlab.db.store import ResourceStore, utc_now
from cyberlab.schemas.deployment import DeploymentDTO, DeploymentLog, DeploymentStatus

# Automatic transitions and the log line each one appends
TRANSITION_MESSAGES = {
    DeploymentStatus.DEPLOYING: "Starting Kubernetes deployment",
    DeploymentStatus.RUNNING: "Deployment completed successfully",
}


def job_id(deployment_id: str, status: DeploymentStatus) -> str:
    """Scheduler job id for a deployment's transition into status."""
    return f"deployment:{deployment_id}:{status.value}"


class DeploymentLifecycle:
    """State machine for simulated deployments."""

    def __init__(
        self,
        deployments: ResourceStore[DeploymentDTO],
        start_delay: float = 1.0,
        ready_delay: float = 5.0,
        cancel_on_delete: bool = False,
        scheduler: AsyncIOScheduler | None = None,
    ):
        self.deployments = deployments
        self.start_delay = start_delay
        self.ready_delay = ready_delay
        self.cancel_on_delete = cancel_on_delete
        self.scheduler = scheduler or AsyncIOScheduler(timezone="UTC")
        self._last_suffix = 0

    def start(self) -> None:
        """Start the scheduler. Must be called from a running event loop."""
        if not self.scheduler.running:
            self.scheduler.start()
            logger.info("Deployment lifecycle scheduler started")

    def shutdown(self) -> None:
        """Stop the scheduler, dropping transitions that have not fired."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Deployment lifecycle scheduler stopped")

    def launch(self, fields: dict[str, Any]) -> DeploymentDTO:
        """Create a pending deployment and schedule its provisioning."""
        deployment = self.deployments.create({
            **fields,
            "status": DeploymentStatus.PENDING,
            "namespace": self.namespace_for(fields["name"]),
            "logs": [],
        })
        self._schedule(deployment.id, DeploymentStatus.DEPLOYING, self.start_delay)
        logger.info(f"Deployment {deployment.id} created in namespace {deployment.namespace}")
        return deployment

    def namespace_for(self, name: str) -> str:
        """Namespace for a new deployment.

        The millisecond suffix is forced to increase, so deployments sharing
        a name never share a namespace.
        """
        slug = re.sub(r"\s+", "-", name.strip().lower())
        suffix = max(int(time.time() * 1000), self._last_suffix + 1)
        self._last_suffix = suffix
        return f"cyberlab-{slug}-{suffix}"

    def set_status(
        self, deployment_id: str, status: DeploymentStatus
    ) -> DeploymentDTO | None:
        """Set deployment status."""
        return self.deployments.update(deployment_id, {"status": status})

    def append_log(
        self, deployment_id: str, message: str, level: str = "INFO"
    ) -> DeploymentDTO | None:
        """Append a log entry to a deployment."""
        deployment = self.deployments.get_by_id(deployment_id)
        if not deployment:
            return None

        entry = DeploymentLog(timestamp=utc_now(), level=level, message=message)
        return self.deployments.update(
            deployment_id, {"logs": [*deployment.logs, entry]}
        )

    def stop(self, deployment_id: str) -> DeploymentDTO | None:
        """Stop a running deployment.

        Returns None if the deployment does not exist and raises
        DeploymentStateError if it is not running.
        """
        deployment = self.deployments.get_by_id(deployment_id)
        if not deployment:
            return None

        if deployment.status != DeploymentStatus.RUNNING:
            raise DeploymentStateError("Deployment is not running")

        self.set_status(deployment_id, DeploymentStatus.STOPPED)
        logger.info(f"Deployment {deployment_id} stopped by user")
        return self.append_log(deployment_id, "Deployment stopped by user")

    def discard(self, deployment_id: str) -> None:
        """Handle removal of a deployment from the store."""
        if self.cancel_on_delete:
            self.cancel(deployment_id)

    def cancel(self, deployment_id: str) -> int:
        """Remove scheduled transitions of a deployment, returning how many."""
        removed = 0
        for status in TRANSITION_MESSAGES:
            try:
                self.scheduler.remove_job(job_id(deployment_id, status))
                removed += 1
            except JobLookupError:
                continue
        if removed:
            logger.info(f"Cancelled {removed} pending transition(s) of deployment {deployment_id}")
        return removed

    def pending_transitions(self, deployment_id: str) -> list[DeploymentStatus]:
        """Statuses the deployment is still scheduled to move into."""
        return [
            status
            for status in TRANSITION_MESSAGES
            if self.scheduler.get_job(job_id(deployment_id, status)) is not None
        ]

    def _schedule(
        self, deployment_id: str, status: DeploymentStatus, delay: float
    ) -> None:
        self.scheduler.add_job(
            self._advance,
            "date",
            run_date=utc_now() + timedelta(seconds=delay),
            args=[deployment_id, status],
            id=job_id(deployment_id, status),
            replace_existing=True,
            misfire_grace_time=None,
        )

    async def _advance(self, deployment_id: str, status: DeploymentStatus) -> None:
        """Run one automatic transition."""
        if not self.deployments.get_by_id(deployment_id):
            logger.debug(
                f"Deployment {deployment_id} no longer exists, "
                f"skipping transition to {status.value}"
            )
            return

        self.set_status(deployment_id, status)
        self.append_log(deployment_id, TRANSITION_MESSAGES[status])
        logger.info(f"Deployment {deployment_id} is now {status.value}")

        if status == DeploymentStatus.DEPLOYING:
            self._schedule(deployment_id, DeploymentStatus.RUNNING, self.ready_delay)
