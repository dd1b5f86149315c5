"""Health check endpoints for daf-invite.

Provides /health and /ready endpoints for container orchestration
and load balancer health checks.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import ClassVar

from litestar import Controller, get

from daf_invite.services.events import EventService


class HealthStatus(StrEnum):
    """Health check status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass
class ComponentHealth:
    """Health status of an individual component."""

    name: str
    status: HealthStatus
    message: str | None = None
    latency_ms: float | None = None


@dataclass
class HealthResponse:
    """Health check response."""

    status: HealthStatus
    version: str = "0.1.0"
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())
    components: list[ComponentHealth] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "version": self.version,
            "timestamp": self.timestamp,
            "components": [
                {
                    "name": c.name,
                    "status": c.status.value,
                    "message": c.message,
                    "latency_ms": c.latency_ms,
                }
                for c in self.components
            ],
        }


class HealthController(Controller):
    """Health check controller.

    Provides liveness and readiness probes. Both touch the event storage
    through the injected event service.
    """

    path = ""
    tags: ClassVar[list[str]] = ["Health"]

    @get("/health")
    async def health(self, event_service: EventService) -> dict:
        """Liveness probe endpoint.

        Returns:
            Health status with component details.
        """
        components = [
            ComponentHealth(name="application", status=HealthStatus.HEALTHY, message="Application is running"),
            await self._check_storage(event_service),
        ]

        statuses = [c.status for c in components]
        if HealthStatus.UNHEALTHY in statuses:
            overall_status = HealthStatus.UNHEALTHY
        elif HealthStatus.DEGRADED in statuses:
            overall_status = HealthStatus.DEGRADED
        else:
            overall_status = HealthStatus.HEALTHY

        return HealthResponse(status=overall_status, components=components).to_dict()

    @get("/ready")
    async def ready(self, event_service: EventService) -> dict:
        """Readiness probe endpoint.

        Returns:
            Readiness status with individual check results.
        """
        storage = await self._check_storage(event_service)
        checks = {"application": True, "storage": storage.status is HealthStatus.HEALTHY}
        return {
            "ready": all(checks.values()),
            "timestamp": datetime.now(UTC).isoformat(),
            "checks": checks,
        }

    async def _check_storage(self, event_service: EventService) -> ComponentHealth:
        start = time.perf_counter()
        try:
            await event_service.list_events()
        except Exception as e:  # noqa: BLE001
            return ComponentHealth(name="storage", status=HealthStatus.UNHEALTHY, message=f"Storage error: {e!s}")
        return ComponentHealth(
            name="storage",
            status=HealthStatus.HEALTHY,
            message="Storage reachable",
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
        )
