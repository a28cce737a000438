"""저장소 인프라 (WaypointSource 구현)."""

from waypoint_trajectory.infra.repository.in_memory_waypoint_store import (
    InMemoryWaypointStore,
)

__all__ = ["InMemoryWaypointStore"]
