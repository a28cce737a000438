"""궤적 생성 도메인 이벤트."""

from waypoint_trajectory.domain.events.trajectory_events import (
    DomainEvent,
    TrajectoryGeneratedEvent,
    TrajectoryGenerationFailedEvent,
    TrajectoryGenerationSkippedEvent,
)

__all__ = [
    "DomainEvent",
    "TrajectoryGeneratedEvent",
    "TrajectoryGenerationFailedEvent",
    "TrajectoryGenerationSkippedEvent",
]
