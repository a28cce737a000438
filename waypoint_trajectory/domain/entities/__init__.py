"""궤적 생성 도메인 엔티티."""

from waypoint_trajectory.domain.entities.segment import Segment
from waypoint_trajectory.domain.entities.trajectory import Trajectory
from waypoint_trajectory.domain.entities.vertex import Vertex

__all__ = [
    'Segment',
    'Trajectory',
    'Vertex',
]
