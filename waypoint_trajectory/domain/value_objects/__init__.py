"""궤적 생성 값 객체 (불변, 동등성 기반 비교)."""

from waypoint_trajectory.domain.value_objects.marker import (
    Color,
    Marker,
    MarkerBatch,
    Point3,
    Quaternion,
    Scale,
)
from waypoint_trajectory.domain.value_objects.sample import (
    Sample,
    TrajectoryPoint,
)
from waypoint_trajectory.domain.value_objects.waypoint import (
    Waypoint,
    WaypointSnapshot,
)

__all__ = [
    'Color',
    'Marker',
    'MarkerBatch',
    'Point3',
    'Quaternion',
    'Sample',
    'Scale',
    'TrajectoryPoint',
    'Waypoint',
    'WaypointSnapshot',
]
