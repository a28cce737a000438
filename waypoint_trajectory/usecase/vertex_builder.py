"""경유지 → 정점 변환 유스케이스.

첫/마지막 경유지는 경계 정점(위치 + 최적화 차수까지 0 고정),
중간 경유지는 위치만 고정한 정점으로 만든다.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from waypoint_trajectory.domain.entities.vertex import Vertex
from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.exceptions import (
    DimensionMismatchError,
    InsufficientWaypointsError,
)
from waypoint_trajectory.domain.value_objects.waypoint import Waypoint

WaypointLike = Waypoint | Sequence[float]


def _coordinates(waypoint: WaypointLike, dimension: int) -> tuple[float, ...]:
    """경유지에서 dimension 길이의 좌표를 꺼낸다."""
    if isinstance(waypoint, Waypoint):
        if dimension == 2 and waypoint.z != 0.0:
            raise DimensionMismatchError(
                f'2차원 궤적의 경유지 z 좌표는 0이어야 합니다: {waypoint}'
            )
        return waypoint.as_tuple(dimension)

    coords = tuple(float(c) for c in waypoint)
    if len(coords) != dimension:
        raise DimensionMismatchError(
            f'경유지 좌표 개수({len(coords)})가 차원({dimension})과 다릅니다: '
            f'{coords}'
        )
    return coords


def build_vertices(
    waypoints: Iterable[WaypointLike],
    dimension: int,
    derivative_to_optimize: int = DerivativeOrder.ACCELERATION,
) -> list[Vertex]:
    """경유지 목록으로 정점 목록을 만든다.

    Args:
        waypoints: 순서가 있는 경유지 (2개 이상).
        dimension: 공간 차원 (2 또는 3).
        derivative_to_optimize: 경계 정점에서 0으로 고정할 최고 미분 차수.

    Returns:
        경유지와 같은 순서의 정점 목록.

    Raises:
        InsufficientWaypointsError: 경유지가 2개 미만일 때.
        DimensionMismatchError: 좌표 개수가 차원과 다르거나,
            2차원에서 Waypoint의 z가 0이 아닐 때.
    """
    points = list(waypoints)
    if len(points) < 2:
        raise InsufficientWaypointsError(
            f'궤적 생성에는 경유지가 2개 이상 필요합니다: {len(points)}개'
        )

    coords = [_coordinates(wp, dimension) for wp in points]

    start = Vertex(dimension)
    start.make_start_or_end(coords[0], derivative_to_optimize)
    vertices = [start]

    for position in coords[1:-1]:
        middle = Vertex(dimension)
        middle.add_constraint(DerivativeOrder.POSITION, position)
        vertices.append(middle)

    end = Vertex(dimension)
    end.make_start_or_end(coords[-1], derivative_to_optimize)
    vertices.append(end)
    return vertices
