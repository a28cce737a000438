"""궤적 시각화 마커 생성 유스케이스.

모든 샘플로 경로 LINE_STRIP을 만들고, 누적 이동 거리가
지정 거리를 넘을 때마다 pose/가속도/속도 마커를 배치한다.
시간 샘플링 밀도와 무관하게 공간적으로 고른 마커 밀도를 얻는다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

import numpy as np
from scipy.spatial.transform import Rotation

from waypoint_trajectory.domain.entities.vertex import Vertex
from waypoint_trajectory.domain.enums import (
    DerivativeOrder,
    MarkerAction,
    MarkerCategory,
    MarkerType,
)
from waypoint_trajectory.domain.value_objects.marker import (
    Color,
    Marker,
    MarkerBatch,
    Point3,
    Quaternion,
    Scale,
)
from waypoint_trajectory.domain.value_objects.sample import TrajectoryPoint

logger = logging.getLogger(__name__)

GRAVITY = 9.81

PATH_COLOR = Color(1.0, 0.5, 0.0, 1.0)
STRAIGHT_PATH_COLOR = Color(0.5, 1.0, 0.0, 1.0)
POSE_COLOR = Color(1.0, 0.0, 0.0, 1.0)
ACCELERATION_COLOR = Color(190.0 / 255.0, 81.0 / 255.0, 80.0 / 255.0, 1.0)
VELOCITY_COLOR = Color(80.0 / 255.0, 172.0 / 255.0, 196.0 / 255.0, 1.0)

LINE_WIDTH = 0.01
POSE_ARROW_LENGTH = 0.3
ARROW_DIAMETER = 0.3


def _point(vector: np.ndarray) -> Point3:
    padded = np.zeros(3)
    padded[:min(vector.shape[0], 3)] = vector[:3]
    return Point3(float(padded[0]), float(padded[1]), float(padded[2]))


def orientation_from_acceleration(
    acceleration: np.ndarray, yaw: float = 0.0
) -> Quaternion:
    """가속도(+중력)로부터 추력 방향 기준 자세를 계산한다.

    기체 z축은 a + g*e_z 방향, x축은 yaw 방향을 수평면에 투영한 방향.
    """
    thrust = np.asarray(acceleration, dtype=float) + np.array([0.0, 0.0, GRAVITY])
    norm = np.linalg.norm(thrust)
    z_body = thrust / norm if norm > 1e-9 else np.array([0.0, 0.0, 1.0])
    x_course = np.array([np.cos(yaw), np.sin(yaw), 0.0])
    y_body = np.cross(z_body, x_course)
    if np.linalg.norm(y_body) < 1e-9:
        y_body = np.array([-np.sin(yaw), np.cos(yaw), 0.0])
    y_body /= np.linalg.norm(y_body)
    x_body = np.cross(y_body, z_body)

    x, y, z, w = Rotation.from_matrix(
        np.column_stack((x_body, y_body, z_body))
    ).as_quat()
    return Quaternion(float(x), float(y), float(z), float(w))


def _arrow(
    ns: MarkerCategory, start: np.ndarray, end: np.ndarray, color: Color
) -> Marker:
    return Marker(
        ns=ns,
        marker_type=MarkerType.ARROW,
        points=[_point(start), _point(end)],
        scale=Scale(ARROW_DIAMETER * 0.1, ARROW_DIAMETER * 2 * 0.1, 0.0),
        color=color,
    )


def _pose(point: TrajectoryPoint) -> Marker:
    return Marker(
        ns=MarkerCategory.POSE,
        marker_type=MarkerType.ARROW,
        position=_point(point.position),
        orientation=orientation_from_acceleration(point.acceleration),
        scale=Scale(POSE_ARROW_LENGTH, ARROW_DIAMETER * 0.1,
                    ARROW_DIAMETER * 0.1),
        color=POSE_COLOR,
    )


def set_marker_properties(
    markers: Iterable[Marker],
    frame_id: str,
    stamp: datetime,
    lifetime_sec: float = 0.0,
    action: MarkerAction = MarkerAction.ADD,
) -> None:
    """공통 헤더/동작/수명을 설정하고 id를 0부터 순서대로 매긴다."""
    for marker_id, marker in enumerate(markers):
        marker.id = marker_id
        marker.frame_id = frame_id
        marker.stamp = stamp
        marker.action = action
        marker.lifetime_sec = lifetime_sec


def draw_trajectory_markers(
    points: Iterable[TrajectoryPoint],
    distance: float,
    frame_id: str,
    stamp: datetime | None = None,
) -> MarkerBatch:
    """샘플 목록으로 경로와 간격 조정된 마커를 만든다.

    Args:
        points: 시간 순 샘플 (위치, 속도, 가속도).
        distance: 추가 마커 사이 최소 거리 (m). 0이면 모든 샘플에 배치.
        frame_id: 기준 좌표계.
        stamp: 마커 시각. None이면 현재 시각.

    Returns:
        경로 LINE_STRIP과 개별 마커.
    """
    path = Marker(
        ns=MarkerCategory.PATH,
        marker_type=MarkerType.LINE_STRIP,
        scale=Scale(LINE_WIDTH, 0.0, 0.0),
        color=PATH_COLOR,
    )
    markers: list[Marker] = []

    accumulated_distance = 0.0
    last_position = np.zeros(3)
    for point in points:
        position = np.asarray(point.position, dtype=float)
        accumulated_distance += float(np.linalg.norm(last_position - position))
        path.points.append(_point(position))

        if distance <= 0.0 or accumulated_distance > distance:
            accumulated_distance = 0.0
            markers.append(_pose(point))
            markers.append(_arrow(
                MarkerCategory.ACCELERATION, position,
                position + point.acceleration, ACCELERATION_COLOR,
            ))
            markers.append(_arrow(
                MarkerCategory.VELOCITY, position,
                position + point.velocity, VELOCITY_COLOR,
            ))
        last_position = position

    batch = MarkerBatch(path=path, markers=markers)
    set_marker_properties(
        batch.all_markers(), frame_id, stamp or datetime.now(UTC)
    )
    logger.debug(
        'Drew %d path points and %d markers (distance=%.3f)',
        len(path.points), len(markers), distance,
    )
    return batch


def draw_vertices(
    vertices: Sequence[Vertex],
    frame_id: str,
    stamp: datetime | None = None,
) -> MarkerBatch:
    """정점 위치를 직선으로 잇는 straight_path 마커를 만든다.

    위치 제약이 없는 정점은 경고 후 건너뛴다.
    """
    line = Marker(
        ns=MarkerCategory.STRAIGHT_PATH,
        marker_type=MarkerType.LINE_STRIP,
        scale=Scale(LINE_WIDTH, 0.0, 0.0),
        color=STRAIGHT_PATH_COLOR,
    )
    for index, vertex in enumerate(vertices):
        if not vertex.has_constraint(DerivativeOrder.POSITION):
            logger.warning(
                'Vertex %d has no position constraint, skipping.', index
            )
            continue
        line.points.append(
            _point(vertex.get_constraint(DerivativeOrder.POSITION))
        )

    batch = MarkerBatch(path=line)
    set_marker_properties(
        batch.all_markers(), frame_id, stamp or datetime.now(UTC)
    )
    return batch
