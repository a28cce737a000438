"""공통 테스트 fixture."""

import pytest

from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.value_objects.waypoint import (
    Waypoint,
    WaypointSnapshot,
)
from waypoint_trajectory.usecase.polynomial_optimizer import (
    optimize_trajectory,
)
from waypoint_trajectory.usecase.ports.config_port import (
    AppConfig,
    MqttConfig,
    TrajectoryConfig,
)
from waypoint_trajectory.usecase.segment_time_estimator import (
    estimate_segment_times,
)
from waypoint_trajectory.usecase.vertex_builder import build_vertices


@pytest.fixture
def line_waypoints():
    return [Waypoint(0.0, 0.0, 0.0), Waypoint(5.0, 0.0, 0.0),
            Waypoint(10.0, 0.0, 0.0)]


@pytest.fixture
def zigzag_waypoints():
    return [
        Waypoint(0.0, 0.0, 1.0),
        Waypoint(2.0, 1.0, 1.5),
        Waypoint(4.0, -1.0, 2.0),
        Waypoint(6.0, 0.5, 1.0),
    ]


@pytest.fixture
def sample_snapshot(line_waypoints):
    return WaypointSnapshot(waypoints=tuple(line_waypoints), revision=3)


@pytest.fixture
def sample_config():
    return AppConfig(
        trajectory=TrajectoryConfig(
            dimension=3,
            derivative_to_optimize=DerivativeOrder.ACCELERATION,
            num_coefficients=10,
            v_max=1.0,
            a_max=3.0,
            magic_constant=6.5,
        ),
        mqtt=MqttConfig(enabled=False),
    )


@pytest.fixture
def zigzag_vertices(zigzag_waypoints):
    return build_vertices(zigzag_waypoints, 3, DerivativeOrder.ACCELERATION)


@pytest.fixture
def zigzag_segment_times(zigzag_vertices):
    return estimate_segment_times(zigzag_vertices, 1.0, 3.0, 6.5)


@pytest.fixture
def zigzag_trajectory(zigzag_vertices, zigzag_segment_times):
    return optimize_trajectory(
        zigzag_vertices, zigzag_segment_times, dimension=3,
        num_coefficients=10,
        derivative_to_optimize=DerivativeOrder.ACCELERATION,
    )


@pytest.fixture
def line_trajectory(line_waypoints):
    vertices = build_vertices(line_waypoints, 3, DerivativeOrder.ACCELERATION)
    times = estimate_segment_times(vertices, 1.0, 3.0, 6.5)
    return optimize_trajectory(vertices, times, dimension=3)
