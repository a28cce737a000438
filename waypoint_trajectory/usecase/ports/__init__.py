"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from waypoint_trajectory.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    MqttConfig,
    SamplingConfig,
    TopicConfig,
    TrajectoryConfig,
    VisualizationConfig,
)
from waypoint_trajectory.usecase.ports.event_publisher import EventPublisher
from waypoint_trajectory.usecase.ports.marker_publisher import MarkerPublisher
from waypoint_trajectory.usecase.ports.waypoint_source import WaypointSource

__all__ = [
    "AppConfig",
    "ConfigPort",
    "EventPublisher",
    "MarkerPublisher",
    "MqttConfig",
    "SamplingConfig",
    "TopicConfig",
    "TrajectoryConfig",
    "VisualizationConfig",
    "WaypointSource",
]
