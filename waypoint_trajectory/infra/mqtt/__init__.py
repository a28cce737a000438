"""MQTT 인프라 (경유지 수신, 마커 발행)."""

from waypoint_trajectory.infra.mqtt.mqtt_client import MqttClient
from waypoint_trajectory.infra.mqtt.mqtt_waypoint_adapter import (
    MqttMarkerPublisher,
    MqttWaypointAdapter,
)

__all__ = ["MqttClient", "MqttMarkerPublisher", "MqttWaypointAdapter"]
