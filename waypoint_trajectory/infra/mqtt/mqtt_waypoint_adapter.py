"""경유지 수신 / 마커 발행 MQTT 어댑터."""

from __future__ import annotations

import logging

from waypoint_trajectory.domain.value_objects.marker import MarkerBatch
from waypoint_trajectory.infra.mqtt.message_serializer import (
    deserialize_waypoints,
    serialize_marker_batch,
)
from waypoint_trajectory.infra.mqtt.mqtt_client import MqttClient
from waypoint_trajectory.infra.repository.in_memory_waypoint_store import (
    InMemoryWaypointStore,
)
from waypoint_trajectory.usecase.ports.marker_publisher import MarkerPublisher

logger = logging.getLogger(__name__)

_QOS_WAYPOINTS = 1
_QOS_MARKERS = 0


class MqttWaypointAdapter:
    """경유지 토픽을 구독해 저장소를 통째로 교체한다.

    Args:
        mqtt_client: MQTT 클라이언트 래퍼.
        store: 교체 대상 경유지 저장소.
        topic: 경유지 토픽.
    """

    def __init__(
        self,
        mqtt_client: MqttClient,
        store: InMemoryWaypointStore,
        topic: str,
    ) -> None:
        self._client = mqtt_client
        self._store = store
        self._topic = topic

    def start(self) -> None:
        """경유지 토픽 구독을 시작한다."""
        self._client.subscribe(
            self._topic, self._on_waypoints, qos=_QOS_WAYPOINTS
        )

    def stop(self) -> None:
        """경유지 토픽 구독을 해제한다."""
        self._client.unsubscribe(self._topic)

    def _on_waypoints(self, topic: str, payload: bytes) -> None:
        try:
            waypoints = deserialize_waypoints(payload)
        except ValueError as exc:
            logger.warning(
                'Dropping malformed waypoint message on %s: %s', topic, exc
            )
            return
        snapshot = self._store.replace(waypoints)
        logger.info(
            'Received %d waypoint(s) on %s (rev=%d)',
            len(snapshot), topic, snapshot.revision,
        )


class MqttMarkerPublisher(MarkerPublisher):
    """MarkerPublisher의 MQTT 구현체.

    Args:
        mqtt_client: MQTT 클라이언트 래퍼.
        topic: 마커 배치 발행 토픽.
    """

    def __init__(self, mqtt_client: MqttClient, topic: str) -> None:
        self._client = mqtt_client
        self._topic = topic

    def publish(self, batch: MarkerBatch) -> None:
        self._client.publish(
            self._topic, serialize_marker_batch(batch), qos=_QOS_MARKERS
        )
        logger.debug(
            'Published %d marker(s) to %s', len(batch), self._topic
        )
