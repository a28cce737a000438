"""경유지 궤적 생성 노드.

DI 조립 및 전체 생명주기를 관리하는 오케스트레이션 노드이다.
모든 의존성은 이 레이어에서 조립(wire)되어 usecase에 주입된다.
"""

from __future__ import annotations

import logging
import threading
import uuid

from waypoint_trajectory.domain.events.trajectory_events import (
    TrajectoryGeneratedEvent,
    TrajectoryGenerationFailedEvent,
)
from waypoint_trajectory.domain.value_objects.marker import MarkerBatch
from waypoint_trajectory.infra.event import InMemoryEventPublisher
from waypoint_trajectory.infra.mqtt import (
    MqttClient,
    MqttMarkerPublisher,
    MqttWaypointAdapter,
)
from waypoint_trajectory.infra.repository import InMemoryWaypointStore
from waypoint_trajectory.usecase import GenerateTrajectory, PipelineResult
from waypoint_trajectory.usecase.ports.config_port import AppConfig
from waypoint_trajectory.usecase.ports.marker_publisher import MarkerPublisher

logger = logging.getLogger(__name__)

_NODE_NAME = "waypoint_trajectory_node"


class LoggingMarkerPublisher(MarkerPublisher):
    """MQTT 없이 실행할 때 마커 배치 요약만 로그로 남긴다."""

    def publish(self, batch: MarkerBatch) -> None:
        logger.info(
            "Markers ready: %d marker(s), %d path point(s)",
            len(batch),
            0 if batch.path is None else len(batch.path.points),
        )


class TrajectoryNode:
    """경유지 궤적 생성 노드.

    설정 → 저장소/발행자/MQTT 어댑터 생성 → 유스케이스 조립을 수행하고,
    update_rate_hz 주기로 파이프라인을 실행한다.

    Args:
        config: 애플리케이션 설정.
        mqtt_client: 외부에서 주입할 MQTT 클라이언트. None이면
            config.mqtt.enabled 에 따라 생성한다.
    """

    def __init__(
        self,
        config: AppConfig,
        mqtt_client: MqttClient | None = None,
    ) -> None:
        self._config = config
        self._stop_event = threading.Event()

        # -- 1. 인프라 어댑터 생성 --
        self._store = InMemoryWaypointStore()
        self._event_publisher = InMemoryEventPublisher()

        if mqtt_client is None and config.mqtt.enabled:
            mqtt_client = MqttClient(
                config=config.mqtt,
                client_id=f"{_NODE_NAME}_{uuid.uuid4().hex[:8]}",
            )
        self._mqtt_client = mqtt_client

        marker_publisher: MarkerPublisher
        if self._mqtt_client is not None:
            self._waypoint_adapter: MqttWaypointAdapter | None = (
                MqttWaypointAdapter(
                    mqtt_client=self._mqtt_client,
                    store=self._store,
                    topic=config.topics.waypoints,
                )
            )
            marker_publisher = MqttMarkerPublisher(
                self._mqtt_client, config.topics.markers
            )
        else:
            self._waypoint_adapter = None
            marker_publisher = LoggingMarkerPublisher()

        # -- 2. 유스케이스 생성 (DI) --
        self._generate = GenerateTrajectory(
            waypoint_source=self._store,
            marker_publisher=marker_publisher,
            event_publisher=self._event_publisher,
            config=config,
        )

        # -- 3. 이벤트 핸들러 등록 --
        self._event_publisher.subscribe(
            TrajectoryGeneratedEvent, self._on_generated
        )
        self._event_publisher.subscribe(
            TrajectoryGenerationFailedEvent, self._on_failed
        )

        logger.info("TrajectoryNode initialized")

    @property
    def store(self) -> InMemoryWaypointStore:
        """경유지 저장소."""
        return self._store

    @property
    def event_publisher(self) -> InMemoryEventPublisher:
        return self._event_publisher

    def start(self) -> None:
        """MQTT 연결과 경유지 구독을 시작한다."""
        if self._mqtt_client is not None:
            self._mqtt_client.connect()
        if self._waypoint_adapter is not None:
            self._waypoint_adapter.start()

    def tick(self) -> PipelineResult | None:
        """파이프라인을 한 번 실행한다."""
        return self._generate.execute()

    def spin(self) -> None:
        """stop() 이 호출될 때까지 주기적으로 tick() 을 실행한다."""
        period_sec = 1.0 / self._config.update_rate_hz
        logger.info("Spinning at %.1f Hz", self._config.update_rate_hz)
        while not self._stop_event.is_set():
            self.tick()
            self._stop_event.wait(period_sec)

    def stop(self) -> None:
        self._stop_event.set()

    def shutdown(self) -> None:
        """노드를 종료한다."""
        logger.info("Shutting down trajectory node")
        self.stop()
        if self._waypoint_adapter is not None:
            self._waypoint_adapter.stop()
        if self._mqtt_client is not None:
            self._mqtt_client.disconnect()

    # -- 이벤트 핸들러 --

    def _on_generated(self, event: TrajectoryGeneratedEvent) -> None:
        logger.info(
            "Trajectory rev=%d: %d waypoint(s), T=%.3f s, %d marker(s)",
            event.revision, event.num_waypoints,
            event.total_time, event.num_markers,
        )

    def _on_failed(self, event: TrajectoryGenerationFailedEvent) -> None:
        logger.warning(
            "Trajectory rev=%d not published: %s",
            event.revision, event.error_type,
        )
