"""인메모리 경유지 저장소 구현체."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from datetime import UTC, datetime

from waypoint_trajectory.domain.value_objects.waypoint import (
    Waypoint,
    WaypointSnapshot,
)
from waypoint_trajectory.usecase.ports.waypoint_source import WaypointSource

logger = logging.getLogger(__name__)


class InMemoryWaypointStore(WaypointSource):
    """WaypointSource의 인메모리 구현체.

    수신 측은 replace()로 목록 전체를 교체하고,
    파이프라인은 latest()로 불변 스냅샷을 읽는다.
    교체와 읽기는 Lock으로 보호되어 부분 갱신이 보이지 않는다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot = WaypointSnapshot()

    def replace(self, waypoints: Iterable[Waypoint]) -> WaypointSnapshot:
        """경유지 목록을 통째로 교체한다.

        Args:
            waypoints: 새 경유지 목록.

        Returns:
            교체 후 스냅샷.
        """
        points = tuple(waypoints)
        with self._lock:
            self._snapshot = WaypointSnapshot(
                waypoints=points,
                revision=self._snapshot.revision + 1,
                received_at=datetime.now(UTC),
            )
            snapshot = self._snapshot
        logger.debug(
            'Waypoints replaced: %d point(s) (rev=%d)',
            len(points), snapshot.revision,
        )
        return snapshot

    def latest(self) -> WaypointSnapshot:
        with self._lock:
            return self._snapshot
