"""경유지 입력 포트 인터페이스.

외부 협력자(토픽 구독 등)가 통째로 교체하는 최신 경유지 목록을
파이프라인이 한 번의 실행마다 한 번 읽어가도록 추상화한다.
"""

from abc import ABC, abstractmethod

from waypoint_trajectory.domain.value_objects.waypoint import WaypointSnapshot


class WaypointSource(ABC):
    """최신 경유지 스냅샷 제공자 인터페이스."""

    @abstractmethod
    def latest(self) -> WaypointSnapshot:
        """가장 최근에 교체된 경유지 스냅샷을 반환한다.

        Returns:
            불변 스냅샷. 아직 수신 전이면 빈 스냅샷.
        """
