"""시각화 마커 출력 포트 인터페이스."""

from abc import ABC, abstractmethod

from waypoint_trajectory.domain.value_objects.marker import MarkerBatch


class MarkerPublisher(ABC):
    """마커 배치 발행자 인터페이스."""

    @abstractmethod
    def publish(self, batch: MarkerBatch) -> None:
        """마커 배치를 외부 뷰어로 발행한다.

        Args:
            batch: 한 번의 파이프라인 실행 결과.
        """
