"""궤적 생성 이벤트 발행 포트.

GenerateTrajectory 가 실행 결과(생성/건너뜀/실패)를 알리는 통로.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from waypoint_trajectory.domain.events.trajectory_events import DomainEvent


class EventPublisher(ABC):
    """궤적 생성 이벤트 발행자 인터페이스."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """파이프라인 실행 결과 이벤트를 발행한다."""

    @abstractmethod
    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: Callable[[DomainEvent], None],
    ) -> None:
        """이벤트 타입별 핸들러를 등록한다.

        Args:
            event_type: TrajectoryGeneratedEvent 등 구독할 이벤트 타입.
            handler: 파이프라인 스레드에서 동기 호출되는 핸들러.
        """
