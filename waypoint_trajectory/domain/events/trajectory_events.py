"""궤적 생성 도메인 이벤트 정의.

파이프라인 실행 결과를 이벤트로 발행한다.
presentation/infra 레이어에서 이벤트를 구독하여 로깅 등 부가 로직을 처리한다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class TrajectoryGeneratedEvent(DomainEvent):
    """궤적 생성 성공 이벤트.

    Args:
        revision: 사용한 경유지 스냅샷 번호.
        num_waypoints: 경유지 개수.
        segment_times: 구간별 시간 (s).
        total_time: 전체 궤적 시간 (s).
        solve_time_sec: 선형 최적화 소요 시간 (s).
        num_markers: 발행한 마커 개수.
    """

    revision: int = 0
    num_waypoints: int = 0
    segment_times: tuple[float, ...] = ()
    total_time: float = 0.0
    solve_time_sec: float = 0.0
    num_markers: int = 0


@dataclass(frozen=True)
class TrajectoryGenerationSkippedEvent(DomainEvent):
    """경유지 부족으로 이번 주기를 건너뛴 이벤트.

    Args:
        revision: 스냅샷 번호.
        num_waypoints: 경유지 개수.
    """

    revision: int = 0
    num_waypoints: int = 0


@dataclass(frozen=True)
class TrajectoryGenerationFailedEvent(DomainEvent):
    """궤적 생성 실패 이벤트.

    Args:
        revision: 스냅샷 번호.
        error_type: 예외 클래스 이름.
        error_description: 예외 메시지.
    """

    revision: int = 0
    error_type: str = ""
    error_description: str = ""
