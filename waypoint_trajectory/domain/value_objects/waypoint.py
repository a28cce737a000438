"""경유지 관련 값 객체."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class Waypoint:
    """궤적이 통과해야 하는 위치.

    Args:
        x: X 좌표 (m).
        y: Y 좌표 (m).
        z: Z 좌표 (m). 평면 운동에서는 0.
    """

    x: float
    y: float
    z: float = 0.0

    def as_tuple(self, dimension: int = 3) -> tuple[float, ...]:
        """앞에서부터 dimension 개의 좌표를 반환한다."""
        return (self.x, self.y, self.z)[:dimension]


@dataclass(frozen=True)
class WaypointSnapshot:
    """한 번에 교체되는 경유지 목록의 불변 스냅샷.

    Args:
        waypoints: 순서가 있는 경유지 목록.
        revision: 교체될 때마다 증가하는 번호. 0은 아직 수신 전.
        received_at: 수신 시각 (UTC).
    """

    waypoints: tuple[Waypoint, ...] = field(default_factory=tuple)
    revision: int = 0
    received_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __len__(self) -> int:
        return len(self.waypoints)

    @property
    def is_empty(self) -> bool:
        """경유지가 하나도 없는지 여부."""
        return not self.waypoints
