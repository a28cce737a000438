"""시각화 마커 값 객체.

외부 뷰어(RViz 등)가 그대로 그릴 수 있도록
visualization_msgs/Marker와 같은 필드 구성을 따른다.
"""

from dataclasses import dataclass, field
from datetime import datetime

from waypoint_trajectory.domain.enums import (
    MarkerAction,
    MarkerCategory,
    MarkerType,
)


@dataclass(frozen=True)
class Color:
    """RGBA 색상 (각 채널 0.0~1.0)."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


@dataclass(frozen=True)
class Point3:
    """3차원 점."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    """자세 쿼터니언 (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Scale:
    """마커 크기.

    ARROW: x=화살대 지름, y=화살촉 지름, z=화살촉 길이.
    LINE_STRIP: x=선 두께.
    """

    x: float = 1.0
    y: float = 1.0
    z: float = 1.0


@dataclass
class Marker:
    """단일 시각화 마커.

    Args:
        ns: 마커 네임스페이스 (의미 분류).
        marker_type: 도형 유형.
        id: 배치 내 고유 번호.
        action: 추가/삭제 동작.
        frame_id: 기준 좌표계.
        stamp: 생성 시각.
        position: 마커 원점.
        orientation: 마커 자세.
        points: ARROW(시작/끝) 또는 LINE_STRIP 점 목록.
        scale: 크기.
        color: 색상.
        lifetime_sec: 표시 유지 시간. 0이면 무한.
    """

    ns: MarkerCategory
    marker_type: MarkerType
    id: int = 0
    action: MarkerAction = MarkerAction.ADD
    frame_id: str = ''
    stamp: datetime | None = None
    position: Point3 = field(default_factory=Point3)
    orientation: Quaternion = field(default_factory=Quaternion)
    points: list[Point3] = field(default_factory=list)
    scale: Scale = field(default_factory=Scale)
    color: Color = field(default_factory=Color)
    lifetime_sec: float = 0.0


@dataclass
class MarkerBatch:
    """한 번의 파이프라인 실행에서 생성된 시각화 결과.

    Args:
        path: 모든 샘플 위치를 잇는 LINE_STRIP 마커.
        markers: 개별 배치된 pose/velocity/acceleration 마커.
    """

    path: Marker | None = None
    markers: list[Marker] = field(default_factory=list)

    def all_markers(self) -> list[Marker]:
        """개별 마커 뒤에 경로 마커를 붙인 전체 목록."""
        if self.path is None:
            return list(self.markers)
        return [*self.markers, self.path]

    def by_namespace(self, ns: MarkerCategory) -> list[Marker]:
        """특정 네임스페이스의 마커만 반환한다."""
        return [m for m in self.all_markers() if m.ns == ns]

    def __len__(self) -> int:
        return len(self.markers) + (0 if self.path is None else 1)
