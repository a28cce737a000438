"""궤적 샘플 값 객체."""

from dataclasses import dataclass, field

import numpy as np

from waypoint_trajectory.domain.enums import DerivativeOrder


def _zero3() -> np.ndarray:
    return np.zeros(3)


@dataclass(frozen=True, eq=False)
class Sample:
    """단일 시각에서 평가한 궤적 값.

    Args:
        time: 궤적 시작 기준 시각 (s).
        derivative_order: 평가한 미분 차수.
        vector: 차원별 값 (길이 D).
    """

    time: float
    derivative_order: DerivativeOrder
    vector: np.ndarray


@dataclass(frozen=True, eq=False)
class TrajectoryPoint:
    """시각화용 flat state (3차원, 2D 궤적은 z=0으로 채움).

    Args:
        time: 궤적 시작 기준 시각 (s).
        position: 위치 (m).
        velocity: 속도 (m/s).
        acceleration: 가속도 (m/s^2).
        jerk: 저크 (m/s^3).
        snap: 스냅 (m/s^4).
    """

    time: float
    position: np.ndarray = field(default_factory=_zero3)
    velocity: np.ndarray = field(default_factory=_zero3)
    acceleration: np.ndarray = field(default_factory=_zero3)
    jerk: np.ndarray = field(default_factory=_zero3)
    snap: np.ndarray = field(default_factory=_zero3)
