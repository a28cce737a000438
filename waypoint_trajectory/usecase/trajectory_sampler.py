"""궤적 샘플링 유스케이스.

단일 시각 평가, 구간 평가(지연 생성), 시각화용 전체 샘플링을 제공한다.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np

from waypoint_trajectory.domain.entities.trajectory import Trajectory
from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.exceptions import InvalidRangeError
from waypoint_trajectory.domain.value_objects.sample import (
    Sample,
    TrajectoryPoint,
)

# dt 배수 판정 허용 오차 (상대)
_STEP_TOLERANCE = 1e-9


def evaluate(
    trajectory: Trajectory,
    t: float,
    derivative: int = DerivativeOrder.POSITION,
) -> Sample:
    """시각 t에서 derivative차 미분을 평가한다.

    Raises:
        TimeOutOfRangeError: t가 궤적 범위 밖일 때.
    """
    order = DerivativeOrder(int(derivative))
    return Sample(time=float(t), derivative_order=order,
                  vector=trajectory.evaluate(t, order))


class SampleRange:
    """[t_start, t_end] 구간을 dt 간격으로 평가하는 지연 시퀀스.

    t_start + k*dt (< t_end) 뒤에 t_end를 붙여
    ceil((t_end - t_start) / dt) + 1 개의 샘플을 만든다.
    반복할 때마다 처음부터 같은 값을 다시 계산한다.

    Args:
        trajectory: 평가할 궤적.
        t_start: 시작 시각 (s).
        t_end: 종료 시각 (s), 포함.
        dt: 간격 (s).
        derivative: 미분 차수.

    Raises:
        InvalidRangeError: t_end < t_start 이거나 dt <= 0 일 때.
    """

    def __init__(
        self,
        trajectory: Trajectory,
        t_start: float,
        t_end: float,
        dt: float,
        derivative: int = DerivativeOrder.POSITION,
    ) -> None:
        if not dt > 0.0:
            raise InvalidRangeError(f'dt는 0보다 커야 합니다: {dt}')
        if t_end < t_start:
            raise InvalidRangeError(
                f't_end({t_end})가 t_start({t_start})보다 작습니다.'
            )
        self._trajectory = trajectory
        self._t_start = float(t_start)
        self._t_end = float(t_end)
        self._dt = float(dt)
        self._derivative = DerivativeOrder(int(derivative))
        steps = (self._t_end - self._t_start) / self._dt
        self._num_steps = max(math.ceil(steps - _STEP_TOLERANCE), 0)

    @property
    def derivative(self) -> DerivativeOrder:
        return self._derivative

    def times(self) -> list[float]:
        """샘플 시각 목록."""
        times = [self._t_start + k * self._dt for k in range(self._num_steps)]
        times.append(self._t_end)
        return times

    def __len__(self) -> int:
        return self._num_steps + 1

    def __iter__(self) -> Iterator[tuple[float, np.ndarray]]:
        for t in self.times():
            yield t, self._trajectory.evaluate(t, self._derivative)

    def samples(self) -> Iterator[Sample]:
        """(time, derivative, vector) Sample 형태로 순회한다."""
        for t, vector in self:
            yield Sample(time=t, derivative_order=self._derivative,
                         vector=vector)


def evaluate_range(
    trajectory: Trajectory,
    t_start: float,
    t_end: float,
    dt: float,
    derivative: int = DerivativeOrder.POSITION,
) -> SampleRange:
    """구간 평가 시퀀스를 만든다. 평가는 순회 시점에 수행된다."""
    return SampleRange(trajectory, t_start, t_end, dt, derivative)


def _as_3d(vector: np.ndarray) -> np.ndarray:
    padded = np.zeros(3)
    padded[:vector.shape[0]] = vector[:3]
    return padded


def sample_whole_trajectory(
    trajectory: Trajectory, dt: float
) -> list[TrajectoryPoint]:
    """궤적 전체를 dt 간격으로 샘플링해 flat state 목록을 만든다.

    Raises:
        InvalidRangeError: dt <= 0 일 때.
    """
    points: list[TrajectoryPoint] = []
    for t in SampleRange(
        trajectory, trajectory.min_time, trajectory.max_time, dt
    ).times():
        states = [
            _as_3d(trajectory.evaluate(t, order))
            for order in DerivativeOrder
        ]
        points.append(TrajectoryPoint(t, *states))
    return points
