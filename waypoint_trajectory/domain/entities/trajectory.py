"""구간별 다항식 궤적 엔티티."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

import numpy as np

from waypoint_trajectory.domain.entities.segment import Segment
from waypoint_trajectory.domain.entities.vertex import Vertex
from waypoint_trajectory.domain.exceptions import (
    DimensionMismatchError,
    TimeOutOfRangeError,
)


class Trajectory:
    """시간 순으로 이어진 다항식 구간들의 궤적.

    첫 구간은 t=0에서 시작하고, 각 구간은 이전 구간이 끝나는 시각에 시작한다.
    구간 i는 [start_i, start_i + T_i) 를 담당하며,
    마지막 시각(max_time)은 마지막 구간의 끝점으로 평가한다.

    Args:
        segments: 순서가 있는 구간 목록 (1개 이상).
    """

    def __init__(self, segments: Sequence[Segment]) -> None:
        if not segments:
            raise ValueError('궤적에는 최소 1개의 구간이 필요합니다.')
        first = segments[0]
        for seg in segments[1:]:
            if (
                seg.dimension != first.dimension
                or seg.num_coefficients != first.num_coefficients
            ):
                raise DimensionMismatchError(
                    f'구간 형상이 일치하지 않습니다: {first!r} vs {seg!r}'
                )
        self._segments = list(segments)
        durations = [s.duration for s in self._segments]
        self._start_times = np.concatenate(([0.0], np.cumsum(durations)[:-1]))
        self._max_time = float(np.sum(durations))

    @property
    def segments(self) -> list[Segment]:
        return list(self._segments)

    @property
    def dimension(self) -> int:
        return self._segments[0].dimension

    @property
    def num_coefficients(self) -> int:
        return self._segments[0].num_coefficients

    @property
    def min_time(self) -> float:
        return 0.0

    @property
    def max_time(self) -> float:
        return self._max_time

    @property
    def segment_times(self) -> list[float]:
        return [s.duration for s in self._segments]

    @property
    def start_times(self) -> list[float]:
        return self._start_times.tolist()

    def __len__(self) -> int:
        return len(self._segments)

    def locate(self, t: float) -> tuple[int, float]:
        """시각 t가 속한 구간 번호와 구간 내 상대 시각을 반환한다.

        Raises:
            TimeOutOfRangeError: t가 [min_time, max_time] 밖일 때.
        """
        if not np.isfinite(t) or t < self.min_time or t > self._max_time:
            raise TimeOutOfRangeError(
                f'평가 시각 {t}가 궤적 범위 '
                f'[{self.min_time}, {self._max_time}] 밖입니다.'
            )
        index = bisect_right(self._start_times, t) - 1
        index = min(max(index, 0), len(self._segments) - 1)
        return index, t - float(self._start_times[index])

    def evaluate(self, t: float, derivative: int = 0) -> np.ndarray:
        """시각 t에서 derivative차 미분 벡터를 계산한다."""
        index, local_t = self.locate(t)
        return self._segments[index].evaluate(local_t, derivative)

    def get_vertices(self, max_derivative: int) -> list[Vertex]:
        """각 knot에서 0~max_derivative차 값을 제약으로 갖는 정점 목록.

        마지막 정점은 마지막 구간의 끝에서 평가한다.
        """
        vertices: list[Vertex] = []
        for seg in self._segments:
            vertex = Vertex(self.dimension)
            for order in range(max_derivative + 1):
                vertex.add_constraint(order, seg.evaluate(0.0, order))
            vertices.append(vertex)

        last = self._segments[-1]
        vertex = Vertex(self.dimension)
        for order in range(max_derivative + 1):
            vertex.add_constraint(order, last.evaluate(last.duration, order))
        vertices.append(vertex)
        return vertices

    def compute_max_magnitude(self, derivative: int, dt: float = 0.01) -> float:
        """dt 간격으로 샘플링한 derivative차 미분 크기의 최댓값."""
        if dt <= 0.0:
            raise ValueError(f'dt는 0보다 커야 합니다: {dt}')
        times = np.append(np.arange(self.min_time, self._max_time, dt),
                          self._max_time)
        return max(
            float(np.linalg.norm(self.evaluate(t, derivative)))
            for t in times
        )

    def __repr__(self) -> str:
        return (
            f'Trajectory(segments={len(self._segments)}, '
            f'D={self.dimension}, T={self._max_time:.4f})'
        )
