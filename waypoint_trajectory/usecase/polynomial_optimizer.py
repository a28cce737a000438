"""구간별 다항식 궤적 선형 최적화 유스케이스.

각 정점은 N/2개의 미분 슬롯(위치, 속도, ... , N/2-1차)을 가진다.
인접 구간이 정점 슬롯을 공유하므로 경계에서 N/2-1차까지 연속이 보장되고,
고정되지 않은 슬롯은 목표 미분의 적분 제곱 합을 최소화하는 값으로 정한다.

    J = sum_i int_0^T_i (p_i^(r)(t))^2 dt = d^T H d
    d_P = -H_PP^{-1} H_PF d_F

구간 시간 T는 단위 구간 [0, 1]로 정규화한 상수 행렬에
T의 거듭제곱 스케일을 곱해 만든다.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from math import factorial

import numpy as np
import scipy.linalg

from waypoint_trajectory.domain.entities.segment import (
    Segment,
    derivative_basis,
)
from waypoint_trajectory.domain.entities.trajectory import Trajectory
from waypoint_trajectory.domain.entities.vertex import (
    SUPPORTED_DIMENSIONS,
    Vertex,
)
from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.exceptions import (
    DimensionMismatchError,
    SolverDegenerateError,
)

logger = logging.getLogger(__name__)

# 스케일 보정 후 H_PP 조건수 상한
_MAX_CONDITION_NUMBER = 1e14


def endpoint_matrix(num_coefficients: int, duration: float) -> np.ndarray:
    """계수 → 양 끝점 미분값 사상 행렬 A(T).

    앞 N/2행은 t=0, 뒤 N/2행은 t=T에서의 0~N/2-1차 미분.
    """
    half = num_coefficients // 2
    rows = [derivative_basis(num_coefficients, 0.0, k) for k in range(half)]
    rows += [
        derivative_basis(num_coefficients, duration, k) for k in range(half)
    ]
    return np.vstack(rows)


def cost_matrix(
    num_coefficients: int, duration: float, derivative: int
) -> np.ndarray:
    """int_0^T (p^(r)(t))^2 dt = c^T Q c 를 만족하는 Q."""
    q = np.zeros((num_coefficients, num_coefficients))
    for i in range(derivative, num_coefficients):
        ci = factorial(i) / factorial(i - derivative)
        for j in range(derivative, num_coefficients):
            cj = factorial(j) / factorial(j - derivative)
            power = i + j - 2 * derivative + 1
            q[i, j] = ci * cj * duration ** power / power
    return q


class PolynomialOptimizer:
    """정점 제약과 구간 시간으로 최소 미분 다항식 궤적을 계산한다.

    Args:
        num_coefficients: 구간 다항식 계수 개수 N (짝수).
        dimension: 공간 차원 (2 또는 3).
    """

    def __init__(self, num_coefficients: int, dimension: int) -> None:
        if num_coefficients < 2 or num_coefficients % 2 != 0:
            raise SolverDegenerateError(
                f'계수 개수 N은 2 이상의 짝수여야 합니다: {num_coefficients}'
            )
        if dimension not in SUPPORTED_DIMENSIONS:
            raise DimensionMismatchError(
                f'지원하지 않는 차원입니다: {dimension}'
            )
        self._n = num_coefficients
        self._half = num_coefficients // 2
        self._dimension = dimension

        unit_inverse = scipy.linalg.inv(endpoint_matrix(self._n, 1.0))
        self._unit_inverse = unit_inverse

        self._vertices: list[Vertex] = []
        self._segment_times: np.ndarray = np.empty(0)
        self._derivative: int = int(DerivativeOrder.ACCELERATION)
        self._fixed: np.ndarray = np.empty(0, dtype=int)
        self._free: np.ndarray = np.empty(0, dtype=int)
        self._fixed_values: np.ndarray = np.empty((0, dimension))
        self._hessian: np.ndarray = np.empty((0, 0))
        self._slots: np.ndarray | None = None
        self._cost: float | None = None

    @property
    def num_coefficients(self) -> int:
        return self._n

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def num_free_derivatives(self) -> int:
        """차원당 최적화로 결정되는 슬롯 개수."""
        return int(self._free.size)

    @property
    def cost(self) -> float | None:
        """최적해의 목적함수 값 (모든 차원 합). 풀기 전이면 None."""
        return self._cost

    def setup_from_vertices(
        self,
        vertices: Sequence[Vertex],
        segment_times: Sequence[float],
        derivative_to_optimize: int,
    ) -> None:
        """정점, 구간 시간, 목표 미분 차수로 문제를 구성한다.

        Raises:
            DimensionMismatchError: 정점 차원이 선언 차원과 다를 때.
            SolverDegenerateError: 구간 시간이 0 이하이거나, N이 제약을
                만족하기에 부족하거나, 구간 수가 맞지 않을 때.
        """
        derivative = int(derivative_to_optimize)
        if self._n < 2 * (derivative + 1):
            raise SolverDegenerateError(
                f'N={self._n}은 {derivative}차 최적화에 부족합니다 '
                f'(최소 {2 * (derivative + 1)}).'
            )
        if len(vertices) < 2:
            raise SolverDegenerateError('정점이 2개 이상 필요합니다.')

        times = np.asarray(segment_times, dtype=float)
        if times.shape != (len(vertices) - 1,):
            raise SolverDegenerateError(
                f'구간 시간 개수({times.size})가 구간 수'
                f'({len(vertices) - 1})와 다릅니다.'
            )
        if not np.all(np.isfinite(times)) or np.any(times <= 0.0):
            raise SolverDegenerateError(
                f'구간 시간은 유한한 양수여야 합니다 '
                f'(중복 정점 여부 확인): {times.tolist()}'
            )

        for index, vertex in enumerate(vertices):
            if vertex.dimension != self._dimension:
                raise DimensionMismatchError(
                    f'정점 {index}의 차원({vertex.dimension})이 '
                    f'선언 차원({self._dimension})과 다릅니다.'
                )
            if vertex.highest_constrained_order >= self._half:
                raise SolverDegenerateError(
                    f'정점 {index}의 {vertex.highest_constrained_order}차 제약은 '
                    f'N={self._n}으로 만족할 수 없습니다.'
                )

        self._vertices = list(vertices)
        self._segment_times = times
        self._derivative = derivative
        self._slots = None
        self._cost = None

        fixed: list[int] = []
        free: list[int] = []
        values: list[np.ndarray] = []
        for v_index, vertex in enumerate(self._vertices):
            for k in range(self._half):
                slot = v_index * self._half + k
                if vertex.has_constraint(k):
                    fixed.append(slot)
                    values.append(vertex.get_constraint(k))
                else:
                    free.append(slot)
        self._fixed = np.asarray(fixed, dtype=int)
        self._free = np.asarray(free, dtype=int)
        self._fixed_values = (
            np.vstack(values) if values else np.empty((0, self._dimension))
        )
        self._hessian = self._build_hessian()

    def _segment_inverse(self, duration: float) -> np.ndarray:
        """A(T)^{-1} = diag(T^-k) A(1)^{-1} diag(T^k, T^k)."""
        powers = duration ** np.arange(self._half)
        row_scale = np.concatenate((powers, powers))
        col_scale = duration ** -np.arange(self._n, dtype=float)
        return col_scale[:, None] * self._unit_inverse * row_scale[None, :]

    def _build_hessian(self) -> np.ndarray:
        """정점 슬롯 공간에서의 비용 행렬 H."""
        r = self._derivative
        unit_cost = cost_matrix(self._n, 1.0, r)
        unit_hessian = self._unit_inverse.T @ unit_cost @ self._unit_inverse

        size = len(self._vertices) * self._half
        hessian = np.zeros((size, size))
        for index, duration in enumerate(self._segment_times):
            powers = duration ** np.arange(self._half)
            scale = np.concatenate((powers, powers))
            block = (
                duration ** (1 - 2 * r)
                * scale[:, None] * unit_hessian * scale[None, :]
            )
            start = index * self._half
            stop = start + self._n
            hessian[start:stop, start:stop] += block
        return hessian

    def solve_linear(self) -> None:
        """자유 슬롯을 닫힌 형태 선형 해로 결정한다.

        Raises:
            SolverDegenerateError: 문제가 구성되지 않았거나 H_PP가 특이할 때.
        """
        if not self._vertices:
            raise SolverDegenerateError(
                'setup_from_vertices()를 먼저 호출해야 합니다.'
            )

        size = len(self._vertices) * self._half
        slots = np.zeros((size, self._dimension))
        slots[self._fixed] = self._fixed_values

        if self._free.size:
            h_pp = self._hessian[np.ix_(self._free, self._free)]
            h_pf = self._hessian[np.ix_(self._free, self._fixed)]
            rhs = -h_pf @ self._fixed_values
            slots[self._free] = self._solve_symmetric(h_pp, rhs)

        self._slots = slots
        self._cost = float(np.sum(slots * (self._hessian @ slots)))
        logger.debug(
            'Solved %d segments (N=%d, r=%d, free=%d/dim), cost=%.6g',
            len(self._segment_times), self._n, self._derivative,
            self._free.size, self._cost,
        )

    def _solve_symmetric(self, matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
        """대각 스케일링 후 Cholesky 분해로 푼다."""
        diagonal = np.diag(matrix)
        if np.any(~np.isfinite(diagonal)) or np.any(diagonal <= 0.0):
            raise SolverDegenerateError(
                '비용 행렬에 양의 곡률이 없는 자유 슬롯이 있습니다.'
            )
        scale = 1.0 / np.sqrt(diagonal)
        scaled = scale[:, None] * matrix * scale[None, :]

        condition = np.linalg.cond(scaled)
        if not np.isfinite(condition) or condition > _MAX_CONDITION_NUMBER:
            raise SolverDegenerateError(
                f'선형 시스템이 특이합니다 (조건수={condition:.3g}).'
            )
        try:
            factor = scipy.linalg.cho_factor(scaled)
        except np.linalg.LinAlgError as exc:
            raise SolverDegenerateError(
                f'선형 시스템 분해 실패: {exc}'
            ) from exc
        solution = scipy.linalg.cho_solve(factor, scale[:, None] * rhs)
        return scale[:, None] * solution

    def get_segments(self) -> list[Segment]:
        """풀린 계수로 구간 목록을 만든다.

        Raises:
            SolverDegenerateError: solve_linear()를 호출하기 전일 때.
        """
        if self._slots is None:
            raise SolverDegenerateError('solve_linear()를 먼저 호출해야 합니다.')

        segments: list[Segment] = []
        for index, duration in enumerate(self._segment_times):
            start = index * self._half
            endpoint_values = self._slots[start:start + self._n]
            coefficients = self._segment_inverse(duration) @ endpoint_values
            segments.append(Segment(duration, coefficients.T))
        return segments

    def get_trajectory(self) -> Trajectory:
        return Trajectory(self.get_segments())


def optimize_trajectory(
    vertices: Sequence[Vertex],
    segment_times: Sequence[float],
    dimension: int,
    num_coefficients: int = 10,
    derivative_to_optimize: int = DerivativeOrder.ACCELERATION,
) -> Trajectory:
    """setup → solve → 궤적 생성을 한 번에 수행한다."""
    optimizer = PolynomialOptimizer(num_coefficients, dimension)
    optimizer.setup_from_vertices(
        vertices, segment_times, derivative_to_optimize
    )
    optimizer.solve_linear()
    return optimizer.get_trajectory()
