"""다항식 궤적 구간(segment) 엔티티."""

from __future__ import annotations

from math import factorial

import numpy as np

from waypoint_trajectory.domain.exceptions import DimensionMismatchError


def derivative_basis(
    num_coefficients: int, t: float, derivative: int
) -> np.ndarray:
    """오름차순 계수 다항식의 derivative차 미분 기저 벡터.

    p(t) = sum_k c_k t^k 일 때 p^(d)(t) = basis . c 를 만족하는
    basis[k] = k!/(k-d)! * t^(k-d) (k >= d) 를 반환한다.
    """
    basis = np.zeros(num_coefficients)
    for k in range(derivative, num_coefficients):
        basis[k] = factorial(k) / factorial(k - derivative) * t ** (k - derivative)
    return basis


class Segment:
    """두 연속 정점 사이의 다항식 구간.

    Args:
        duration: 구간 시간 (s), 0보다 커야 한다.
        coefficients: (D, N) 계수 행렬. 행은 공간 차원, 열은 오름차순 거듭제곱.
    """

    def __init__(self, duration: float, coefficients: np.ndarray) -> None:
        coefficients = np.atleast_2d(np.asarray(coefficients, dtype=float))
        if coefficients.ndim != 2:
            raise DimensionMismatchError(
                f'계수 행렬은 2차원이어야 합니다: shape={coefficients.shape}'
            )
        if not duration > 0.0:
            raise ValueError(f'구간 시간은 0보다 커야 합니다: {duration}')
        self._duration = float(duration)
        self._coefficients = coefficients

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def dimension(self) -> int:
        return self._coefficients.shape[0]

    @property
    def num_coefficients(self) -> int:
        return self._coefficients.shape[1]

    @property
    def coefficients(self) -> np.ndarray:
        return self._coefficients.copy()

    def evaluate(self, t: float, derivative: int = 0) -> np.ndarray:
        """구간 시작 기준 시각 t에서 derivative차 미분 값을 계산한다."""
        basis = derivative_basis(self.num_coefficients, t, int(derivative))
        return self._coefficients @ basis

    def __repr__(self) -> str:
        return (
            f'Segment(T={self._duration:.4f}, D={self.dimension}, '
            f'N={self.num_coefficients})'
        )
