"""궤적 정점(knot) 엔티티."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.exceptions import (
    DimensionMismatchError,
    MissingConstraintError,
)

SUPPORTED_DIMENSIONS = (2, 3)


class Vertex:
    """한 정점에서 만족해야 하는 미분 차수별 제약.

    제약이 없는 미분 차수는 최적화기가 자유롭게 결정한다.

    Args:
        dimension: 공간 차원 (2 또는 3).
    """

    def __init__(self, dimension: int) -> None:
        if dimension not in SUPPORTED_DIMENSIONS:
            raise DimensionMismatchError(
                f'지원하지 않는 차원입니다: {dimension} '
                f'(허용: {SUPPORTED_DIMENSIONS})'
            )
        self._dimension = dimension
        self._constraints: dict[int, np.ndarray] = {}

    @property
    def dimension(self) -> int:
        """공간 차원."""
        return self._dimension

    @property
    def constraints(self) -> dict[int, np.ndarray]:
        """미분 차수 → 고정값 (복사본)."""
        return {k: v.copy() for k, v in sorted(self._constraints.items())}

    def add_constraint(
        self, derivative_order: int, value: Iterable[float] | float
    ) -> None:
        """미분 차수에 고정값 제약을 추가(덮어쓰기)한다.

        Args:
            derivative_order: 제약할 미분 차수.
            value: 차원 길이의 값 벡터.

        Raises:
            DimensionMismatchError: 값 길이가 차원과 다를 때.
        """
        vector = np.atleast_1d(np.asarray(value, dtype=float))
        if vector.ndim != 1 or vector.shape[0] != self._dimension:
            raise DimensionMismatchError(
                f'제약 값의 차원({vector.size})이 정점 차원'
                f'({self._dimension})과 다릅니다.'
            )
        if derivative_order < 0:
            raise ValueError(f'미분 차수는 0 이상이어야 합니다: {derivative_order}')
        self._constraints[int(derivative_order)] = vector

    def make_start_or_end(
        self, position: Iterable[float], up_to_derivative: int
    ) -> None:
        """시작/끝 경계 정점으로 만든다.

        위치는 주어진 값, 1차부터 up_to_derivative 차까지는 0으로 고정한다.
        """
        self.add_constraint(DerivativeOrder.POSITION, position)
        for order in range(1, int(up_to_derivative) + 1):
            self.add_constraint(order, np.zeros(self._dimension))

    def has_constraint(self, derivative_order: int) -> bool:
        return int(derivative_order) in self._constraints

    def get_constraint(self, derivative_order: int) -> np.ndarray:
        """제약 값을 반환한다.

        Raises:
            MissingConstraintError: 해당 차수 제약이 없을 때.
        """
        try:
            return self._constraints[int(derivative_order)].copy()
        except KeyError:
            raise MissingConstraintError(
                f'{derivative_order}차 미분 제약이 없습니다.'
            ) from None

    def remove_constraint(self, derivative_order: int) -> None:
        self._constraints.pop(int(derivative_order), None)

    @property
    def highest_constrained_order(self) -> int:
        """가장 높은 제약 차수. 제약이 없으면 -1."""
        return max(self._constraints, default=-1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        if self._dimension != other._dimension:
            return False
        if self._constraints.keys() != other._constraints.keys():
            return False
        return all(
            np.array_equal(v, other._constraints[k])
            for k, v in self._constraints.items()
        )

    __hash__ = None

    def __repr__(self) -> str:
        parts = ', '.join(
            f'{DerivativeOrder(k).label if k <= DerivativeOrder.SNAP else k}'
            f'={v.tolist()}'
            for k, v in sorted(self._constraints.items())
        )
        return f'Vertex(D={self._dimension}, {parts})'
