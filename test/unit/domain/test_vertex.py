"""Vertex 엔티티 단위 테스트."""

import numpy as np
import pytest

from waypoint_trajectory.domain.entities import Vertex
from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.exceptions import (
    DimensionMismatchError,
    MissingConstraintError,
)


class TestVertexCreation:
    def test_supported_dimensions(self):
        assert Vertex(2).dimension == 2
        assert Vertex(3).dimension == 3

    def test_unsupported_dimension(self):
        with pytest.raises(DimensionMismatchError):
            Vertex(4)

    def test_new_vertex_has_no_constraints(self):
        vertex = Vertex(3)
        assert vertex.constraints == {}
        assert vertex.highest_constrained_order == -1


class TestConstraints:
    def test_add_and_get(self):
        vertex = Vertex(3)
        vertex.add_constraint(DerivativeOrder.POSITION, [1.0, 2.0, 3.0])

        assert vertex.has_constraint(DerivativeOrder.POSITION)
        np.testing.assert_array_equal(
            vertex.get_constraint(DerivativeOrder.POSITION), [1.0, 2.0, 3.0]
        )

    def test_add_overwrites(self):
        vertex = Vertex(2)
        vertex.add_constraint(0, [1.0, 1.0])
        vertex.add_constraint(0, [2.0, 2.0])
        np.testing.assert_array_equal(vertex.get_constraint(0), [2.0, 2.0])

    def test_dimension_mismatch(self):
        vertex = Vertex(3)
        with pytest.raises(DimensionMismatchError):
            vertex.add_constraint(0, [1.0, 2.0])

    def test_negative_order(self):
        with pytest.raises(ValueError):
            Vertex(2).add_constraint(-1, [0.0, 0.0])

    def test_missing_constraint(self):
        with pytest.raises(MissingConstraintError):
            Vertex(3).get_constraint(DerivativeOrder.VELOCITY)

    def test_get_returns_copy(self):
        vertex = Vertex(2)
        vertex.add_constraint(0, [1.0, 2.0])
        value = vertex.get_constraint(0)
        value[0] = 99.0
        np.testing.assert_array_equal(vertex.get_constraint(0), [1.0, 2.0])

    def test_remove_constraint(self):
        vertex = Vertex(2)
        vertex.add_constraint(1, [0.0, 0.0])
        vertex.remove_constraint(1)
        vertex.remove_constraint(3)
        assert not vertex.has_constraint(1)


class TestStartOrEnd:
    def test_fixes_derivatives_to_zero(self):
        vertex = Vertex(3)
        vertex.make_start_or_end([1.0, 2.0, 3.0], DerivativeOrder.JERK)

        assert vertex.highest_constrained_order == 3
        np.testing.assert_array_equal(vertex.get_constraint(0), [1, 2, 3])
        for order in (1, 2, 3):
            np.testing.assert_array_equal(
                vertex.get_constraint(order), np.zeros(3)
            )
        assert not vertex.has_constraint(DerivativeOrder.SNAP)

    def test_position_only(self):
        vertex = Vertex(2)
        vertex.make_start_or_end([0.0, 0.0], DerivativeOrder.POSITION)
        assert list(vertex.constraints) == [0]


class TestEquality:
    def test_equal_vertices(self):
        a = Vertex(2)
        b = Vertex(2)
        a.add_constraint(0, [1.0, 2.0])
        b.add_constraint(0, [1.0, 2.0])
        assert a == b

    def test_different_values(self):
        a = Vertex(2)
        b = Vertex(2)
        a.add_constraint(0, [1.0, 2.0])
        b.add_constraint(0, [1.0, 3.0])
        assert a != b

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vertex(2))

    def test_repr_uses_labels(self):
        vertex = Vertex(2)
        vertex.add_constraint(0, [1.0, 2.0])
        assert 'position' in repr(vertex)
