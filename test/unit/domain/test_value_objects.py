"""값 객체 단위 테스트."""

import numpy as np

from waypoint_trajectory.domain.enums import (
    DerivativeOrder,
    MarkerCategory,
    MarkerType,
)
from waypoint_trajectory.domain.value_objects import (
    Color,
    Marker,
    MarkerBatch,
    Point3,
    Quaternion,
    Sample,
    TrajectoryPoint,
    Waypoint,
    WaypointSnapshot,
)


class TestWaypoint:
    def test_frozen(self):
        wp = Waypoint(1.0, 2.0, 3.0)
        try:
            wp.x = 99.0
            assert False, 'Should raise FrozenInstanceError'
        except AttributeError:
            pass

    def test_z_defaults_to_zero(self):
        assert Waypoint(1.0, 2.0).z == 0.0

    def test_as_tuple(self):
        wp = Waypoint(1.0, 2.0, 3.0)
        assert wp.as_tuple() == (1.0, 2.0, 3.0)
        assert wp.as_tuple(2) == (1.0, 2.0)

    def test_equality(self):
        assert Waypoint(1.0, 2.0) == Waypoint(1.0, 2.0, 0.0)


class TestWaypointSnapshot:
    def test_empty_default(self):
        snapshot = WaypointSnapshot()
        assert snapshot.is_empty
        assert len(snapshot) == 0
        assert snapshot.revision == 0

    def test_len(self):
        snapshot = WaypointSnapshot(
            waypoints=(Waypoint(0, 0), Waypoint(1, 1)), revision=1,
        )
        assert len(snapshot) == 2
        assert not snapshot.is_empty


class TestSample:
    def test_fields(self):
        sample = Sample(1.5, DerivativeOrder.VELOCITY, np.array([1.0, 2.0]))
        assert sample.time == 1.5
        assert sample.derivative_order is DerivativeOrder.VELOCITY
        np.testing.assert_array_equal(sample.vector, [1.0, 2.0])


class TestTrajectoryPoint:
    def test_defaults_are_zero_3d(self):
        point = TrajectoryPoint(0.0)
        for vector in (point.position, point.velocity, point.acceleration,
                       point.jerk, point.snap):
            np.testing.assert_array_equal(vector, np.zeros(3))

    def test_default_arrays_are_independent(self):
        a = TrajectoryPoint(0.0)
        b = TrajectoryPoint(0.0)
        assert a.position is not b.position


class TestMarkerBatch:
    def _marker(self, ns):
        return Marker(ns=ns, marker_type=MarkerType.ARROW)

    def test_all_markers_puts_path_last(self):
        path = Marker(ns=MarkerCategory.PATH,
                      marker_type=MarkerType.LINE_STRIP)
        pose = self._marker(MarkerCategory.POSE)
        batch = MarkerBatch(path=path, markers=[pose])

        assert batch.all_markers() == [pose, path]
        assert len(batch) == 2

    def test_without_path(self):
        batch = MarkerBatch(markers=[self._marker(MarkerCategory.POSE)])
        assert len(batch) == 1
        assert len(batch.all_markers()) == 1

    def test_by_namespace(self):
        batch = MarkerBatch(markers=[
            self._marker(MarkerCategory.POSE),
            self._marker(MarkerCategory.VELOCITY),
            self._marker(MarkerCategory.POSE),
        ])
        assert len(batch.by_namespace(MarkerCategory.POSE)) == 2
        assert len(batch.by_namespace(MarkerCategory.PATH)) == 0

    def test_marker_defaults(self):
        marker = self._marker(MarkerCategory.POSE)
        assert marker.id == 0
        assert marker.points == []
        assert marker.orientation == Quaternion(0.0, 0.0, 0.0, 1.0)
        assert marker.position == Point3()
        assert marker.color == Color()
