"""InMemoryWaypointStore 단위 테스트."""

import threading

import pytest

from waypoint_trajectory.domain.value_objects.waypoint import Waypoint
from waypoint_trajectory.infra.repository import InMemoryWaypointStore


@pytest.fixture
def store():
    return InMemoryWaypointStore()


class TestWaypointStore:
    def test_initially_empty(self, store):
        snapshot = store.latest()
        assert snapshot.is_empty
        assert snapshot.revision == 0

    def test_replace_increments_revision(self, store):
        store.replace([Waypoint(0, 0), Waypoint(1, 1)])
        snapshot = store.replace([Waypoint(2, 2)])

        assert snapshot.revision == 2
        assert store.latest() is snapshot
        assert store.latest().waypoints == (Waypoint(2, 2),)

    def test_old_snapshot_unchanged(self, store):
        first = store.replace([Waypoint(0, 0), Waypoint(1, 1)])
        store.replace([])

        assert len(first) == 2
        assert store.latest().is_empty

    def test_replace_copies_input(self, store):
        points = [Waypoint(0, 0)]
        store.replace(points)
        points.append(Waypoint(5, 5))

        assert len(store.latest()) == 1

    def test_concurrent_replace_is_whole(self, store):
        lists = [
            [Waypoint(float(i), 0.0)] * (i + 1) for i in range(20)
        ]

        def writer(points):
            for _ in range(50):
                store.replace(points)

        threads = [threading.Thread(target=writer, args=(p,)) for p in lists]
        for t in threads:
            t.start()
        for _ in range(200):
            snapshot = store.latest()
            if snapshot.waypoints:
                x = snapshot.waypoints[0].x
                assert len(snapshot) == int(x) + 1
                assert all(w.x == x for w in snapshot.waypoints)
        for t in threads:
            t.join()

        assert store.latest().revision == 20 * 50
