"""InMemoryEventPublisher 단위 테스트."""

import pytest

from waypoint_trajectory.domain.events import (
    TrajectoryGeneratedEvent,
    TrajectoryGenerationFailedEvent,
    TrajectoryGenerationSkippedEvent,
)
from waypoint_trajectory.infra.event import InMemoryEventPublisher


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


class TestPublishSubscribe:
    def test_handler_receives_event(self, publisher):
        received = []
        publisher.subscribe(TrajectoryGeneratedEvent, received.append)

        publisher.publish(TrajectoryGeneratedEvent(revision=4))

        assert len(received) == 1
        assert received[0].revision == 4

    def test_multiple_handlers(self, publisher):
        r1, r2 = [], []
        publisher.subscribe(TrajectoryGenerationSkippedEvent, r1.append)
        publisher.subscribe(TrajectoryGenerationSkippedEvent, r2.append)

        publisher.publish(TrajectoryGenerationSkippedEvent(num_waypoints=1))

        assert len(r1) == 1
        assert len(r2) == 1

    def test_type_isolation(self, publisher):
        generated = []
        failed = []
        publisher.subscribe(TrajectoryGeneratedEvent, generated.append)
        publisher.subscribe(TrajectoryGenerationFailedEvent, failed.append)

        publisher.publish(TrajectoryGeneratedEvent())
        publisher.publish(TrajectoryGenerationFailedEvent(error_type="X"))

        assert len(generated) == 1
        assert len(failed) == 1

    def test_no_handler_no_error(self, publisher):
        publisher.publish(TrajectoryGeneratedEvent())

    def test_handler_exception_does_not_break_others(self, publisher):
        results = []

        def bad_handler(event):
            raise ValueError("boom")

        publisher.subscribe(TrajectoryGeneratedEvent, bad_handler)
        publisher.subscribe(TrajectoryGeneratedEvent, results.append)

        publisher.publish(TrajectoryGeneratedEvent())

        assert len(results) == 1
