"""프로세스 내 궤적 이벤트 버스."""

import logging
import threading
from collections import defaultdict
from collections.abc import Callable

from waypoint_trajectory.domain.events.trajectory_events import DomainEvent
from waypoint_trajectory.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class InMemoryEventPublisher(EventPublisher):
    """TrajectoryNode 가 생성 결과를 로그로 남기는 데 쓰는 이벤트 버스.

    핸들러는 publish 를 호출한 파이프라인 스레드에서 바로 실행된다.
    한 핸들러가 실패해도 같은 이벤트의 나머지 핸들러와 다음 실행은 영향받지 않는다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: dict[
            type[DomainEvent], list[Callable[[DomainEvent], None]]
        ] = defaultdict(list)

    def publish(self, event: DomainEvent) -> None:
        event_type = type(event)
        with self._lock:
            handlers = list(self._handlers.get(event_type, []))

        logger.debug(
            "Dispatching %s (rev=%s) to %d handler(s)",
            event_type.__name__, getattr(event, "revision", "-"),
            len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Trajectory event handler failed for %s",
                    event_type.__name__,
                )

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: Callable[[DomainEvent], None],
    ) -> None:
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.debug("Handler registered for %s", event_type.__name__)
