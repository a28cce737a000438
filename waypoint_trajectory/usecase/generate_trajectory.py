"""궤적 생성 파이프라인 유스케이스.

경유지 스냅샷 → 정점 → 구간 시간 → 다항식 최적화 → 샘플링 → 시각화 마커.
매 실행마다 모든 엔티티를 처음부터 다시 만들며, 실행 간 상태는 없다.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from waypoint_trajectory.domain.entities.trajectory import Trajectory
from waypoint_trajectory.domain.entities.vertex import Vertex
from waypoint_trajectory.domain.events.trajectory_events import (
    TrajectoryGeneratedEvent,
    TrajectoryGenerationFailedEvent,
    TrajectoryGenerationSkippedEvent,
)
from waypoint_trajectory.domain.exceptions import DomainError
from waypoint_trajectory.domain.value_objects.marker import MarkerBatch
from waypoint_trajectory.domain.value_objects.sample import Sample
from waypoint_trajectory.domain.value_objects.waypoint import WaypointSnapshot
from waypoint_trajectory.usecase.marker_decimator import draw_trajectory_markers
from waypoint_trajectory.usecase.polynomial_optimizer import PolynomialOptimizer
from waypoint_trajectory.usecase.ports.config_port import AppConfig
from waypoint_trajectory.usecase.ports.event_publisher import EventPublisher
from waypoint_trajectory.usecase.ports.marker_publisher import MarkerPublisher
from waypoint_trajectory.usecase.ports.waypoint_source import WaypointSource
from waypoint_trajectory.usecase.segment_time_estimator import (
    estimate_segment_times,
)
from waypoint_trajectory.usecase.trajectory_sampler import (
    evaluate_range,
    sample_whole_trajectory,
)
from waypoint_trajectory.usecase.vertex_builder import build_vertices

logger = logging.getLogger(__name__)

MIN_WAYPOINTS = 2


@dataclass
class PipelineResult:
    """한 번의 파이프라인 실행 결과.

    Args:
        revision: 사용한 경유지 스냅샷 번호.
        vertices: 정점 목록.
        segment_times: 구간 시간 (s).
        trajectory: 최적화된 궤적.
        samples: 설정된 구간의 샘플.
        markers: 시각화 마커.
        solve_time_sec: 최적화 소요 시간 (s).
    """

    revision: int
    vertices: list[Vertex]
    segment_times: list[float]
    trajectory: Trajectory
    samples: list[Sample] = field(default_factory=list)
    markers: MarkerBatch = field(default_factory=MarkerBatch)
    solve_time_sec: float = 0.0


class GenerateTrajectory:
    """궤적 생성 유스케이스.

    WaypointSource 스냅샷 1회 읽기 → 전체 파이프라인 → MarkerPublisher 발행.
    실패 시 이번 실행의 결과는 발행하지 않고, 다음 실행은 최신 입력으로 다시 시작한다.

    Args:
        waypoint_source: 경유지 입력 포트.
        marker_publisher: 마커 출력 포트.
        event_publisher: 이벤트 발행자.
        config: 애플리케이션 설정.
    """

    def __init__(
        self,
        waypoint_source: WaypointSource,
        marker_publisher: MarkerPublisher,
        event_publisher: EventPublisher,
        config: AppConfig,
    ) -> None:
        self._waypoint_source = waypoint_source
        self._marker_publisher = marker_publisher
        self._event_publisher = event_publisher
        self._config = config

    def execute(self) -> PipelineResult | None:
        """최신 경유지로 파이프라인을 한 번 실행한다.

        Returns:
            성공 시 결과, 건너뛰거나 실패하면 None.
        """
        snapshot = self._waypoint_source.latest()
        if len(snapshot) < MIN_WAYPOINTS:
            logger.debug(
                'Skipping trajectory generation: %d waypoint(s) (rev=%d)',
                len(snapshot), snapshot.revision,
            )
            self._event_publisher.publish(
                TrajectoryGenerationSkippedEvent(
                    revision=snapshot.revision,
                    num_waypoints=len(snapshot),
                )
            )
            return None

        try:
            result = self.run(snapshot)
        except DomainError as exc:
            logger.error(
                'Trajectory generation failed (rev=%d): %s: %s',
                snapshot.revision, type(exc).__name__, exc,
            )
            self._event_publisher.publish(
                TrajectoryGenerationFailedEvent(
                    revision=snapshot.revision,
                    error_type=type(exc).__name__,
                    error_description=str(exc),
                )
            )
            return None

        self._marker_publisher.publish(result.markers)
        self._event_publisher.publish(
            TrajectoryGeneratedEvent(
                revision=result.revision,
                num_waypoints=len(snapshot),
                segment_times=tuple(result.segment_times),
                total_time=result.trajectory.max_time,
                solve_time_sec=result.solve_time_sec,
                num_markers=len(result.markers),
            )
        )
        return result

    def run(self, snapshot: WaypointSnapshot) -> PipelineResult:
        """스냅샷으로 파이프라인을 실행한다. 발행은 하지 않는다.

        Raises:
            DomainError: 파이프라인 단계 중 하나가 실패했을 때.
        """
        traj_cfg = self._config.trajectory
        vertices = build_vertices(
            snapshot.waypoints,
            traj_cfg.dimension,
            traj_cfg.derivative_to_optimize,
        )
        segment_times = estimate_segment_times(
            vertices, traj_cfg.v_max, traj_cfg.a_max, traj_cfg.magic_constant
        )

        started = time.perf_counter()
        optimizer = PolynomialOptimizer(
            traj_cfg.num_coefficients, traj_cfg.dimension
        )
        optimizer.setup_from_vertices(
            vertices, segment_times, traj_cfg.derivative_to_optimize
        )
        optimizer.solve_linear()
        trajectory = optimizer.get_trajectory()
        solve_time = time.perf_counter() - started

        logger.debug('Took %.4f sec to get optimal trajectory', solve_time)
        if solve_time > traj_cfg.solve_warn_sec:
            logger.warning(
                'Trajectory solve took %.4f sec (> %.4f sec) for %d segments',
                solve_time, traj_cfg.solve_warn_sec, len(segment_times),
            )

        samples = self._sample_configured_range(trajectory)

        vis_cfg = self._config.visualization
        markers = draw_trajectory_markers(
            sample_whole_trajectory(trajectory, vis_cfg.sampling_time),
            vis_cfg.distance,
            vis_cfg.frame_id,
        )

        return PipelineResult(
            revision=snapshot.revision,
            vertices=vertices,
            segment_times=segment_times,
            trajectory=trajectory,
            samples=samples,
            markers=markers,
            solve_time_sec=solve_time,
        )

    def _sample_configured_range(self, trajectory: Trajectory) -> list[Sample]:
        """설정된 샘플링 구간을 궤적 범위 [min_time, max_time]로 잘라 평가한다."""
        cfg = self._config.sampling
        t_start = max(cfg.t_start, trajectory.min_time)
        t_end = min(cfg.t_end, trajectory.max_time)
        if t_start > t_end:
            logger.debug(
                'Sampling window [%.3f, %.3f] is outside trajectory '
                '(T=%.3f), no samples',
                cfg.t_start, cfg.t_end, trajectory.max_time,
            )
            return []
        if t_end < cfg.t_end:
            logger.debug(
                'Clipping sampling end %.3f to trajectory end %.3f',
                cfg.t_end, t_end,
            )
        if t_start > cfg.t_start:
            logger.debug(
                'Clipping sampling start %.3f to trajectory start %.3f',
                cfg.t_start, t_start,
            )
        return list(evaluate_range(
            trajectory, t_start, t_end, cfg.dt, cfg.derivative_order
        ).samples())
