"""궤적 생성 유스케이스 레이어.

도메인 로직을 포트를 통해 조율하는 애플리케이션 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from waypoint_trajectory.usecase.generate_trajectory import (
    GenerateTrajectory,
    PipelineResult,
)
from waypoint_trajectory.usecase.marker_decimator import (
    draw_trajectory_markers,
    draw_vertices,
)
from waypoint_trajectory.usecase.polynomial_optimizer import (
    PolynomialOptimizer,
    optimize_trajectory,
)
from waypoint_trajectory.usecase.segment_time_estimator import (
    estimate_segment_times,
)
from waypoint_trajectory.usecase.trajectory_sampler import (
    SampleRange,
    evaluate,
    evaluate_range,
    sample_whole_trajectory,
)
from waypoint_trajectory.usecase.vertex_builder import build_vertices

__all__ = [
    "GenerateTrajectory",
    "PipelineResult",
    "PolynomialOptimizer",
    "SampleRange",
    "build_vertices",
    "draw_trajectory_markers",
    "draw_vertices",
    "estimate_segment_times",
    "evaluate",
    "evaluate_range",
    "optimize_trajectory",
    "sample_whole_trajectory",
]
