"""구간 시간 초기 추정 유스케이스."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np
from scipy.optimize import brentq

from waypoint_trajectory.domain.entities.vertex import Vertex
from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.exceptions import InvalidLimitsError

logger = logging.getLogger(__name__)

DEFAULT_MAGIC_CONSTANT = 6.5


def _time_factor(ramp: float, gain: float) -> float:
    return ramp * (1.0 + gain * math.exp(-ramp))


def _plateau_start(gain: float) -> float | None:
    """보정항 때문에 시간이 줄어들기 시작하는 ramp 값.

    f(r) = r(1 + k e^-r) 의 도함수 최솟값은 r=2 에서 1 - k e^-2 이므로
    k <= e^2 이면 f 는 단조 증가하고 None 을 반환한다.
    아니면 [1, 2] 구간의 극대점을 찾는다.
    """
    if gain <= math.e ** 2:
        return None
    return brentq(lambda r: 1.0 + gain * math.exp(-r) * (1.0 - r), 1.0, 2.0)


def segment_time(
    distance: float,
    v_max: float,
    a_max: float,
    magic_constant: float = DEFAULT_MAGIC_CONSTANT,
) -> float:
    """거리 하나에 대한 구간 시간.

    t = 2d/v_max * (1 + c * v_max/a_max * exp(-2d/v_max))

    짧은 구간은 가속 제한 보정항이 커져 시간이 과소 추정되지 않고,
    긴 구간은 속도 제한항이 지배한다. c * v_max/a_max > e^2 이면 위 식이
    극대점 뒤에서 잠시 감소하므로, 그 구간은 극대값으로 유지해 거리에 대해
    단조 비감소가 되도록 한다.
    """
    ramp = distance / v_max * 2.0
    gain = magic_constant * v_max / a_max
    time = _time_factor(ramp, gain)
    peak = _plateau_start(gain)
    if peak is not None and ramp > peak:
        time = max(time, _time_factor(peak, gain))
    return time


def estimate_segment_times(
    vertices: Sequence[Vertex],
    v_max: float,
    a_max: float,
    magic_constant: float = DEFAULT_MAGIC_CONSTANT,
) -> list[float]:
    """연속 정점 쌍마다 구간 시간을 추정한다.

    Args:
        vertices: 위치 제약을 가진 정점 목록.
        v_max: 최대 속도 (m/s).
        a_max: 최대 가속도 (m/s^2).
        magic_constant: 튜닝 상수.

    Returns:
        구간 시간 목록 (len(vertices) - 1).

    Raises:
        InvalidLimitsError: v_max/a_max가 0 이하이거나 튜닝 상수가 음수일 때.
        MissingConstraintError: 위치 제약이 없는 정점이 있을 때.
    """
    if not v_max > 0.0 or not a_max > 0.0:
        raise InvalidLimitsError(
            f'v_max, a_max는 0보다 커야 합니다: v_max={v_max}, a_max={a_max}'
        )
    if magic_constant < 0.0:
        raise InvalidLimitsError(
            f'튜닝 상수는 음수일 수 없습니다: {magic_constant}'
        )

    times: list[float] = []
    for start, end in zip(vertices, vertices[1:]):
        distance = float(np.linalg.norm(
            end.get_constraint(DerivativeOrder.POSITION)
            - start.get_constraint(DerivativeOrder.POSITION)
        ))
        times.append(segment_time(distance, v_max, a_max, magic_constant))

    logger.debug('Estimated segment times: %s', times)
    return times
