"""설정 포트 인터페이스.

애플리케이션 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.exceptions import ConfigError


@dataclass(frozen=True)
class TrajectoryConfig:
    """궤적 최적화 설정.

    Args:
        dimension: 공간 차원 (2 또는 3).
        derivative_to_optimize: 적분 제곱을 최소화할 미분 차수.
        num_coefficients: 구간 다항식 계수 개수 N (짝수, >= 2*(차수+1)).
            N=10이면 snap 연속 궤적.
        v_max: 구간 시간 추정용 최대 속도 (m/s).
        a_max: 구간 시간 추정용 최대 가속도 (m/s^2).
        magic_constant: 구간 시간 추정 튜닝 상수.
        solve_warn_sec: 최적화 소요 시간 경고 임계값 (s).
    """

    dimension: int = 3
    derivative_to_optimize: DerivativeOrder = DerivativeOrder.ACCELERATION
    num_coefficients: int = 10
    v_max: float = 1.0
    a_max: float = 3.0
    magic_constant: float = 6.5
    solve_warn_sec: float = 0.05


@dataclass(frozen=True)
class SamplingConfig:
    """궤적 구간 샘플링 설정.

    Args:
        t_start: 샘플링 시작 시각 (s).
        t_end: 샘플링 종료 시각 (s). 궤적보다 길면 궤적 끝으로 자른다.
        dt: 샘플링 간격 (s).
        derivative_order: 샘플링할 미분 차수.
    """

    t_start: float = 2.0
    t_end: float = 10.0
    dt: float = 0.01
    derivative_order: DerivativeOrder = DerivativeOrder.POSITION


@dataclass(frozen=True)
class VisualizationConfig:
    """시각화 마커 설정.

    Args:
        distance: 추가 마커 사이 최소 거리 (m). 0이면 모든 샘플에 마커.
        frame_id: 마커 기준 좌표계.
        sampling_time: 시각화용 궤적 샘플링 간격 (s).
    """

    distance: float = 1.6
    frame_id: str = 'world'
    sampling_time: float = 0.1


@dataclass(frozen=True)
class MqttConfig:
    """MQTT 브로커 접속 설정.

    Args:
        broker_host: 브로커 호스트 주소.
        broker_port: 브로커 포트 번호.
        keepalive_sec: 연결 유지 간격 (초).
        reconnect_max_delay_sec: 재연결 최대 대기 시간 (초).
        enabled: False면 MQTT 없이 실행한다.
    """

    broker_host: str = 'localhost'
    broker_port: int = 1883
    keepalive_sec: int = 60
    reconnect_max_delay_sec: int = 60
    enabled: bool = True


@dataclass(frozen=True)
class TopicConfig:
    """입출력 토픽 이름.

    Args:
        waypoints: 경유지 목록 수신 토픽.
        markers: 마커 배치 발행 토픽.
    """

    waypoints: str = 'waypoints'
    markers: str = 'trajectory_traject'


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정.

    Args:
        trajectory: 궤적 최적화 설정.
        sampling: 구간 샘플링 설정.
        visualization: 시각화 설정.
        mqtt: MQTT 설정.
        topics: 토픽 이름.
        update_rate_hz: 파이프라인 실행 주기 (Hz).
    """

    trajectory: TrajectoryConfig = field(default_factory=TrajectoryConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    visualization: VisualizationConfig = field(
        default_factory=VisualizationConfig
    )
    mqtt: MqttConfig = field(default_factory=MqttConfig)
    topics: TopicConfig = field(default_factory=TopicConfig)
    update_rate_hz: float = 10.0

    def validate(self) -> None:
        """설정값 범위를 검증한다.

        Raises:
            ConfigError: 유효하지 않은 값이 있을 때.
        """
        traj = self.trajectory
        if traj.dimension not in (2, 3):
            raise ConfigError(f'dimension은 2 또는 3이어야 합니다: {traj.dimension}')
        if traj.num_coefficients % 2 != 0:
            raise ConfigError(
                f'num_coefficients는 짝수여야 합니다: {traj.num_coefficients}'
            )
        min_coefficients = 2 * (int(traj.derivative_to_optimize) + 1)
        if traj.num_coefficients < min_coefficients:
            raise ConfigError(
                f'num_coefficients({traj.num_coefficients})는 '
                f'{min_coefficients} 이상이어야 합니다.'
            )
        if traj.v_max <= 0.0 or traj.a_max <= 0.0:
            raise ConfigError('v_max, a_max는 0보다 커야 합니다.')
        if traj.magic_constant < 0.0:
            raise ConfigError('magic_constant는 음수일 수 없습니다.')
        if not self.sampling.t_start >= 0.0:
            raise ConfigError(
                f'sampling.t_start는 0 이상이어야 합니다: {self.sampling.t_start}'
            )
        if self.sampling.dt <= 0.0:
            raise ConfigError(f'sampling.dt는 0보다 커야 합니다: {self.sampling.dt}')
        if self.sampling.t_end < self.sampling.t_start:
            raise ConfigError('sampling.t_end는 t_start 이상이어야 합니다.')
        if self.visualization.distance < 0.0:
            raise ConfigError('visualization.distance는 음수일 수 없습니다.')
        if self.visualization.sampling_time <= 0.0:
            raise ConfigError('visualization.sampling_time은 0보다 커야 합니다.')
        if self.update_rate_hz <= 0.0:
            raise ConfigError(f'update_rate_hz는 0보다 커야 합니다: {self.update_rate_hz}')


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self, config_path: str | Path | None = None) -> AppConfig:
        """설정 파일을 로드하여 AppConfig로 반환한다.

        Args:
            config_path: 설정 파일 경로. None이면 기본 경로.

        Returns:
            로드된 설정.
        """
