"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from waypoint_trajectory.domain.enums import DerivativeOrder
from waypoint_trajectory.domain.exceptions import ConfigError
from waypoint_trajectory.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    MqttConfig,
    SamplingConfig,
    TopicConfig,
    TrajectoryConfig,
    VisualizationConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 AppConfig로 변환한다.
    파일이 없거나 형식이 잘못되면 기본값을 사용한다.

    Args:
        config_path: 기본 YAML 설정 파일 경로. None이면 패키지 기본 경로.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._path = config_path or _DEFAULT_CONFIG_PATH

    def load(self, config_path: str | Path | None = None) -> AppConfig:
        """YAML 파일에서 설정을 로드한다.

        Raises:
            ConfigError: 값 변환 또는 범위 검증 실패 시.
        """
        path = Path(config_path) if config_path is not None else self._path
        raw = self._read_yaml(path)
        params = self._extract_params(raw)

        try:
            config = self._build_config(params)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid config value in {path}: {exc}") from exc
        config.validate()

        logger.info("Config loaded from %s", path)
        return config

    def _build_config(self, params: dict[str, Any]) -> AppConfig:
        """추출한 파라미터로 AppConfig를 만든다. 값 변환 실패는 그대로 전파한다."""
        traj = params.get("trajectory") or {}
        sampling = params.get("sampling") or {}
        vis = params.get("visualization") or {}
        mqtt_data = params.get("mqtt") or {}
        topics = params.get("topics") or {}

        return AppConfig(
            trajectory=TrajectoryConfig(
                dimension=int(traj.get("dimension", 3)),
                derivative_to_optimize=DerivativeOrder.parse(
                    traj.get("derivative_to_optimize", "acceleration")
                ),
                num_coefficients=int(traj.get("num_coefficients", 10)),
                v_max=float(traj.get("v_max", 1.0)),
                a_max=float(traj.get("a_max", 3.0)),
                magic_constant=float(traj.get("magic_constant", 6.5)),
                solve_warn_sec=float(traj.get("solve_warn_sec", 0.05)),
            ),
            sampling=SamplingConfig(
                t_start=float(sampling.get("t_start", 2.0)),
                t_end=float(sampling.get("t_end", 10.0)),
                dt=float(sampling.get("dt", 0.01)),
                derivative_order=DerivativeOrder.parse(
                    sampling.get("derivative_order", "position")
                ),
            ),
            visualization=VisualizationConfig(
                distance=float(vis.get("distance", 1.6)),
                frame_id=str(vis.get("frame_id", "world")),
                sampling_time=float(vis.get("sampling_time", 0.1)),
            ),
            mqtt=MqttConfig(
                broker_host=mqtt_data.get("broker_host", "localhost"),
                broker_port=int(mqtt_data.get("broker_port", 1883)),
                keepalive_sec=int(mqtt_data.get("keepalive_sec", 60)),
                reconnect_max_delay_sec=int(
                    mqtt_data.get("reconnect_max_delay_sec", 60)
                ),
                enabled=bool(mqtt_data.get("enabled", True)),
            ),
            topics=TopicConfig(
                waypoints=topics.get("waypoints", "waypoints"),
                markers=topics.get("markers", "trajectory_traject"),
            ),
            update_rate_hz=float(params.get("update_rate_hz", 10.0)),
        )

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", path
            )
            return {}

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """YAML 구조에서 ros__parameters 를 추출한다."""
        # waypoint_trajectory.ros__parameters 구조 탐색
        node_data = raw.get("waypoint_trajectory", raw)
        if isinstance(node_data, dict):
            return node_data.get("ros__parameters", node_data)
        return {}
