"""설정 로더 인프라 (ConfigPort 구현)."""

from waypoint_trajectory.infra.config.yaml_config_loader import YamlConfigLoader

__all__ = ["YamlConfigLoader"]
