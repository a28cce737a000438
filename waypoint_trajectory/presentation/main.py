r"""경유지 궤적 생성 노드 진입점.

실행: trajectory_node -c config.yaml
      trajectory_node -c config.yaml --once --waypoints "0,0,0;1,2,0;10,0,0"
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging
import sys

from waypoint_trajectory.domain.exceptions import ConfigError
from waypoint_trajectory.domain.value_objects.waypoint import Waypoint
from waypoint_trajectory.infra.config import YamlConfigLoader
from waypoint_trajectory.presentation.trajectory_node import TrajectoryNode

logger = logging.getLogger(__name__)


def _parse_waypoints(text: str) -> list[Waypoint]:
    """'x,y[,z];x,y[,z];...' 형식의 경유지 문자열을 파싱한다."""
    waypoints = []
    for chunk in text.split(';'):
        if not chunk.strip():
            continue
        coords = [float(v) for v in chunk.split(',')]
        if len(coords) not in (2, 3):
            raise argparse.ArgumentTypeError(
                f'Invalid waypoint: {chunk!r}'
            )
        waypoints.append(Waypoint(*coords))
    return waypoints


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='trajectory_node',
        description='Minimum-derivative polynomial trajectory generator',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the params yaml file',
    )
    parser.add_argument(
        '--once', action='store_true',
        help='Run the pipeline once and exit',
    )
    parser.add_argument(
        '--waypoints', type=_parse_waypoints, default=None,
        help='Initial waypoints, e.g. "0,0,0;1,2,0;10,0,0"',
    )
    parser.add_argument(
        '--log-level', default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level, default: INFO',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """궤적 생성 노드를 시작한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        프로세스 종료 코드.
    """
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    try:
        config = YamlConfigLoader().load(args.config_file)
    except ConfigError as exc:
        logger.error('Invalid configuration: %s', exc)
        return 1

    if args.once:
        # 단발 실행은 브로커 없이 입력 경유지만 사용한다.
        config = replace(config, mqtt=replace(config.mqtt, enabled=False))

    node = TrajectoryNode(config)
    if args.waypoints:
        node.store.replace(args.waypoints)

    if args.once:
        result = node.tick()
        return 0 if result is not None else 1

    try:
        node.start()
        node.spin()
    except KeyboardInterrupt:
        logger.info('Interrupted')
    finally:
        node.shutdown()
    return 0


if __name__ == '__main__':
    sys.exit(main())
