#!/usr/bin/env python3
"""trajectory_traject 마커 토픽 모니터링 스크립트.

경유지를 한 번 발행하고, 노드가 발행하는 마커 배치를 요약 출력한다.

Usage:
    python3 scripts/monitor_markers.py --waypoints "0,0,1;2,1,1.5;4,-1,2"
"""

import argparse
from collections import Counter
import json
import logging
import threading

from waypoint_trajectory.infra.mqtt.mqtt_client import MqttClient
from waypoint_trajectory.usecase.ports.config_port import MqttConfig

logger = logging.getLogger('monitor_markers')


class MarkerMonitor:

    def __init__(self, client: MqttClient, topic: str):
        self._client = client
        self._topic = topic
        self._seen = 0

    def start(self) -> None:
        self._client.subscribe(self._topic, self._on_markers)
        logger.info('Monitoring %s ...', self._topic)

    def _on_markers(self, topic: str, payload: bytes) -> None:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError:
            return

        markers = data.get('markers', [])
        counts = Counter(m.get('ns', 'N/A') for m in markers)
        path = next((m for m in markers if m.get('ns') == 'path'), None)
        path_points = len(path.get('points', [])) if path else 0

        self._seen += 1
        logger.info(
            '\n'
            '  batch      : %d\n'
            '  markers    : %d\n'
            '  namespaces : %s\n'
            '  path points: %d',
            self._seen, len(markers), dict(counts), path_points,
        )


def main():
    parser = argparse.ArgumentParser(prog='monitor_markers')
    parser.add_argument('--host', default='localhost')
    parser.add_argument('--port', type=int, default=1883)
    parser.add_argument('--waypoint-topic', default='waypoints')
    parser.add_argument('--marker-topic', default='trajectory_traject')
    parser.add_argument(
        '--waypoints', default=None,
        help='Waypoints to publish once, e.g. "0,0,0;1,2,0;10,0,0"',
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    client = MqttClient(
        MqttConfig(broker_host=args.host, broker_port=args.port),
        client_id='marker_monitor',
    )
    monitor = MarkerMonitor(client, args.marker_topic)
    client.connect()
    monitor.start()

    if args.waypoints:
        points = [
            [float(v) for v in chunk.split(',')]
            for chunk in args.waypoints.split(';') if chunk.strip()
        ]
        client.publish(
            args.waypoint_topic, json.dumps({'waypoints': points}), qos=1
        )
        logger.info('Published %d waypoint(s)', len(points))

    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        pass
    finally:
        client.disconnect()


if __name__ == '__main__':
    main()
