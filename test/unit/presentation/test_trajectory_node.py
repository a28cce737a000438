"""TrajectoryNode / main 진입점 단위 테스트."""

from unittest.mock import MagicMock

import pytest

from waypoint_trajectory.domain.events import TrajectoryGeneratedEvent
from waypoint_trajectory.domain.value_objects.waypoint import Waypoint
from waypoint_trajectory.presentation.main import _parse_waypoints, main
from waypoint_trajectory.presentation.trajectory_node import TrajectoryNode


class TestTrajectoryNode:
    def test_tick_without_waypoints(self, sample_config):
        node = TrajectoryNode(sample_config)
        assert node.tick() is None

    def test_tick_with_waypoints(self, sample_config, line_waypoints):
        node = TrajectoryNode(sample_config)
        generated = []
        node.event_publisher.subscribe(
            TrajectoryGeneratedEvent, generated.append
        )
        node.store.replace(line_waypoints)

        result = node.tick()

        assert result is not None
        assert len(generated) == 1
        assert generated[0].revision == 1

    def test_mqtt_wiring(self, sample_config):
        mqtt_client = MagicMock()
        node = TrajectoryNode(sample_config, mqtt_client=mqtt_client)

        node.start()
        mqtt_client.connect.assert_called_once()
        assert mqtt_client.subscribe.call_args[0][0] == 'waypoints'

        node.shutdown()
        mqtt_client.unsubscribe.assert_called_once_with('waypoints')
        mqtt_client.disconnect.assert_called_once()

    def test_spin_stops(self, sample_config):
        node = TrajectoryNode(sample_config)
        node.stop()
        node.spin()


class TestMain:
    def test_parse_waypoints(self):
        assert _parse_waypoints('0,0,0; 1,2 ;') == [
            Waypoint(0.0, 0.0, 0.0), Waypoint(1.0, 2.0),
        ]

    def test_once_succeeds(self, tmp_path):
        code = main([
            '-c', str(tmp_path / 'missing.yaml'), '--once',
            '--waypoints', '0,0,0;5,0,0;10,0,0',
        ])
        assert code == 0

    def test_once_without_waypoints_fails(self, tmp_path):
        code = main(['-c', str(tmp_path / 'missing.yaml'), '--once'])
        assert code == 1

    def test_invalid_config(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text('trajectory:\n  num_coefficients: 7\n')
        assert main(['-c', str(path), '--once']) == 1

    def test_unconvertible_config_value(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text('trajectory:\n  derivative_to_optimize: crackle\n')
        assert main(['-c', str(path), '--once']) == 1

    def test_invalid_waypoint_argument(self):
        with pytest.raises(SystemExit):
            main(['--once', '--waypoints', '1,2,3,4'])
