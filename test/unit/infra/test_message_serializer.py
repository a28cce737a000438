"""경유지/마커 메시지 직렬화 단위 테스트."""

from datetime import UTC, datetime
import json

import pytest

from waypoint_trajectory.domain.enums import MarkerCategory, MarkerType
from waypoint_trajectory.domain.value_objects.marker import (
    Marker,
    MarkerBatch,
    Point3,
)
from waypoint_trajectory.domain.value_objects.waypoint import Waypoint
from waypoint_trajectory.infra.mqtt.message_serializer import (
    deserialize_waypoints,
    marker_to_dict,
    serialize_marker_batch,
)


class TestDeserializeWaypoints:
    def test_poses_format(self):
        payload = json.dumps({'poses': [
            {'position': {'x': 0.0, 'y': 0.0, 'z': 1.0}},
            {'position': {'x': 5.0, 'y': 2.0, 'z': 1.0}},
        ]})
        assert deserialize_waypoints(payload) == (
            Waypoint(0.0, 0.0, 1.0), Waypoint(5.0, 2.0, 1.0),
        )

    def test_poses_without_z(self):
        payload = json.dumps({'poses': [{'position': {'x': 1, 'y': 2}}]})
        assert deserialize_waypoints(payload) == (Waypoint(1.0, 2.0, 0.0),)

    def test_waypoints_format_bytes(self):
        payload = json.dumps(
            {'waypoints': [[0, 0, 0], [1, 2], [3, 4, 5]]}
        ).encode('utf-8')
        assert deserialize_waypoints(payload) == (
            Waypoint(0.0, 0.0, 0.0), Waypoint(1.0, 2.0, 0.0),
            Waypoint(3.0, 4.0, 5.0),
        )

    def test_empty_list(self):
        assert deserialize_waypoints('{"waypoints": []}') == ()

    @pytest.mark.parametrize('payload', [
        'not json',
        '[1, 2, 3]',
        '{"points": []}',
        '{"waypoints": [[1]]}',
        '{"waypoints": [[1, 2, 3, 4]]}',
        '{"waypoints": [["a", "b"]]}',
        '{"waypoints": [[1, NaN]]}',
        '{"poses": [{"position": {"x": 1}}]}',
        '{"poses": [{"orientation": {}}]}',
        '{"poses": 5}',
        b'\xff\xfe',
    ])
    def test_malformed(self, payload):
        with pytest.raises(ValueError):
            deserialize_waypoints(payload)


class TestSerializeMarkers:
    @pytest.fixture
    def batch(self):
        stamp = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
        path = Marker(
            ns=MarkerCategory.PATH, marker_type=MarkerType.LINE_STRIP,
            id=1, frame_id='world', stamp=stamp,
            points=[Point3(0, 0, 0), Point3(1, 0, 0)],
        )
        pose = Marker(
            ns=MarkerCategory.POSE, marker_type=MarkerType.ARROW,
            id=0, frame_id='world', stamp=stamp, lifetime_sec=1.5,
        )
        return MarkerBatch(path=path, markers=[pose])

    def test_camel_case_keys(self, batch):
        data = marker_to_dict(batch.markers[0])

        assert data['type'] == 'ARROW'
        assert data['ns'] == 'pose'
        assert data['frameId'] == 'world'
        assert data['lifetimeSec'] == 1.5
        assert data['stamp'] == '2024-01-01T12:00:00.000Z'
        assert data['orientation'] == {'x': 0.0, 'y': 0.0, 'z': 0.0,
                                       'w': 1.0}
        assert 'marker_type' not in data

    def test_batch_order(self, batch):
        data = json.loads(serialize_marker_batch(batch))

        assert [m['ns'] for m in data['markers']] == ['pose', 'path']
        assert data['markers'][1]['points'][1] == {'x': 1, 'y': 0, 'z': 0}

    def test_none_stamp_omitted(self):
        marker = Marker(ns=MarkerCategory.PATH,
                        marker_type=MarkerType.LINE_STRIP)
        assert 'stamp' not in marker_to_dict(marker)
