"""MqttClient 유닛 테스트."""

from unittest.mock import MagicMock, patch

import pytest

from waypoint_trajectory.infra.mqtt.mqtt_client import MqttClient
from waypoint_trajectory.usecase.ports.config_port import MqttConfig


@pytest.fixture
def config():
    """Create test MQTT configuration."""
    return MqttConfig(
        broker_host='localhost',
        broker_port=1883,
        keepalive_sec=60,
        reconnect_max_delay_sec=30,
    )


@pytest.fixture
def client(config):
    """Create test MQTT client with mocked paho client."""
    with patch(
        'waypoint_trajectory.infra.mqtt.mqtt_client.mqtt.Client'
    ) as MockPaho:
        mock_paho = MagicMock()
        MockPaho.return_value = mock_paho
        mqtt_client = MqttClient(config, client_id='test')
        yield mqtt_client


def _message(topic, payload):
    msg = MagicMock()
    msg.topic = topic
    msg.payload = payload
    return msg


class TestConnection:
    def test_connect_starts_loop(self, client, config):
        client.connect()

        client._client.connect.assert_called_once_with(
            host='localhost', port=1883, keepalive=60,
        )
        client._client.loop_start.assert_called_once()

    def test_reconnect_delay_configured(self, client):
        client._client.reconnect_delay_set.assert_called_once_with(
            min_delay=1, max_delay=30,
        )

    def test_connected_flag(self, client):
        assert not client.is_connected
        client._on_connect(client._client, None, {}, 0)
        assert client.is_connected
        client._on_disconnect(client._client, None, {}, 1)
        assert not client.is_connected

    def test_failed_connect(self, client):
        client._on_connect(client._client, None, {}, 5)
        assert not client.is_connected

    def test_disconnect(self, client):
        client._on_connect(client._client, None, {}, 0)
        client.disconnect()

        client._client.loop_stop.assert_called_once()
        client._client.disconnect.assert_called_once()
        assert not client.is_connected


class TestSubscribeStoresQos:
    """subscribe() QoS 저장 테스트."""

    def test_subscribe_stores_qos(self, client):
        """subscribe가 callback과 QoS를 함께 저장한다."""
        cb = MagicMock()
        client.subscribe('test/topic', cb, qos=1)

        assert 'test/topic' in client._subscriptions
        stored_cb, stored_qos = client._subscriptions['test/topic']
        assert stored_cb is cb
        assert stored_qos == 1

    def test_subscribe_stores_default_qos_0(self, client):
        """기본 QoS 0이 저장된다."""
        cb = MagicMock()
        client.subscribe('test/topic', cb)

        _, stored_qos = client._subscriptions['test/topic']
        assert stored_qos == 0

    def test_unsubscribe_removes_entry(self, client):
        """unsubscribe가 저장된 항목을 제거한다."""
        cb = MagicMock()
        client.subscribe('test/topic', cb, qos=1)
        client.unsubscribe('test/topic')

        assert 'test/topic' not in client._subscriptions


class TestReconnectRestoresQos:
    """재연결 시 QoS 복원 테스트."""

    def test_reconnect_restores_qos(self, client):
        """재연결 시 저장된 QoS로 재구독한다."""
        cb1 = MagicMock()
        cb2 = MagicMock()
        client.subscribe('topic/a', cb1, qos=0)
        client.subscribe('topic/b', cb2, qos=1)

        # 연결 콜백 시뮬레이션
        client._on_connect(client._client, None, {}, 0)

        subscribe_calls = client._client.subscribe.call_args_list
        topics_qos = {
            call[0][0]: call[1]['qos']
            for call in subscribe_calls
        }
        assert topics_qos.get('topic/a') == 0
        assert topics_qos.get('topic/b') == 1


class TestMessageDispatch:
    def test_routes_to_callback(self, client):
        cb = MagicMock()
        client.subscribe('waypoints', cb)

        client._on_message(client._client, None, _message('waypoints', b'{}'))

        cb.assert_called_once_with('waypoints', b'{}')

    def test_unknown_topic_ignored(self, client):
        client._on_message(client._client, None, _message('other', b'{}'))

    def test_callback_exception_is_contained(self, client):
        cb = MagicMock(side_effect=RuntimeError('boom'))
        client.subscribe('waypoints', cb)

        client._on_message(client._client, None, _message('waypoints', b''))

        cb.assert_called_once()


class TestPublish:
    def test_publish_encodes_payload(self, client):
        client._client.publish.return_value.rc = 0
        client.publish('markers', '{"a": 1}', qos=0)

        client._client.publish.assert_called_once_with(
            'markers', b'{"a": 1}', qos=0, retain=False,
        )
