"""경유지/마커 메시지 JSON 직렬화/역직렬화.

외부 JSON (camelCase) ↔ 도메인 값 객체 변환을 담당한다.
snake_case(도메인) ↔ camelCase(메시지) 변환은 이 모듈에서만 처리한다.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
import json
import math
import re
from typing import Any

from waypoint_trajectory.domain.value_objects.marker import Marker, MarkerBatch
from waypoint_trajectory.domain.value_objects.waypoint import Waypoint


# -- snake_case → camelCase 변환 --

_SNAKE_RE = re.compile(r'_([a-z])')

# 특별한 매핑이 필요한 필드
_SPECIAL_SNAKE_TO_CAMEL: dict[str, str] = {
    'marker_type': 'type',
}


def _snake_to_camel(name: str) -> str:
    """snake_case → camelCase 변환."""
    if name in _SPECIAL_SNAKE_TO_CAMEL:
        return _SPECIAL_SNAKE_TO_CAMEL[name]
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)


# -- 직렬화 (도메인 → JSON) --

def _serialize_value(value: Any) -> Any:
    """단일 값을 JSON 호환 타입으로 변환한다."""
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if is_dataclass(value) and not isinstance(value, type):
        return _dataclass_to_dict(value)
    return value


def _dataclass_to_dict(obj: Any) -> dict[str, Any]:
    """dataclass를 camelCase JSON dict로 변환한다."""
    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[_snake_to_camel(f.name)] = _serialize_value(value)
    return result


def marker_to_dict(marker: Marker) -> dict[str, Any]:
    """Marker를 camelCase JSON dict로 변환한다."""
    return _dataclass_to_dict(marker)


def serialize_marker_batch(batch: MarkerBatch) -> str:
    """MarkerBatch를 JSON 문자열로 직렬화한다.

    개별 마커 뒤에 경로 마커가 오는 순서를 유지한다.
    """
    data = {'markers': [marker_to_dict(m) for m in batch.all_markers()]}
    return json.dumps(data, ensure_ascii=False)


# -- 역직렬화 (JSON → 도메인) --

def _parse_coordinates(values: Any) -> Waypoint:
    """[x, y] 또는 [x, y, z] 목록에서 Waypoint를 만든다."""
    if not isinstance(values, (list, tuple)) or len(values) not in (2, 3):
        raise ValueError(f'Invalid waypoint coordinates: {values!r}')
    coords = [float(v) for v in values]
    if not all(math.isfinite(c) for c in coords):
        raise ValueError(f'Non-finite waypoint coordinates: {values!r}')
    return Waypoint(*coords)


def _parse_pose(data: Any) -> Waypoint:
    """{"position": {"x":.., "y":.., "z":..}} 에서 Waypoint를 만든다."""
    if not isinstance(data, dict) or not isinstance(data.get('position'), dict):
        raise ValueError(f'Invalid pose entry: {data!r}')
    position = data['position']
    return _parse_coordinates(
        [position['x'], position['y'], position.get('z', 0.0)]
    )


def deserialize_waypoints(payload: str | bytes) -> tuple[Waypoint, ...]:
    """경유지 목록 JSON을 파싱한다.

    지원 형식:
        {"poses": [{"position": {"x": .., "y": .., "z": ..}}, ...]}
        {"waypoints": [[x, y, z], ...]}

    Args:
        payload: JSON 문자열 또는 바이트.

    Returns:
        순서가 유지된 경유지 튜플.

    Raises:
        ValueError: JSON 형식이 잘못되었거나 필드가 없을 때.
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(f'Invalid JSON payload: {exc}') from exc

    if not isinstance(data, dict):
        raise ValueError('Waypoint payload must be a JSON object')

    try:
        if 'poses' in data:
            return tuple(_parse_pose(p) for p in data['poses'])
        if 'waypoints' in data:
            return tuple(_parse_coordinates(w) for w in data['waypoints'])
    except (KeyError, TypeError) as exc:
        raise ValueError(f'Malformed waypoint payload: {exc}') from exc

    raise ValueError("Waypoint payload needs 'poses' or 'waypoints'")
