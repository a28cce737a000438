"""궤적 생성 도메인 열거형 정의."""

from enum import IntEnum, StrEnum


class DerivativeOrder(IntEnum):
    """위치 기준 미분 차수."""

    POSITION = 0
    VELOCITY = 1
    ACCELERATION = 2
    JERK = 3
    SNAP = 4

    @property
    def label(self) -> str:
        """마커 네임스페이스 등에 쓰이는 소문자 이름."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: 'int | str | DerivativeOrder') -> 'DerivativeOrder':
        """정수 또는 이름 문자열을 DerivativeOrder로 변환한다.

        Args:
            value: 0~4 정수, 'acceleration' 같은 이름, 또는 열거형 값.

        Returns:
            대응하는 DerivativeOrder.

        Raises:
            ValueError: 알 수 없는 값일 때.
        """
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f'알 수 없는 미분 차수 이름: {value}'
                ) from None
        return cls(int(value))


class MarkerCategory(StrEnum):
    """시각화 마커의 의미 분류 (네임스페이스)."""

    PATH = 'path'
    POSE = 'pose'
    VELOCITY = 'velocity'
    ACCELERATION = 'acceleration'
    STRAIGHT_PATH = 'straight_path'


class MarkerType(StrEnum):
    """마커 도형 유형."""

    ARROW = 'ARROW'
    LINE_STRIP = 'LINE_STRIP'


class MarkerAction(StrEnum):
    """마커 동작."""

    ADD = 'ADD'
