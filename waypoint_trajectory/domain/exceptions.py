"""궤적 생성 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class InsufficientWaypointsError(DomainError):
    """경유지가 2개 미만일 때."""


class DimensionMismatchError(DomainError):
    """좌표 차원이 선언된 공간 차원과 다를 때."""


class InvalidLimitsError(DomainError):
    """최대 속도/가속도 등 운동학 한계값이 유효하지 않을 때."""


class MissingConstraintError(DomainError):
    """정점에 필요한 제약(위치 등)이 없을 때."""


class SolverDegenerateError(DomainError):
    """다항식 최적화 선형 시스템이 특이(singular)할 때."""


class TimeOutOfRangeError(DomainError):
    """평가 시각이 궤적 구간을 벗어났을 때."""


class InvalidRangeError(DomainError):
    """구간 샘플링 범위 또는 간격이 유효하지 않을 때."""


class ConfigError(DomainError):
    """설정값 유효성 검증 실패 시."""
