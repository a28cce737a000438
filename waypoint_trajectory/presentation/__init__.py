"""프레젠테이션 레이어: 의존성 조립과 실행 진입점."""
