"""경유지 기반 최소 미분 다항식 궤적 생성기."""
