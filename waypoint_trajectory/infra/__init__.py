"""인프라 레이어: 포트 구현체 (설정, 이벤트, 저장소, MQTT)."""
