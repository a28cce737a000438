"""궤적 생성 도메인 레이어.

외부 라이브러리는 numpy만 의존하며, usecase/infra 레이어 의존성은 없다.
"""
