# core/__init__.py
"""
core - elb-instances 공통 인프라

설정, 예외, 병렬 처리(fan-out) 구성 요소를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── parallel/       # boto3 client 생성, fan-out 실행기
    ├── config.py       # 환경변수 기반 불변 설정
    └── exceptions.py   # 예외 계층

Usage:
    # 설정 사용
    from core.config import CollectorConfig
    config = CollectorConfig.from_env()

    # 예외 처리
    from core.exceptions import CollectorError
    try:
        records = run(config)
    except CollectorError as e:
        print(e)
"""
