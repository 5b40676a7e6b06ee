"""
core/parallel/client.py - boto3 client 생성 헬퍼

재시도 없음(total_max_attempts=1) + 연결 풀이 설정된 boto3 client를 생성합니다.
수집 파이프라인은 첫 실패에서 즉시 종료하므로 botocore 기본 재시도도 끕니다.

주요 구성 요소:
- get_session: 정적 자격 증명으로 boto3 Session 생성
- get_client: 재시도 비활성화 boto3 client 생성

Example:
    from core.parallel.client import get_client, get_session

    session = get_session(config)
    elb = get_client(session, "elb", region_name=config.region)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    import boto3

    from core.config import CollectorConfig

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_TOTAL_MAX_ATTEMPTS = 1  # 최초 호출 포함 총 1회, 재시도 없음
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_MAX_POOL_CONNECTIONS = 50  # ELB당 인스턴스 fan-out 크기 이상 권장


def get_session(config: CollectorConfig) -> boto3.Session:
    """설정의 정적 자격 증명으로 boto3 Session 생성

    Args:
        config: 수집기 설정

    Returns:
        boto3 Session
    """
    import boto3

    return boto3.Session(
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        aws_session_token=config.session_token,
        region_name=config.region,
    )


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    total_max_attempts: int = DEFAULT_TOTAL_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    **kwargs: Any,
) -> Any:
    """boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (elb, ec2 등)
        region_name: 리전 (None이면 세션 기본값)
        total_max_attempts: 최초 호출 포함 총 시도 횟수 (기본: 1, 재시도 없음)
        retry_mode: 재시도 모드
        max_pool_connections: HTTP 연결 풀 크기
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"total_max_attempts": total_max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        max_pool_connections=max_pool_connections,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
