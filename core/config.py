"""
core/config.py - 중앙 설정 관리

프로세스 환경변수에서 수집기 설정을 한 번만 로드합니다.
로드된 설정은 불변(frozen)이며, 이후 각 단계에 명시적으로 전달됩니다.

필수 환경변수:
    AWS_ACCESS_KEY_ID       # 자격 증명 ID
    AWS_SECRET_ACCESS_KEY   # 자격 증명 Secret
    AWS_REGION              # ELB/EC2 조회 리전
    AWS_ELB_NAMES           # 쉼표로 구분된 ELB 이름 목록

선택 환경변수:
    AWS_SESSION_TOKEN       # 임시 자격 증명 토큰
    LOG_LEVEL / LOG_FORMAT  # 로깅 설정

Usage:
    from core.config import CollectorConfig

    config = CollectorConfig.from_env()
    print(config.region, config.elb_names)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib import metadata

DIST_NAME = "elb-instances"

ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_REGION = "AWS_REGION"
ENV_ELB_NAMES = "AWS_ELB_NAMES"
ENV_SESSION_TOKEN = "AWS_SESSION_TOKEN"

ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FORMAT = "LOG_FORMAT"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# 검증 순서 = 에러 보고 순서
REQUIRED_ENV_VARS = (
    ENV_ACCESS_KEY_ID,
    ENV_SECRET_ACCESS_KEY,
    ENV_REGION,
    ENV_ELB_NAMES,
)


def get_version() -> str:
    """설치된 배포판 버전 반환 (미설치 시 0.0.0)"""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def parse_name_list(value: str | None) -> tuple[str, ...]:
    """쉼표 구분 문자열을 이름 튜플로 변환

    공백은 제거하고 빈 항목은 버립니다.

    Example:
        parse_name_list("lb1, lb2,,") -> ("lb1", "lb2")
    """
    if not value:
        return ()
    return tuple(name.strip() for name in value.split(",") if name.strip())


@dataclass(frozen=True)
class CollectorConfig:
    """수집기 설정

    Attributes:
        region: 대상 AWS 리전
        elb_names: 조회할 Classic ELB 이름 목록
        access_key_id: AWS Access Key ID
        secret_access_key: AWS Secret Access Key (repr에서 제외)
        session_token: 임시 자격 증명 토큰 (선택)
    """

    region: str
    elb_names: tuple[str, ...]
    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str | None = field(default=None, repr=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CollectorConfig:
        """환경변수에서 설정 로드

        필수 값 중 하나라도 없거나 비어 있으면 즉시 ConfigurationError를 발생시킵니다.

        Args:
            environ: 환경변수 매핑 (None이면 os.environ)

        Returns:
            CollectorConfig

        Raises:
            ConfigurationError: 누락된 환경변수 이름 포함
        """
        from core.exceptions import ConfigurationError

        env = os.environ if environ is None else environ

        values: dict[str, str] = {}
        for name in REQUIRED_ENV_VARS:
            value = (env.get(name) or "").strip()
            if not value:
                raise ConfigurationError(name)
            values[name] = value

        elb_names = parse_name_list(values[ENV_ELB_NAMES])
        if not elb_names:
            raise ConfigurationError(ENV_ELB_NAMES, "ELB 이름이 비어 있습니다")

        return cls(
            region=values[ENV_REGION],
            elb_names=elb_names,
            access_key_id=values[ENV_ACCESS_KEY_ID],
            secret_access_key=values[ENV_SECRET_ACCESS_KEY],
            session_token=(env.get(ENV_SESSION_TOKEN) or "").strip() or None,
        )


@dataclass
class LogConfig:
    """로깅 설정

    도구 출력(stdout)과 섞이지 않도록 기본 레벨은 WARNING입니다.
    시각과 레벨은 RichHandler가 표시하므로 기본 포맷은 메시지만 포함합니다.
    """

    level: str = "WARNING"
    format: str = "%(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls, level: str | None = None) -> LogConfig:
        """LOG_LEVEL, LOG_FORMAT 환경변수에서 로드

        Args:
            level: 환경변수보다 우선하는 레벨 (CLI 옵션)

        Raises:
            ConfigurationError: 알 수 없는 로그 레벨
        """
        from core.exceptions import ConfigurationError

        default = cls()
        resolved = (level or os.getenv(ENV_LOG_LEVEL, "")).strip().upper() or default.level
        if resolved not in LOG_LEVELS:
            raise ConfigurationError(
                ENV_LOG_LEVEL,
                f"알 수 없는 로그 레벨 '{resolved}' (허용: {', '.join(LOG_LEVELS)})",
            )

        return cls(
            level=resolved,
            format=os.getenv(ENV_LOG_FORMAT) or default.format,
        )
