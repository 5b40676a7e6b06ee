"""
cli/ui/console.py - Rich 콘솔 유틸리티

stdout은 JSON 결과 전용이므로, 로그와 에러 메시지는 모두 stderr 콘솔로 출력합니다.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from core.config import LogConfig

# botocore 노이즈 로그 제한
NOISY_LOGGERS = (
    "botocore",
    "botocore.httpchecksum",
    "botocore.credentials",
    "botocore.loaders",
    "botocore.session",
    "urllib3",
)

SYMBOL_ERROR = "✗"  # 에러


def get_console() -> Console:
    """stderr용 Rich Console 인스턴스를 생성하고 반환합니다."""
    return Console(stderr=True, highlight=False, soft_wrap=True)


# 전역 콘솔 인스턴스 (stderr)
console = get_console()


def setup_logging(config: LogConfig | None = None) -> None:
    """루트 logger에 Rich 핸들러 설정

    Args:
        config: 로깅 설정 (None이면 환경변수에서 로드)
    """
    config = config or LogConfig.from_env()

    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))

    logging.basicConfig(level=config.level, handlers=[handler], force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X, stderr)

    Args:
        message: 출력할 메시지
    """
    console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]", markup=True)


def emit_json(data: list[Any], stream: IO[str] | None = None) -> None:
    """수집 결과를 한 줄 JSON으로 출력

    모든 수집이 끝난 뒤 한 번만 호출합니다. to_dict()가 있는 항목은 변환 후 직렬화하며,
    datetime 등 JSON 비호환 값은 str()로 변환합니다.

    Args:
        data: 출력할 레코드 리스트
        stream: 출력 스트림 (None이면 sys.stdout)
    """
    stream = stream or sys.stdout
    payload = [item.to_dict() if hasattr(item, "to_dict") else item for item in data]
    stream.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
    stream.flush()
