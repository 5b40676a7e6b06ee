"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
환경변수에서 설정을 읽어 CLB 인스턴스를 수집하고 JSON으로 출력합니다.

동작:
    1. 설정 검증 (누락 시 원격 호출 없이 즉시 종료)
    2. ELB 조회 → 인스턴스 상세 수집
    3. 전체 결과를 stdout에 한 줄 JSON으로 출력

종료 코드:
    0   전체 수집 및 출력 성공
    1   설정 누락 또는 원격 호출 실패 (stdout 출력 없음)

Usage:
    $ AWS_REGION=us-east-1 AWS_ELB_NAMES=lb1,lb2 elb-instances
    $ elb-instances --log-level info
    $ elb-instances --version
"""

from __future__ import annotations

import click

from cli.ui.console import emit_json, print_error, setup_logging
from core.config import LOG_LEVELS, CollectorConfig, LogConfig, get_version
from core.exceptions import CollectorError


@click.command(name="elb-instances")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="로그 레벨 (기본: LOG_LEVEL 환경변수 또는 WARNING)",
)
@click.version_option(version=get_version(), prog_name="elb-instances")
def cli(log_level: str | None) -> None:
    """Classic ELB와 등록된 EC2 인스턴스 정보를 JSON으로 출력합니다.

    \b
    필수 환경변수:
      AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_REGION, AWS_ELB_NAMES
    """
    from plugins.elb.instances import run

    try:
        setup_logging(LogConfig.from_env(level=log_level))
        config = CollectorConfig.from_env()
        records = run(config)
    except CollectorError as e:
        print_error(str(e))
        raise SystemExit(1) from e

    emit_json(records)


if __name__ == "__main__":
    cli()
