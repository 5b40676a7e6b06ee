"""
core/parallel - 병렬 처리 모듈

ELB별 인스턴스 조회를 동시에 실행하기 위한 fan-out 구성 요소입니다.

주요 구성 요소:
- fan_out: 항목별 동시 실행 후 전체 완료 대기 (첫 실패 시 중단)
- get_client / get_session: 재시도 없는 boto3 client 생성

Example:
    from core.parallel import fan_out, get_client, get_session

    session = get_session(config)
    ec2 = get_client(session, "ec2", region_name=config.region)

    def describe(instance_id):
        return ec2.describe_instances(InstanceIds=[instance_id])

    responses = fan_out(describe, ["i-1", "i-2"], service="ec2")
"""

from .client import get_client, get_session
from .executor import FanOutExecutor, ParallelConfig, fan_out

__all__: list[str] = [
    # Client
    "get_client",
    "get_session",
    # Executor
    "FanOutExecutor",
    "ParallelConfig",
    "fan_out",
]
