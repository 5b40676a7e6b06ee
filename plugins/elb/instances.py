"""
plugins/elb/instances.py - CLB 인스턴스 상세 수집

설정된 Classic ELB 목록을 조회하고, 각 ELB에 등록된 EC2 인스턴스의
상세 정보를 붙여 반환합니다.

파이프라인:
    1. fetch_load_balancers: elb.describe_load_balancers (1회 호출)
    2. enrich_instances: ELB는 순차 처리, ELB 내부 인스턴스는 동시 조회
    3. 결과 리스트 반환 (출력은 cli.ui.console.emit_json)

모든 실패는 RemoteQueryError로 즉시 전파되며 부분 결과는 없습니다.

플러그인 규약:
    - run(config): 필수. 실행 함수.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import RemoteQueryError
from core.parallel import fan_out, get_client, get_session

if TYPE_CHECKING:
    from core.config import CollectorConfig

logger = logging.getLogger(__name__)

PARSED_INSTANCES_KEY = "ParsedInstances"


@dataclass
class LoadBalancerRecord:
    """ELB 레코드

    Attributes:
        name: LoadBalancerName
        descriptor: describe_load_balancers 원본 응답 항목
        instances: 등록된 인스턴스 참조 ({"InstanceId": ...})
        parsed_instances: 조회된 인스턴스 상세 (완료 순서)
    """

    name: str
    descriptor: dict[str, Any]
    instances: list[dict[str, Any]] = field(default_factory=list)
    parsed_instances: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_descriptor(cls, descriptor: dict[str, Any]) -> LoadBalancerRecord:
        """LoadBalancerDescription 항목에서 생성"""
        return cls(
            name=descriptor.get("LoadBalancerName", ""),
            descriptor=descriptor,
            instances=list(descriptor.get("Instances", [])),
        )

    @property
    def instance_ids(self) -> list[str]:
        return [ref["InstanceId"] for ref in self.instances]

    def to_dict(self) -> dict[str, Any]:
        """출력용 딕셔너리 (원본 필드 + ParsedInstances)"""
        data = dict(self.descriptor)
        data[PARSED_INSTANCES_KEY] = list(self.parsed_instances)
        return data


class ElbInstanceCollector:
    """CLB 인스턴스 수집기

    elb/ec2 client는 스레드 간 공유됩니다.

    Example:
        collector = ElbInstanceCollector(elb_client, ec2_client, config.elb_names)
        records = collector.collect()
    """

    def __init__(self, elb_client: Any, ec2_client: Any, elb_names: tuple[str, ...] | list[str]):
        self.elb = elb_client
        self.ec2 = ec2_client
        self.elb_names = list(elb_names)

    def collect(self) -> list[LoadBalancerRecord]:
        """설정된 ELB 조회 후 인스턴스 상세를 채워서 반환"""
        records = self.fetch_load_balancers(self.elb_names)
        return self.enrich_instances(records)

    def fetch_load_balancers(self, names: list[str]) -> list[LoadBalancerRecord]:
        """ELB 목록 조회

        Args:
            names: ELB 이름 목록 (비어 있으면 안 됨)

        Returns:
            서비스 응답 순서의 LoadBalancerRecord 리스트

        Raises:
            RemoteQueryError: 조회 실패 (이름 목록과 원인 포함)
        """
        if not names:
            raise ValueError("names must not be empty")

        target = ",".join(names)
        try:
            response = self.elb.describe_load_balancers(LoadBalancerNames=list(names))
        except (ClientError, BotoCoreError) as e:
            raise RemoteQueryError.from_client_error("elb", "describe_load_balancers", target, e) from e

        records = [LoadBalancerRecord.from_descriptor(d) for d in response.get("LoadBalancerDescriptions", [])]
        logger.info(f"ELB 조회 완료: {len(records)}개 [{target}]")
        return records

    def enrich_instances(self, records: list[LoadBalancerRecord]) -> list[LoadBalancerRecord]:
        """각 ELB에 인스턴스 상세 추가

        ELB는 한 번에 하나씩 처리하고, ELB 내부의 인스턴스는 동시에 조회합니다.
        인스턴스 하나라도 실패하면 전체가 실패합니다.

        Args:
            records: fetch_load_balancers 결과

        Returns:
            parsed_instances가 채워진 동일 리스트
        """
        for record in records:
            instance_ids = record.instance_ids
            if not instance_ids:
                logger.info(f"[{record.name}] 등록된 인스턴스 없음")
                continue

            logger.info(f"[{record.name}] 인스턴스 {len(instance_ids)}개 조회")
            record.parsed_instances.extend(fan_out(self.fetch_instance, instance_ids, service="ec2"))

        return records

    def fetch_instance(self, instance_id: str) -> dict[str, Any]:
        """단일 인스턴스 상세 조회

        Raises:
            RemoteQueryError: 조회 실패 또는 응답에 인스턴스 없음
        """
        try:
            response = self.ec2.describe_instances(InstanceIds=[instance_id])
        except (ClientError, BotoCoreError) as e:
            raise RemoteQueryError.from_client_error("ec2", "describe_instances", instance_id, e) from e

        reservations = response.get("Reservations", [])
        if not reservations or not reservations[0].get("Instances"):
            raise RemoteQueryError(
                service="ec2",
                operation="describe_instances",
                target=instance_id,
                error_message="instance not found",
            )

        logger.debug(f"인스턴스 조회: {instance_id}")
        return reservations[0]["Instances"][0]


def run(config: CollectorConfig) -> list[LoadBalancerRecord]:
    """CLB 인스턴스 수집 실행

    Args:
        config: 검증된 수집기 설정

    Returns:
        인스턴스 상세가 채워진 LoadBalancerRecord 리스트
    """
    session = get_session(config)
    elb = get_client(session, "elb", region_name=config.region)
    ec2 = get_client(session, "ec2", region_name=config.region)

    return ElbInstanceCollector(elb, ec2, config.elb_names).collect()
