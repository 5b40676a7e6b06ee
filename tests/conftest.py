"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_elb_client, mock_ec2_client):
        # mock_elb_client/mock_ec2_client: MagicMock 기반 boto3 client
        pass
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


TEST_REGION = "us-east-1"


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트 환경 설정 (moto용 가짜 자격 증명)"""
    os.environ.setdefault("AWS_DEFAULT_REGION", TEST_REGION)
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

    yield


@pytest.fixture
def collector_env():
    """CollectorConfig.from_env()에 전달할 완전한 환경변수"""
    return {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_REGION": TEST_REGION,
        "AWS_ELB_NAMES": "lb1,lb2",
    }


@pytest.fixture
def collector_config(collector_env):
    """테스트용 CollectorConfig"""
    from core.config import CollectorConfig

    return CollectorConfig.from_env(collector_env)


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


def make_instance(instance_id: str) -> dict:
    """describe_instances 응답의 인스턴스 항목"""
    return {
        "InstanceId": instance_id,
        "InstanceType": "t3.micro",
        "State": {"Name": "running"},
        "Tags": [{"Key": "Name", "Value": f"web-{instance_id}"}],
        "PrivateIpAddress": "10.0.0.1",
    }


def make_load_balancer(name: str, instance_ids: list[str]) -> dict:
    """describe_load_balancers 응답의 LoadBalancerDescription 항목"""
    return {
        "LoadBalancerName": name,
        "DNSName": f"{name}-123456.{TEST_REGION}.elb.amazonaws.com",
        "Instances": [{"InstanceId": i} for i in instance_ids],
    }


@pytest.fixture
def mock_elb_client():
    """ELB 클라이언트 모킹 (lb1: i1,i2 / lb2: i3)"""
    mock_client = MagicMock()

    mock_client.describe_load_balancers.return_value = {
        "LoadBalancerDescriptions": [
            make_load_balancer("lb1", ["i1", "i2"]),
            make_load_balancer("lb2", ["i3"]),
        ]
    }

    yield mock_client


@pytest.fixture
def mock_ec2_client():
    """EC2 클라이언트 모킹 (요청한 인스턴스 ID를 그대로 반환)"""
    mock_client = MagicMock()

    def describe_instances(InstanceIds):
        return {"Reservations": [{"Instances": [make_instance(InstanceIds[0])]}]}

    mock_client.describe_instances.side_effect = describe_instances

    yield mock_client
