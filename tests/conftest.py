"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_boto3_session, make_cloudtrail_event):
        # mock_boto3_session: boto3.Session 모킹
        # make_cloudtrail_event: LookupEvents 응답 항목 생성
        pass
"""

import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import MagicMock, patch

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트 환경 설정"""
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-2")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

    yield


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_boto3_session():
    """boto3.Session 모킹"""
    with patch("boto3.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        mock_session.client.return_value = MagicMock()
        mock_session.region_name = "ap-northeast-2"

        yield mock_session


@pytest.fixture
def mock_cloudtrail_client():
    """CloudTrail 클라이언트 모킹 (이벤트 없음)"""
    mock_client = MagicMock()
    mock_client.lookup_events.return_value = {"Events": []}
    yield mock_client


@pytest.fixture
def mock_elbv2_client():
    """ELBv2 클라이언트 모킹"""
    mock_client = MagicMock()

    mock_client.describe_load_balancers.return_value = {
        "LoadBalancers": [
            {
                "LoadBalancerName": "svc-alb",
                "LoadBalancerArn": "arn:aws:elasticloadbalancing:ap-northeast-2:123456789012:loadbalancer/app/svc-alb/50dc6c495c0c9188",
                "Type": "application",
                "Scheme": "internet-facing",
                "State": {"Code": "active"},
                "VpcId": "vpc-12345678",
            },
            {
                "LoadBalancerName": "svc-nlb",
                "LoadBalancerArn": "arn:aws:elasticloadbalancing:ap-northeast-2:123456789012:loadbalancer/net/svc-nlb/73e2d6bc24d8a067",
                "Type": "network",
                "Scheme": "internal",
                "State": {"Code": "active"},
                "VpcId": "vpc-12345678",
            },
            {
                "LoadBalancerName": "admin-alb",
                "LoadBalancerArn": "arn:aws:elasticloadbalancing:ap-northeast-2:123456789012:loadbalancer/app/admin-alb/2b8c1a0d4e5f6789",
                "Type": "application",
                "Scheme": "internal",
                "State": {"Code": "provisioning"},
                "VpcId": "vpc-12345678",
            },
        ]
    }

    yield mock_client


# =============================================================================
# 유틸리티 함수
# =============================================================================


def utc(*args) -> datetime:
    """UTC datetime 생성 헬퍼"""
    return datetime(*args, tzinfo=timezone.utc)


def create_eni_payload(description: Optional[str], private_ip: Optional[str]) -> str:
    """CreateNetworkInterface CloudTrailEvent JSON 생성 헬퍼

    None인 필드는 페이로드에서 생략합니다.
    """
    network_interface: Dict[str, Any] = {
        "networkInterfaceId": "eni-0123456789abcdef0",
        "subnetId": "subnet-12345678",
        "vpcId": "vpc-12345678",
        "status": "pending",
    }
    if description is not None:
        network_interface["description"] = description
    if private_ip is not None:
        network_interface["privateIpAddress"] = private_ip

    return json.dumps(
        {
            "eventVersion": "1.08",
            "eventSource": "ec2.amazonaws.com",
            "eventName": "CreateNetworkInterface",
            "awsRegion": "ap-northeast-2",
            "requestParameters": {"subnetId": "subnet-12345678"},
            "responseElements": {"networkInterface": network_interface},
        }
    )


def create_lookup_event(
    event_time: datetime,
    description: Optional[str],
    private_ip: Optional[str],
    event_id: str = "",
) -> Dict[str, Any]:
    """LookupEvents 응답의 Events 항목 생성 헬퍼"""
    return {
        "EventId": event_id,
        "EventName": "CreateNetworkInterface",
        "EventTime": event_time,
        "EventSource": "ec2.amazonaws.com",
        "CloudTrailEvent": create_eni_payload(description, private_ip),
    }


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def aws_credentials():
        """moto 사용 시 AWS 자격 증명 설정"""
        os.environ["AWS_ACCESS_KEY_ID"] = "testing"
        os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
        os.environ["AWS_SECURITY_TOKEN"] = "testing"
        os.environ["AWS_SESSION_TOKEN"] = "testing"
        os.environ["AWS_DEFAULT_REGION"] = "ap-northeast-2"

    @pytest.fixture
    def moto_elbv2(aws_credentials):
        """moto를 사용한 ELBv2 모킹 (VPC/서브넷 2개 포함)"""
        with moto.mock_aws():
            import boto3

            ec2 = boto3.client("ec2", region_name="ap-northeast-2")
            vpc_id = ec2.create_vpc(CidrBlock="10.0.0.0/16")["Vpc"]["VpcId"]
            subnet_ids = [
                ec2.create_subnet(VpcId=vpc_id, CidrBlock=cidr, AvailabilityZone=az)["Subnet"]["SubnetId"]
                for cidr, az in (("10.0.1.0/24", "ap-northeast-2a"), ("10.0.2.0/24", "ap-northeast-2c"))
            ]

            elbv2 = boto3.client("elbv2", region_name="ap-northeast-2")
            yield elbv2, subnet_ids

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_elbv2():
        pytest.skip("moto not installed")
