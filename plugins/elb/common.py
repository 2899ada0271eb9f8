"""
plugins/elb/common.py - ELB 공통 유틸리티

Load Balancer 목록 조회(카탈로그)와 공유 데이터 구조.

boto3 클라이언트:
    - ALB/NLB/GWLB: elbv2 클라이언트
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from botocore.exceptions import BotoCoreError, ClientError

from core.aws import get_client
from core.exceptions import CatalogUnavailableError

logger = logging.getLogger(__name__)


class LBType(Enum):
    """Load Balancer 타입"""

    APPLICATION = "application"
    NETWORK = "network"
    GATEWAY = "gateway"
    OTHER = "other"

    @classmethod
    def from_string(cls, value: str | None) -> LBType:
        """문자열에서 LBType 변환 (알 수 없는 타입은 OTHER)"""
        mapping = {
            "application": cls.APPLICATION,
            "network": cls.NETWORK,
            "gateway": cls.GATEWAY,
        }
        return mapping.get((value or "").lower(), cls.OTHER)

    @property
    def display_name(self) -> str:
        """표시용 이름"""
        return {
            LBType.APPLICATION: "ALB",
            LBType.NETWORK: "NLB",
            LBType.GATEWAY: "GWLB",
        }.get(self, "Other")


@dataclass(frozen=True)
class LoadBalancer:
    """Load Balancer 정보 (조회 결과로만 존재)"""

    name: str
    kind: LBType

    # 표시용 메타 정보
    arn: str = ""
    scheme: str = ""  # internet-facing, internal
    state: str = ""
    vpc_id: str = ""
    created_time: datetime | None = None


class LoadBalancerCatalog:
    """elbv2 DescribeLoadBalancers 기반 Load Balancer 목록 조회

    단일 호출 결과만 사용합니다 (페이지네이션 없음).
    """

    def __init__(self, client):
        self.client = client

    def list(self, kind: LBType | None = None) -> list[LoadBalancer]:
        """Load Balancer 목록 조회

        Args:
            kind: 필터링할 LB 타입 (None이면 전체)

        Returns:
            LoadBalancer 목록 (응답 순서 유지)

        Raises:
            CatalogUnavailableError: API 호출 실패
        """
        try:
            response = self.client.describe_load_balancers()
        except (ClientError, BotoCoreError) as e:
            raise CatalogUnavailableError.from_client_error(
                service="elasticloadbalancing",
                operation="describe_load_balancers",
                client_error=e,
            ) from e

        load_balancers = []
        for data in response.get("LoadBalancers", []):
            lb = _to_load_balancer(data)
            if kind is not None and lb.kind != kind:
                continue
            load_balancers.append(lb)

        logger.debug(f"Load Balancer {len(load_balancers)}개 조회 (filter={kind.value if kind else 'all'})")
        return load_balancers


def _to_load_balancer(data: dict) -> LoadBalancer:
    """DescribeLoadBalancers 응답 항목 변환"""
    return LoadBalancer(
        name=data.get("LoadBalancerName", ""),
        kind=LBType.from_string(data.get("Type")),
        arn=data.get("LoadBalancerArn", ""),
        scheme=data.get("Scheme", ""),
        state=data.get("State", {}).get("Code", ""),
        vpc_id=data.get("VpcId", ""),
        created_time=data.get("CreatedTime"),
    )


def list_load_balancers(
    session,
    region: str | None = None,
    kind: LBType | None = LBType.APPLICATION,
) -> list[LoadBalancer]:
    """세션/리전 기준 Load Balancer 목록 조회

    Args:
        session: boto3 session
        region: 리전 (None이면 세션 기본값)
        kind: 필터링할 LB 타입 (기본: ALB, None이면 전체)
    """
    elbv2 = get_client(session, "elbv2", region_name=region)
    return LoadBalancerCatalog(elbv2).list(kind=kind)
