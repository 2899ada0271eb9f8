"""
ALB IP 이력 데이터 구조

모든 객체는 단일 조회 호출 안에서 생성/소멸하며 캐싱하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class RawAuditEvent:
    """CloudTrail 원본 이벤트"""

    event_time: datetime
    payload: str  # CloudTrailEvent (JSON 문자열)
    event_id: str = ""


@dataclass(frozen=True)
class NetworkInterfaceRecord:
    """CreateNetworkInterface 응답에서 추출한 ENI 정보"""

    description: str
    private_ip_address: str


@dataclass(frozen=True)
class IPHistoryEntry:
    """ALB ENI에 Private IP가 할당된 시점"""

    event_time: datetime
    private_ip_address: str

    def to_dict(self) -> dict[str, str]:
        """직렬화용 딕셔너리 (JSON/CSV)"""
        return {
            "event_time": self.event_time.isoformat(),
            "private_ip_address": self.private_ip_address,
        }


@dataclass
class IPHistoryResult:
    """단일 ALB의 IP 이력 조회 결과"""

    load_balancer: str
    region: str
    entries: list[IPHistoryEntry] = field(default_factory=list)
    scanned: int = 0  # 조회된 CreateNetworkInterface 이벤트 수
    truncated: bool = False  # 조회 한도를 넘는 이벤트가 더 있음

    @property
    def unique_ips(self) -> list[str]:
        """등장 순서를 유지한 IP 목록"""
        return list(dict.fromkeys(e.private_ip_address for e in self.entries))


@dataclass(frozen=True)
class AuditEventPage:
    """이벤트 소스 단일 조회 결과"""

    events: list[RawAuditEvent]
    truncated: bool = False  # NextToken 존재 (다음 페이지 미조회)

    @property
    def scanned(self) -> int:
        return len(self.events)
