"""
ALB IP History Analysis Package

CloudTrail CreateNetworkInterface 이벤트로 ALB Private IP 이력 재구성:
- Source: CloudTrail LookupEvents (단일 페이지)
- Decoder: CloudTrailEvent 페이로드 → ENI description / Private IP
- Matcher: "ELB app/<name>/" description 매칭
- Correlator: 조회 → 디코딩 → 매칭 → 이력 생성
- Reporter: JSON / CSV / Excel 출력
"""

from .correlator import HistoryCorrelator
from .decoder import decode_payload
from .matcher import NameMatcher, build_description_pattern
from .source import CREATE_NETWORK_INTERFACE, AuditEventSource, CloudTrailEventSource
from .types import AuditEventPage, IPHistoryEntry, IPHistoryResult, NetworkInterfaceRecord, RawAuditEvent

__all__ = [
    "HistoryCorrelator",
    "decode_payload",
    "NameMatcher",
    "build_description_pattern",
    "CREATE_NETWORK_INTERFACE",
    "AuditEventSource",
    "CloudTrailEventSource",
    "AuditEventPage",
    "IPHistoryEntry",
    "IPHistoryResult",
    "NetworkInterfaceRecord",
    "RawAuditEvent",
]
