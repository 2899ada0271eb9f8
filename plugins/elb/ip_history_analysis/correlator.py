"""
ALB IP 이력 상관 분석기

CreateNetworkInterface 이벤트를 조회해 각 페이로드를 디코딩하고,
ENI description이 대상 ALB와 일치하는 이벤트만 (시각, Private IP)로 변환합니다.

- 결과 순서는 이벤트 소스의 응답 순서를 그대로 따릅니다 (정렬하지 않음)
- 디코딩 실패는 해당 조회 전체를 중단합니다 (부분 결과 없음)
- 호출 간 공유 상태가 없어 서로 다른 ALB를 동시에 조회해도 안전합니다
"""

from __future__ import annotations

import logging

from core.exceptions import PayloadDecodeError

from .decoder import decode_payload
from .matcher import NameMatcher
from .source import CREATE_NETWORK_INTERFACE, AuditEventSource
from .types import IPHistoryEntry, RawAuditEvent

logger = logging.getLogger(__name__)


class HistoryCorrelator:
    """ALB Private IP 이력 조회"""

    def __init__(self, source: AuditEventSource):
        self.source = source

    def find_history(self, load_balancer_name: str) -> list[IPHistoryEntry]:
        """ALB 이름으로 IP 할당 이력 조회

        ALB가 실제로 존재하는지는 확인하지 않습니다.

        Args:
            load_balancer_name: ALB 이름

        Returns:
            IPHistoryEntry 목록 (매칭 이벤트가 없으면 빈 목록)

        Raises:
            ValueError: 이름이 비어 있는 경우
            AuditSourceUnavailableError: 이벤트 조회 실패
            PayloadDecodeError: 이벤트 페이로드 파싱 실패
        """
        matcher = NameMatcher(load_balancer_name)
        events = self.source.query(CREATE_NETWORK_INTERFACE)
        return self.correlate(events, matcher)

    def correlate(self, events: list[RawAuditEvent], matcher: NameMatcher) -> list[IPHistoryEntry]:
        """조회된 이벤트를 디코딩해 matcher와 일치하는 이력만 반환

        Raises:
            PayloadDecodeError: 이벤트 페이로드 파싱 실패 (부분 결과 없음)
        """
        load_balancer_name = matcher.load_balancer_name
        entries: list[IPHistoryEntry] = []
        for event in events:
            if event.event_time is None:
                raise PayloadDecodeError("EventTime 없음", event_id=event.event_id or None)

            record = decode_payload(event.payload, event_id=event.event_id or None)
            if not matcher.matches(record.description):
                continue

            logger.debug(f"매칭 [{load_balancer_name}] {event.event_time} {record.private_ip_address}")
            entries.append(
                IPHistoryEntry(
                    event_time=event.event_time,
                    private_ip_address=record.private_ip_address,
                )
            )

        logger.info(f"IP 이력 조회 [{load_balancer_name}]: 이벤트 {len(events)}건 중 {len(entries)}건 매칭")
        return entries
