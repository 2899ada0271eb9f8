"""
CloudTrail 이벤트 소스

LookupEvents를 EventName 필터로 한 번만 호출합니다.
NextToken은 따라가지 않으므로 오래된 ALB는 이력이 일부만 조회될 수 있으며,
이 경우 truncated 플래그와 경고 로그로 알립니다.

LookupEvents: https://docs.aws.amazon.com/awscloudtrail/latest/APIReference/API_LookupEvents.html
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import AuditSourceUnavailableError, is_access_denied, is_throttling

from .types import AuditEventPage, RawAuditEvent

logger = logging.getLogger(__name__)

CREATE_NETWORK_INTERFACE = "CreateNetworkInterface"

# LookupEvents MaxResults 허용 범위
LOOKUP_MAX_RESULTS_LIMIT = 50


class AuditEventSource(Protocol):
    """감사 이벤트 소스 인터페이스"""

    def query(self, event_name: str) -> list[RawAuditEvent]: ...


class CloudTrailEventSource:
    """cloudtrail.lookup_events 기반 이벤트 소스 (단일 페이지)"""

    def __init__(
        self,
        client,
        max_results: int = LOOKUP_MAX_RESULTS_LIMIT,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
    ):
        self.client = client
        self.max_results = min(max(max_results, 1), LOOKUP_MAX_RESULTS_LIMIT)
        self.start_time = start_time
        self.end_time = end_time

    def query(self, event_name: str) -> list[RawAuditEvent]:
        """EventName으로 이벤트 조회 (CloudTrail 응답 순서 유지)"""
        return self.fetch(event_name).events

    def fetch(self, event_name: str) -> AuditEventPage:
        """EventName으로 이벤트 조회 후 페이지 정보와 함께 반환

        조회 결과는 인스턴스에 저장하지 않으므로 같은 소스를
        여러 호출에서 동시에 사용해도 됩니다.

        Args:
            event_name: CloudTrail 이벤트 이름 (예: CreateNetworkInterface)

        Returns:
            AuditEventPage (events는 CloudTrail 응답 순서 그대로)

        Raises:
            AuditSourceUnavailableError: 조회 실패 (재시도 없음)
        """
        params = {
            "LookupAttributes": [{"AttributeKey": "EventName", "AttributeValue": event_name}],
            "MaxResults": self.max_results,
        }
        if self.start_time is not None:
            params["StartTime"] = self.start_time
        if self.end_time is not None:
            params["EndTime"] = self.end_time

        try:
            response = self.client.lookup_events(**params)
        except (ClientError, BotoCoreError) as e:
            error = AuditSourceUnavailableError.from_client_error(
                service="cloudtrail",
                operation="lookup_events",
                client_error=e,
            )
            if is_access_denied(error):
                logger.debug("cloudtrail:LookupEvents 권한 필요")
            elif is_throttling(error):
                logger.debug("LookupEvents는 리전당 초당 2회로 제한됩니다")
            raise error from e

        truncated = bool(response.get("NextToken"))
        if truncated:
            logger.warning(f"{event_name} 이벤트가 {self.max_results}건을 초과합니다. 이력이 일부만 조회됩니다.")

        events = [
            RawAuditEvent(
                event_time=event.get("EventTime"),
                payload=event.get("CloudTrailEvent"),
                event_id=event.get("EventId", ""),
            )
            for event in response.get("Events", [])
        ]
        return AuditEventPage(events=events, truncated=truncated)
