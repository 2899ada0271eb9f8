"""
CloudTrail CreateNetworkInterface 페이로드 디코더

페이로드 구조:
    {
        "responseElements": {
            "networkInterface": {
                "description": "ELB app/my-alb/50dc6c495c0c9188",
                "privateIpAddress": "10.0.1.23",
                ...
            }
        },
        ...
    }

리프 필드(description, privateIpAddress)가 없으면 빈 문자열로 처리하고,
구조 자체가 다르면 PayloadDecodeError를 발생시킵니다.
"""

from __future__ import annotations

import json

from core.exceptions import PayloadDecodeError

from .types import NetworkInterfaceRecord


def decode_payload(payload: str, event_id: str | None = None) -> NetworkInterfaceRecord:
    """CloudTrailEvent JSON을 NetworkInterfaceRecord로 변환

    Args:
        payload: CloudTrailEvent JSON 문자열
        event_id: 오류 메시지에 표시할 이벤트 ID

    Returns:
        NetworkInterfaceRecord

    Raises:
        PayloadDecodeError: JSON이 아니거나 예상 구조가 아닌 경우
    """
    if not isinstance(payload, (str, bytes, bytearray)):
        raise PayloadDecodeError(f"문자열이 아닌 페이로드 ({type(payload).__name__})", event_id=event_id)

    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as e:
        # RecursionError: 과도하게 중첩된 JSON
        raise PayloadDecodeError("JSON 파싱 실패", event_id=event_id, cause=e) from e

    if not isinstance(data, dict):
        raise PayloadDecodeError("최상위가 JSON 객체가 아님", event_id=event_id)

    # 실패한 API 호출은 responseElements가 null
    response_elements = data.get("responseElements")
    if not isinstance(response_elements, dict):
        raise PayloadDecodeError("responseElements 객체 없음", event_id=event_id)

    network_interface = response_elements.get("networkInterface")
    if not isinstance(network_interface, dict):
        raise PayloadDecodeError("responseElements.networkInterface 객체 없음", event_id=event_id)

    return NetworkInterfaceRecord(
        description=_get_str(network_interface, "description", event_id),
        private_ip_address=_get_str(network_interface, "privateIpAddress", event_id),
    )


def _get_str(obj: dict, key: str, event_id: str | None) -> str:
    """문자열 리프 필드 추출 (없거나 null이면 빈 문자열)"""
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadDecodeError(f"{key} 필드가 문자열이 아님 ({type(value).__name__})", event_id=event_id)
    return value
