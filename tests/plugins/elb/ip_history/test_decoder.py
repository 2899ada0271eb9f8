"""
tests/plugins/elb/ip_history/test_decoder.py - CloudTrail 페이로드 디코더 테스트
"""

import json

import pytest

from conftest import create_eni_payload
from core.exceptions import PayloadDecodeError
from plugins.elb.ip_history_analysis.decoder import decode_payload
from plugins.elb.ip_history_analysis.types import NetworkInterfaceRecord


class TestDecodePayload:
    """decode_payload 정상 케이스"""

    def test_extracts_fields(self):
        payload = create_eni_payload("ELB app/svc-alb/50dc6c495c0c9188", "10.0.1.23")

        record = decode_payload(payload)

        assert record == NetworkInterfaceRecord(
            description="ELB app/svc-alb/50dc6c495c0c9188",
            private_ip_address="10.0.1.23",
        )

    def test_missing_description(self):
        """description이 없으면 빈 문자열"""
        record = decode_payload(create_eni_payload(None, "10.0.1.23"))

        assert record.description == ""
        assert record.private_ip_address == "10.0.1.23"

    def test_missing_private_ip(self):
        """privateIpAddress가 없으면 빈 문자열"""
        record = decode_payload(create_eni_payload("ELB app/svc-alb/1", None))

        assert record.private_ip_address == ""

    def test_null_leaf(self):
        payload = json.dumps({"responseElements": {"networkInterface": {"description": None}}})

        record = decode_payload(payload)

        assert record.description == ""

    def test_bytes_payload(self):
        payload = create_eni_payload("ELB app/svc-alb/1", "10.0.1.5").encode("utf-8")

        assert decode_payload(payload).private_ip_address == "10.0.1.5"


class TestDecodePayloadErrors:
    """구조가 다른 페이로드는 PayloadDecodeError"""

    @pytest.mark.parametrize(
        "payload",
        [
            "not json",
            "{",
            "",
        ],
    )
    def test_invalid_json(self, payload):
        with pytest.raises(PayloadDecodeError, match="JSON 파싱 실패"):
            decode_payload(payload)

    def test_deeply_nested_json(self):
        """과도하게 중첩된 JSON도 PayloadDecodeError"""
        payload = "[" * 100000 + "]" * 100000

        with pytest.raises(PayloadDecodeError, match="JSON 파싱 실패") as exc_info:
            decode_payload(payload, event_id="evt-deep")

        assert isinstance(exc_info.value.cause, RecursionError)

    def test_top_level_not_object(self):
        with pytest.raises(PayloadDecodeError, match="최상위"):
            decode_payload("[1, 2, 3]")

    def test_missing_response_elements(self):
        with pytest.raises(PayloadDecodeError, match="responseElements"):
            decode_payload(json.dumps({"eventName": "CreateNetworkInterface"}))

    def test_null_response_elements(self):
        """실패한 API 호출 (responseElements: null)"""
        payload = json.dumps({"errorCode": "Client.UnauthorizedOperation", "responseElements": None})

        with pytest.raises(PayloadDecodeError, match="responseElements"):
            decode_payload(payload)

    def test_missing_network_interface(self):
        with pytest.raises(PayloadDecodeError, match="networkInterface"):
            decode_payload(json.dumps({"responseElements": {}}))

    def test_non_string_leaf(self):
        payload = json.dumps({"responseElements": {"networkInterface": {"privateIpAddress": 10}}})

        with pytest.raises(PayloadDecodeError, match="privateIpAddress"):
            decode_payload(payload)

    def test_none_payload(self):
        with pytest.raises(PayloadDecodeError):
            decode_payload(None)

    def test_event_id_in_message(self):
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_payload("not json", event_id="evt-123")

        assert exc_info.value.event_id == "evt-123"
        assert "evt-123" in str(exc_info.value)
