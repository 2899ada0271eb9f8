"""
tests/core/test_exceptions.py - core/exceptions.py 테스트
"""

from botocore.exceptions import EndpointConnectionError

from conftest import create_mock_client_error
from core.exceptions import (
    APICallError,
    AuditSourceUnavailableError,
    CatalogUnavailableError,
    ConfigLoadError,
    ElbCliError,
    PayloadDecodeError,
    UserCancelError,
    format_error_for_user,
    is_access_denied,
    is_throttling,
)


class TestElbCliError:
    """베이스 예외 테스트"""

    def test_message_only(self):
        error = ElbCliError("실패")
        assert str(error) == "실패"
        assert error.details == {}

    def test_with_cause(self):
        error = ElbCliError("저장 실패", cause=OSError("disk full"))
        assert str(error) == "저장 실패: disk full"

    def test_to_dict(self):
        error = ElbCliError("실패", details={"key": "value"})
        data = error.to_dict()

        assert data["error_type"] == "ElbCliError"
        assert data["message"] == "실패"
        assert data["cause"] is None
        assert data["details"] == {"key": "value"}

    def test_hierarchy(self):
        """모든 커스텀 예외는 ElbCliError 하위"""
        assert issubclass(ConfigLoadError, ElbCliError)
        assert issubclass(AuditSourceUnavailableError, APICallError)
        assert issubclass(CatalogUnavailableError, APICallError)
        assert issubclass(PayloadDecodeError, ElbCliError)
        assert issubclass(UserCancelError, ElbCliError)


class TestConfigLoadError:
    """ConfigLoadError 테스트"""

    def test_message_with_profile(self):
        error = ConfigLoadError("프로파일을 찾을 수 없습니다", profile="dev")
        assert "[dev]" in str(error)
        assert error.profile == "dev"
        assert error.details["profile"] == "dev"

    def test_message_default_profile(self):
        error = ConfigLoadError("자격 증명을 찾을 수 없습니다")
        assert "[default]" in str(error)


class TestAPICallError:
    """APICallError 테스트"""

    def test_from_client_error(self):
        client_error = create_mock_client_error("AccessDeniedException", "not authorized")
        error = AuditSourceUnavailableError.from_client_error("cloudtrail", "lookup_events", client_error)

        assert isinstance(error, AuditSourceUnavailableError)
        assert error.error_code == "AccessDeniedException"
        assert error.error_message == "not authorized"
        assert error.cause is client_error
        assert str(error) == "cloudtrail.lookup_events 실패 (AccessDeniedException): not authorized"

    def test_from_botocore_error(self):
        """연결 실패 등 응답 없는 오류"""
        boto_error = EndpointConnectionError(endpoint_url="https://cloudtrail.ap-northeast-2.amazonaws.com")
        error = AuditSourceUnavailableError.from_client_error("cloudtrail", "lookup_events", boto_error)

        assert error.error_code is None
        assert "cloudtrail.ap-northeast-2.amazonaws.com" in str(error)

    def test_message_without_code(self):
        error = APICallError("elbv2", "describe_load_balancers")
        assert str(error) == "elbv2.describe_load_balancers 실패"


class TestPayloadDecodeError:
    """PayloadDecodeError 테스트"""

    def test_with_event_id(self):
        error = PayloadDecodeError("JSON 파싱 실패", event_id="evt-1")
        assert "[evt-1]" in str(error)
        assert error.reason == "JSON 파싱 실패"

    def test_without_event_id(self):
        error = PayloadDecodeError("JSON 파싱 실패")
        assert str(error) == "이벤트 페이로드 파싱 실패: JSON 파싱 실패"


class TestErrorHelpers:
    """예외 유틸리티 함수 테스트"""

    def test_is_access_denied(self):
        assert is_access_denied(create_mock_client_error("AccessDenied")) is True
        assert is_access_denied(APICallError("cloudtrail", "lookup_events", error_code="AccessDeniedException"))
        assert is_access_denied(create_mock_client_error("ThrottlingException")) is False
        assert is_access_denied(ValueError("x")) is False

    def test_is_throttling(self):
        assert is_throttling(APICallError("cloudtrail", "lookup_events", error_code="ThrottlingException"))
        assert is_throttling(create_mock_client_error("AccessDenied")) is False

    def test_format_friendly_message(self):
        error = APICallError("cloudtrail", "lookup_events", error_code="AccessDeniedException")
        assert format_error_for_user(error) == "cloudtrail.lookup_events: 권한이 없습니다. IAM 정책을 확인하세요."

    def test_format_custom_error(self):
        error = PayloadDecodeError("JSON 파싱 실패", event_id="evt-1")
        assert format_error_for_user(error) == str(error)

    def test_format_raw_client_error(self):
        message = format_error_for_user(create_mock_client_error("SomethingElse", "boom"))
        assert message == "SomethingElse: boom"
