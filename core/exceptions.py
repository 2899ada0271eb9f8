"""
core/exceptions.py - 통합 예외 계층 구조

elbcli 전체에서 사용되는 예외 클래스들을 정의합니다.
라이브러리 코드는 예외를 발생시키기만 하고, 프로세스 종료 여부는
호출자(CLI)가 결정합니다.

예외 계층 구조:
    ElbCliError (베이스)
    ├── ConfigLoadError (자격 증명/설정 로드 실패)
    ├── APICallError (AWS API 호출 실패)
    │   ├── AuditSourceUnavailableError (CloudTrail 조회 실패)
    │   └── CatalogUnavailableError (ELB 목록 조회 실패)
    ├── PayloadDecodeError (CloudTrail 이벤트 페이로드 파싱 실패)
    └── UserCancelError (사용자 취소)

Usage:
    from core.exceptions import AuditSourceUnavailableError

    try:
        response = cloudtrail.lookup_events(...)
    except ClientError as e:
        raise AuditSourceUnavailableError.from_client_error(
            service="cloudtrail",
            operation="lookup_events",
            client_error=e,
        ) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class ElbCliError(Exception):
    """elbcli 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigLoadError(ElbCliError):
    """AWS 자격 증명/설정 로드 실패

    프로파일이 없거나 자격 증명을 찾을 수 없는 경우 발생합니다.
    CLI에서는 시작 단계에서 종료하지만, 라이브러리로 사용할 때는
    호출자가 복구 여부를 결정합니다.
    """

    def __init__(
        self,
        message: str,
        profile: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 로드 실패 [{profile or 'default'}]: {message}"
        super().__init__(full_message, cause)
        self.profile = profile
        self.details["profile"] = profile


# =============================================================================
# AWS API 관련 예외
# =============================================================================


class APICallError(ElbCliError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError를 래핑하여 일관된 예외 처리를 제공합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        else:
            message = f"{message} 실패"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        # ClientError 메시지는 이미 message에 포함됨
        return self.message

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ):
        """botocore 예외로부터 생성

        ClientError는 응답의 Code/Message를 사용하고,
        BotoCoreError(연결 실패 등)는 예외 문자열을 메시지로 사용합니다.

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: botocore 예외

        Returns:
            cls 인스턴스
        """
        error_code = None
        error_message = None

        response = getattr(client_error, "response", None)
        if isinstance(response, dict):
            error_info = response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")
        else:
            error_message = str(client_error)

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


class AuditSourceUnavailableError(APICallError):
    """CloudTrail 이벤트 조회 자체가 실패한 경우

    네트워크, 인증, 쓰로틀링, 서비스 장애를 포함합니다.
    재시도하지 않고 호출자에게 그대로 전달됩니다.
    """


class CatalogUnavailableError(APICallError):
    """Load Balancer 목록 조회 실패"""


# =============================================================================
# 이벤트 디코딩 관련 예외
# =============================================================================


class PayloadDecodeError(ElbCliError):
    """CloudTrail 이벤트 페이로드를 예상 구조로 파싱할 수 없는 경우

    손상된 레코드와 매칭되지 않는 레코드를 구분할 수 없으므로
    해당 이력 조회 전체를 중단시킵니다.
    """

    def __init__(
        self,
        reason: str,
        event_id: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        if event_id:
            message = f"이벤트 페이로드 파싱 실패 [{event_id}]: {reason}"
        else:
            message = f"이벤트 페이로드 파싱 실패: {reason}"
        super().__init__(message, cause)
        self.reason = reason
        self.event_id = event_id
        self.details["event_id"] = event_id


# =============================================================================
# UI 플로우 관련 예외
# =============================================================================


class UserCancelError(ElbCliError):
    """사용자가 작업을 취소한 경우"""

    def __init__(self, step_name: str = "unknown"):
        super().__init__(f"사용자가 취소했습니다 [{step_name}]")
        self.step_name = step_name
        self.details["step_name"] = step_name


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


ACCESS_DENIED_CODES = frozenset(
    {"AccessDenied", "AccessDeniedException", "UnauthorizedAccess", "UnauthorizedOperation"}
)
THROTTLING_CODES = frozenset(
    {"Throttling", "ThrottlingException", "RequestLimitExceeded", "TooManyRequestsException", "RateExceeded"}
)


def get_error_code(error: Exception) -> Optional[str]:
    """APICallError 또는 botocore ClientError에서 에러 코드 추출"""
    if isinstance(error, APICallError):
        return error.error_code

    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code")

    return None


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인"""
    return get_error_code(error) in ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인 (CloudTrail LookupEvents는 초당 2회 제한)"""
    return get_error_code(error) in THROTTLING_CODES


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 한 줄 에러 메시지
    """
    friendly_messages = {
        "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
        "AccessDeniedException": "권한이 없습니다. IAM 정책을 확인하세요.",
        "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
        "ExpiredTokenException": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
        "InvalidClientTokenId": "잘못된 자격 증명입니다.",
        "ThrottlingException": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
        "Throttling": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
    }

    if isinstance(error, APICallError):
        if error.error_code in friendly_messages:
            return f"{error.service}.{error.operation}: {friendly_messages[error.error_code]}"
        return str(error)

    if isinstance(error, ElbCliError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))
        return friendly_messages.get(code, f"{code}: {message}")

    return str(error)
