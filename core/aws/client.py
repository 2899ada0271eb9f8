"""
core/aws/client.py - boto3 client 생성 헬퍼

Retry + 타임아웃이 설정된 boto3 client를 생성합니다.
재시도 횟수는 호출자가 정하며, 기본값은 settings.API_MAX_ATTEMPTS
(기본 1회 = 재시도 없음)입니다.

Example:
    from core.aws.client import get_client

    cloudtrail = get_client(session, "cloudtrail", region_name="ap-northeast-2")

    # 재시도 허용
    elbv2 = get_client(session, "elbv2", max_attempts=5)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

from core.config import settings

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_RETRY_MODE: RetryMode = "standard"


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int | None = None,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int | None = None,
    read_timeout: int | None = None,
    **kwargs: Any,
) -> Any:
    """Retry/타임아웃이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (cloudtrail, elbv2 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (None이면 settings.API_MAX_ATTEMPTS)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={  # pyright: ignore[reportArgumentType]
            "max_attempts": max_attempts if max_attempts is not None else settings.API_MAX_ATTEMPTS,
            "mode": retry_mode,
        },
        connect_timeout=connect_timeout if connect_timeout is not None else settings.API_CONNECT_TIMEOUT,
        read_timeout=read_timeout if read_timeout is not None else settings.API_READ_TIMEOUT,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # boto3-stubs는 Literal 서비스명을 요구하므로 Any로 캐스팅
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
