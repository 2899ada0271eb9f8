"""
core/aws - boto3 세션/클라이언트 헬퍼

주요 구성 요소:
- create_session: 자격 증명이 확인된 boto3 Session 생성
- get_client: retry/타임아웃이 설정된 boto3 client 생성
"""

from .client import get_client
from .session import create_session

__all__: list[str] = [
    "create_session",
    "get_client",
]
