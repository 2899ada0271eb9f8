"""
core/aws/session.py - boto3 세션 생성

~/.aws/config, ~/.aws/credentials, 환경변수 기반 자격 증명을 로드합니다.
로드 실패는 ConfigLoadError로 변환되어 호출자에게 전달됩니다.
프로세스 종료 여부는 호출자가 결정합니다.

Example:
    from core.aws.session import create_session

    try:
        session = create_session(profile="dev", region="ap-northeast-2")
    except ConfigLoadError as e:
        print_error(str(e))
"""

from __future__ import annotations

import logging

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound

from core.config import get_default_profile, get_default_region
from core.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)


def create_session(profile: str | None = None, region: str | None = None) -> boto3.Session:
    """자격 증명이 확인된 boto3 Session 생성

    Args:
        profile: AWS 프로파일 이름 (None이면 AWS_PROFILE 또는 기본 체인)
        region: 리전 (None이면 AWS_REGION 또는 settings.DEFAULT_REGION)

    Returns:
        boto3.Session

    Raises:
        ConfigLoadError: 프로파일이 없거나 자격 증명을 찾을 수 없는 경우
    """
    profile = profile or get_default_profile()
    region = region or get_default_region()

    try:
        session = boto3.Session(profile_name=profile, region_name=region)
    except ProfileNotFound as e:
        raise ConfigLoadError("프로파일을 찾을 수 없습니다", profile=profile, cause=e) from e

    try:
        credentials = session.get_credentials()
    except BotoCoreError as e:
        # SSO 토큰 만료, credential_process 실패 등
        raise ConfigLoadError("자격 증명 로드 실패", profile=profile, cause=e) from e

    if credentials is None:
        raise ConfigLoadError("자격 증명을 찾을 수 없습니다", profile=profile)

    logger.debug(f"세션 생성 완료 [{profile or 'default'}/{region}]")
    return session
