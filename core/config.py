"""
core/config.py - 애플리케이션 설정

환경변수 기반 설정과 버전 정보를 제공합니다.

환경변수:
    AWS_PROFILE / AWS_DEFAULT_PROFILE: 기본 프로파일
    AWS_REGION / AWS_DEFAULT_REGION: 기본 리전
    ELBCLI_MAX_ATTEMPTS: AWS API 최대 시도 횟수 (기본: 1, 재시도 없음)
    ELBCLI_LOOKUP_MAX_RESULTS: CloudTrail 조회 건수 (기본: 50, 최대 50)
    ELBCLI_OUTPUT_DIR: 보고서 출력 디렉토리 (기본: output)
    LOG_LEVEL / LOG_FORMAT: 로깅 설정

Usage:
    from core.config import settings, get_default_region

    region = get_default_region()
    max_attempts = settings.API_MAX_ATTEMPTS
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def get_env_int(name: str, default: int) -> int:
    """환경변수를 int로 변환 (변환 실패 시 기본값)"""
    value = os.environ.get(name)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """전역 설정 (불변)"""

    DEFAULT_REGION: str = "ap-northeast-2"

    # AWS API
    API_CONNECT_TIMEOUT: int = 10  # 초
    API_READ_TIMEOUT: int = 30  # 초
    # 재시도 정책은 호출자 소유 - 기본값은 재시도 없음
    API_MAX_ATTEMPTS: int = field(default_factory=lambda: max(1, get_env_int("ELBCLI_MAX_ATTEMPTS", 1)))

    # CloudTrail LookupEvents는 한 페이지에 최대 50건
    LOOKUP_MAX_RESULTS: int = field(default_factory=lambda: get_env_int("ELBCLI_LOOKUP_MAX_RESULTS", 50))

    OUTPUT_DIR: str = field(default_factory=lambda: os.environ.get("ELBCLI_OUTPUT_DIR", "output"))


settings = Settings()


@dataclass
class LogConfig:
    """로깅 설정"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> "LogConfig":
        """환경변수(LOG_LEVEL, LOG_FORMAT)에서 로드"""
        defaults = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", defaults.level).upper(),
            format=os.environ.get("LOG_FORMAT", defaults.format),
        )


def get_default_profile() -> str | None:
    """AWS_PROFILE → AWS_DEFAULT_PROFILE 순서로 기본 프로파일 조회"""
    return os.environ.get("AWS_PROFILE") or os.environ.get("AWS_DEFAULT_PROFILE") or None


def get_default_region() -> str:
    """AWS_REGION → AWS_DEFAULT_REGION → settings.DEFAULT_REGION"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.DEFAULT_REGION


def get_project_root() -> Path:
    """프로젝트 루트 경로"""
    return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_version() -> str:
    """version.txt에서 버전 문자열 읽기"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"
