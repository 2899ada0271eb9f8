"""
cli/flow/context.py - 실행 컨텍스트

CLI 옵션(프로파일, 리전, 출력 형식 등)과 지연 생성되는 boto3 세션을 담습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from core.config import get_default_profile, get_default_region, settings


@dataclass
class ExecutionContext:
    """도구 실행 컨텍스트"""

    profile_name: str | None = field(default_factory=get_default_profile)
    region: str = field(default_factory=get_default_region)

    # IP 이력 조회 옵션
    start_time: datetime | None = None
    end_time: datetime | None = None
    max_results: int = field(default_factory=lambda: settings.LOOKUP_MAX_RESULTS)
    sort: bool = False  # 표시 단계에서 시간순 정렬

    # 출력 옵션
    output_format: str = "console"  # console, json, csv, excel
    output_path: str | None = None

    _session: Any = field(default=None, repr=False)

    @property
    def identifier(self) -> str:
        """출력 경로용 식별자"""
        return self.profile_name or "default"

    def get_session(self):
        """boto3 세션 (최초 호출 시 생성)

        Raises:
            ConfigLoadError: 자격 증명/설정 로드 실패
        """
        if self._session is None:
            from core.aws import create_session

            self._session = create_session(profile=self.profile_name, region=self.region)
        return self._session
