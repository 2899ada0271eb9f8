"""
core/output.py - 보고서 출력 경로 빌더

identifier + service + tool + date 패턴의 출력 디렉토리를 생성합니다.

Usage:
    from core.output import OutputPath

    output_dir = OutputPath("dev").sub("elb", "ip_history").with_date().build()
    # output/dev/elb/ip_history/2024-01-15
"""

from __future__ import annotations

import os
from datetime import datetime

from core.config import settings


class OutputPath:
    """출력 경로 빌더 (체이닝)"""

    def __init__(self, identifier: str, base_dir: str | None = None):
        self._base_dir = base_dir or settings.OUTPUT_DIR
        self._parts: list[str] = [_sanitize(identifier or "default")]

    def sub(self, *parts: str) -> OutputPath:
        """하위 경로 추가"""
        self._parts.extend(_sanitize(p) for p in parts if p)
        return self

    def with_date(self, fmt: str = "%Y-%m-%d") -> OutputPath:
        """날짜 디렉토리 추가"""
        self._parts.append(datetime.now().strftime(fmt))
        return self

    def build(self) -> str:
        """디렉토리를 생성하고 경로 반환"""
        path = os.path.join(self._base_dir, *self._parts)
        os.makedirs(path, exist_ok=True)
        return path


def _sanitize(part: str) -> str:
    """경로 구분자 제거"""
    return part.replace("/", "_").replace("\\", "_").strip() or "_"
