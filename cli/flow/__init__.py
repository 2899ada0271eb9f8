# cli/flow/__init__.py
"""
CLI Flow Module

구조:
    context.py      - ExecutionContext (CLI 옵션 + 지연 생성 세션)
"""

from .context import ExecutionContext

__all__ = ["ExecutionContext"]
