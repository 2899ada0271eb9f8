# core/__init__.py
"""
core - elbcli 공통 인프라

아키텍처:
    core/
    ├── aws/            # boto3 세션/클라이언트 생성
    ├── config.py       # 중앙 설정 관리
    ├── exceptions.py   # 통합 예외 계층
    └── output.py       # 보고서 출력 경로

Usage:
    from core.config import settings, get_default_region
    from core.exceptions import ConfigLoadError, format_error_for_user
"""
