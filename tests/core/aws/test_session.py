"""
tests/core/aws/test_session.py - core/aws/session.py 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ProfileNotFound, SSOTokenLoadError

from core.aws.session import create_session
from core.exceptions import ConfigLoadError


class TestCreateSession:
    """create_session 테스트"""

    def test_success(self, mock_boto3_session):
        """자격 증명이 있으면 세션 반환"""
        mock_boto3_session.get_credentials.return_value = MagicMock()

        session = create_session(profile="dev", region="us-east-1")

        assert session is mock_boto3_session

    def test_passes_profile_and_region(self):
        with patch("core.aws.session.boto3.Session") as mock_session_class:
            mock_session_class.return_value.get_credentials.return_value = MagicMock()

            create_session(profile="dev", region="us-east-1")

            mock_session_class.assert_called_once_with(profile_name="dev", region_name="us-east-1")

    def test_profile_not_found(self):
        """없는 프로파일 → ConfigLoadError"""
        with patch("core.aws.session.boto3.Session", side_effect=ProfileNotFound(profile="missing")):
            with pytest.raises(ConfigLoadError) as exc_info:
                create_session(profile="missing")

        assert exc_info.value.profile == "missing"
        assert isinstance(exc_info.value.cause, ProfileNotFound)

    def test_no_credentials(self, mock_boto3_session):
        """자격 증명 체인에서 아무것도 찾지 못한 경우"""
        mock_boto3_session.get_credentials.return_value = None

        with pytest.raises(ConfigLoadError, match="자격 증명을 찾을 수 없습니다"):
            create_session(profile="dev")

    def test_credential_load_failure(self, mock_boto3_session):
        """SSO 토큰 만료 등 자격 증명 로드 오류"""
        mock_boto3_session.get_credentials.side_effect = SSOTokenLoadError(error_msg="token expired")

        with pytest.raises(ConfigLoadError, match="자격 증명 로드 실패"):
            create_session(profile="sso-dev")
