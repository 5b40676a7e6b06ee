"""
tests/core/test_core_config.py - core/config.py 테스트
"""

import os
from unittest.mock import patch

import pytest

from core.config import (
    REQUIRED_ENV_VARS,
    CollectorConfig,
    LogConfig,
    get_version,
    parse_name_list,
)
from core.exceptions import ConfigurationError


class TestParseNameList:
    """parse_name_list 테스트"""

    def test_basic(self):
        """쉼표 구분"""
        assert parse_name_list("lb1,lb2") == ("lb1", "lb2")

    def test_strips_whitespace_and_empty(self):
        """공백 제거, 빈 항목 무시"""
        assert parse_name_list(" lb1 , ,lb2,,") == ("lb1", "lb2")

    def test_empty(self):
        """빈 값"""
        assert parse_name_list("") == ()
        assert parse_name_list(None) == ()


class TestCollectorConfig:
    """CollectorConfig 테스트"""

    def test_from_env(self, collector_env):
        """전체 환경변수 로드"""
        config = CollectorConfig.from_env(collector_env)

        assert config.region == "us-east-1"
        assert config.elb_names == ("lb1", "lb2")
        assert config.access_key_id == "testing"
        assert config.secret_access_key == "testing"
        assert config.session_token is None

    def test_session_token_optional(self, collector_env):
        """AWS_SESSION_TOKEN 선택 로드"""
        collector_env["AWS_SESSION_TOKEN"] = "token"
        config = CollectorConfig.from_env(collector_env)
        assert config.session_token == "token"

    def test_is_frozen(self, collector_config):
        """설정이 불변인지 확인"""
        with pytest.raises(Exception):  # FrozenInstanceError
            collector_config.region = "eu-west-1"

    def test_repr_hides_secret(self, collector_env):
        """repr에 secret 미노출"""
        collector_env["AWS_SECRET_ACCESS_KEY"] = "super-secret-value"
        config = CollectorConfig.from_env(collector_env)
        assert "super-secret-value" not in repr(config)

    @pytest.mark.parametrize("missing", REQUIRED_ENV_VARS)
    def test_missing_variable(self, collector_env, missing):
        """필수 환경변수 누락 시 해당 이름 포함 에러"""
        del collector_env[missing]

        with pytest.raises(ConfigurationError) as exc_info:
            CollectorConfig.from_env(collector_env)

        assert exc_info.value.variable == missing
        assert missing in str(exc_info.value)

    @pytest.mark.parametrize("missing", REQUIRED_ENV_VARS)
    def test_blank_variable(self, collector_env, missing):
        """공백만 있는 값도 누락으로 처리"""
        collector_env[missing] = "   "

        with pytest.raises(ConfigurationError) as exc_info:
            CollectorConfig.from_env(collector_env)

        assert exc_info.value.variable == missing

    def test_names_only_commas(self, collector_env):
        """쉼표만 있는 ELB 목록"""
        collector_env["AWS_ELB_NAMES"] = ",,"

        with pytest.raises(ConfigurationError) as exc_info:
            CollectorConfig.from_env(collector_env)

        assert exc_info.value.variable == "AWS_ELB_NAMES"

    def test_first_missing_reported(self):
        """여러 개 누락 시 검증 순서상 첫 번째 보고"""
        with pytest.raises(ConfigurationError) as exc_info:
            CollectorConfig.from_env({})

        assert exc_info.value.variable == "AWS_ACCESS_KEY_ID"

    def test_reads_os_environ_by_default(self, collector_env):
        """environ 미지정 시 os.environ 사용"""
        with patch.dict(os.environ, collector_env, clear=True):
            config = CollectorConfig.from_env()

        assert config.elb_names == ("lb1", "lb2")


class TestLogConfig:
    """LogConfig 테스트"""

    def test_default_values(self):
        """기본값 확인"""
        config = LogConfig()
        assert config.level == "WARNING"
        assert config.format == "%(message)s"
        assert config.date_format == "%Y-%m-%d %H:%M:%S"

    def test_from_env(self):
        """환경변수에서 로드"""
        with patch.dict(
            os.environ,
            {"LOG_LEVEL": "debug", "LOG_FORMAT": "%(message)s"},
            clear=False,
        ):
            config = LogConfig.from_env()
            assert config.level == "DEBUG"
            assert config.format == "%(message)s"

    def test_cli_level_overrides_env(self):
        """인자로 받은 레벨이 환경변수보다 우선"""
        with patch.dict(os.environ, {"LOG_LEVEL": "error"}, clear=False):
            config = LogConfig.from_env(level="info")

        assert config.level == "INFO"

    def test_blank_level_uses_default(self):
        """빈 LOG_LEVEL은 기본값 사용"""
        with patch.dict(os.environ, {"LOG_LEVEL": "  "}, clear=False):
            config = LogConfig.from_env()

        assert config.level == "WARNING"

    def test_unknown_level(self):
        """알 수 없는 레벨은 ConfigurationError"""
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=False):
            with pytest.raises(ConfigurationError) as exc_info:
                LogConfig.from_env()

        assert exc_info.value.variable == "LOG_LEVEL"
        assert "VERBOSE" in str(exc_info.value)


class TestGetVersion:
    """get_version 테스트"""

    def test_returns_string(self):
        """버전 문자열 반환"""
        version = get_version()
        assert isinstance(version, str)
        assert len(version.split(".")) >= 2
