"""
Module: test_settings.py
Description: Unit tests for environment-driven client settings.
"""

import pytest
from pydantic import ValidationError

from mns_client.config.settings import Settings


class TestSettings:
    """Test cases for Settings loading and validation."""

    def test_defaults(self, test_settings):
        assert test_settings.version == "2015-06-06"
        assert test_settings.keepalive_expiry == 8.0
        assert test_settings.timeout == 35.0
        assert test_settings.content_md5 is False

    def test_loads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("MNS_ENDPOINT", "https://42.mns.cn-shanghai.aliyuncs.com")
        monkeypatch.setenv("MNS_ACCESS_KEY_ID", "envId")
        monkeypatch.setenv("MNS_ACCESS_KEY_SECRET", "envSecret")
        monkeypatch.setenv("MNS_CONTENT_MD5", "true")

        settings = Settings(_env_file=None)

        assert settings.endpoint == "https://42.mns.cn-shanghai.aliyuncs.com"
        assert settings.access_key_id == "envId"
        assert settings.access_key_secret.get_secret_value() == "envSecret"
        assert settings.content_md5 is True

    def test_secret_not_in_repr(self, test_settings):
        assert test_settings.access_key_secret.get_secret_value() not in repr(test_settings)

    def test_invalid_endpoint(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, endpoint="ftp://host", access_key_id="id", access_key_secret="s")

    def test_invalid_version(self):
        with pytest.raises(ValidationError):
            Settings(
                _env_file=None,
                endpoint="http://host",
                access_key_id="id",
                access_key_secret="s",
                version="v2"
            )

    def test_log_level_normalized(self):
        settings = Settings(
            _env_file=None,
            endpoint="http://host",
            access_key_id="id",
            access_key_secret="s",
            log_level="debug"
        )

        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(
                _env_file=None,
                endpoint="http://host",
                access_key_id="id",
                access_key_secret="s",
                log_level="VERBOSE"
            )
