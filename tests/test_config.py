"""
Tests for configuration management
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from pager_for_content_type.infrastructure.configuration.config import (
    Settings,
    get_config,
    reset_config,
)


class TestSettings:
    """Test Settings model"""

    def test_settings_from_environment(self):
        """Test settings read from the mocked environment"""
        settings = Settings()
        assert settings.database_url == 'sqlite:///:memory:'
        assert settings.environment == 'test'
        assert settings.log_level == 'DEBUG'
        assert settings.config_namespace == 'pager_for_content_type.settings'

    def test_settings_default_values(self):
        """Test settings defaults with an empty environment"""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.database_url == 'sqlite:///data/pager_settings.db'
            assert settings.environment == 'development'
            assert settings.log_level == 'INFO'

    def test_settings_custom_values(self):
        """Test settings with custom values"""
        with patch.dict(os.environ, {
            'DATABASE_URL': 'postgresql://test',
            'ENVIRONMENT': 'production',
            'CONFIG_NAMESPACE': 'pager.custom',
        }):
            settings = Settings()
            assert settings.database_url == 'postgresql://test'
            assert settings.environment == 'production'
            assert settings.config_namespace == 'pager.custom'

    def test_settings_validation_error(self):
        """An empty namespace is rejected"""
        with pytest.raises(ValidationError):
            Settings(config_namespace="")


class TestGetConfig:
    """Test the settings singleton"""

    def test_get_config_singleton(self):
        """Test get_config returns the same instance"""
        assert get_config() is get_config()

    def test_reset_config_rereads_environment(self):
        """Test reset_config drops the cached instance"""
        first = get_config()
        with patch.dict(os.environ, {'ENVIRONMENT': 'staging'}):
            assert get_config().environment == 'test'
            reset_config()
            assert get_config().environment == 'staging'
        assert get_config() is not first
