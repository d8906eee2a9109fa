"""Tests for environment-driven configuration."""

import pytest
from passwordping.config.config import Config, config, _get_env_float, _get_env_int
from passwordping.domain.errors import ConfigurationError


class TestEnvHelpers:
    """Tests for the validating environment readers."""

    def test_get_env_int_default(self, monkeypatch):
        """Test that the default is used when the variable is unset."""
        monkeypatch.delenv("PP_TEST_INT", raising=False)
        assert _get_env_int("PP_TEST_INT", "2") == 2

    def test_get_env_int_from_environment(self, monkeypatch):
        """Test reading an integer from the environment."""
        monkeypatch.setenv("PP_TEST_INT", "5")
        assert _get_env_int("PP_TEST_INT", "2") == 5

    def test_get_env_int_invalid_raises(self, monkeypatch):
        """Test that a non-integer value raises ConfigurationError."""
        monkeypatch.setenv("PP_TEST_INT", "many")
        with pytest.raises(ConfigurationError, match="PP_TEST_INT"):
            _get_env_int("PP_TEST_INT", "2")

    def test_get_env_float_from_environment(self, monkeypatch):
        """Test reading a float from the environment."""
        monkeypatch.setenv("PP_TEST_FLOAT", "2.5")
        assert _get_env_float("PP_TEST_FLOAT", "10.0") == 2.5

    def test_get_env_float_invalid_raises(self, monkeypatch):
        """Test that a non-numeric value raises ConfigurationError."""
        monkeypatch.setenv("PP_TEST_FLOAT", "soon")
        with pytest.raises(ConfigurationError, match="PP_TEST_FLOAT"):
            _get_env_float("PP_TEST_FLOAT", "10.0")

    def test_configuration_error_is_value_error(self, monkeypatch):
        """Test that callers catching ValueError still see config errors."""
        monkeypatch.setenv("PP_TEST_INT", "x")
        with pytest.raises(ValueError):
            _get_env_int("PP_TEST_INT", "2")


class TestConfig:
    """Tests for the module-level config instance."""

    def test_config_is_config_instance(self):
        """Test that config is a Config."""
        assert isinstance(config, Config)

    def test_types(self):
        """Test that numeric settings were parsed."""
        assert isinstance(config.REQUEST_TIMEOUT, float)
        assert isinstance(config.MAX_BCRYPT_HASHES, int)
        assert config.API_HOST
        assert config.USER_AGENT
