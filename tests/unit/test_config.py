"""
Unit tests for client configuration.

Tests defaults, validation, YAML loading and environment overrides.
"""

import pytest
import yaml

from coinpaprika.core.config import (
    API_URL,
    API_URL_PRO,
    DEFAULT_USER_AGENT,
    ClientConfig,
    ConfigError,
    load_config,
)


@pytest.fixture
def no_dotenv(tmp_path):
    """Path of a dotenv file that does not exist."""
    return tmp_path / "missing.env"


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(data):
        path = tmp_path / "config.yaml"
        with open(path, "w") as f:
            yaml.dump(data, f)
        return path
    return _write


class TestClientConfig:
    """Test the ClientConfig class."""

    def test_defaults(self):
        config = ClientConfig()

        assert config.base_url == API_URL
        assert config.api_key is None
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.timeout == 10.0
        assert config.max_retries == 3
        assert not config.has_api_key

    def test_keyed(self):
        config = ClientConfig.keyed("secret", timeout=5)

        assert config.base_url == API_URL_PRO
        assert config.api_key == "secret"
        assert config.timeout == 5

    def test_keyed_rejects_empty_key(self):
        with pytest.raises(ConfigError):
            ClientConfig.keyed("")

    def test_factories_accept_base_url(self):
        free = ClientConfig.free(base_url="http://localhost:8080/v1/", max_retries=0)
        keyed = ClientConfig.keyed("secret", base_url="http://localhost:8080/v1/")

        assert free.base_url == "http://localhost:8080/v1/"
        assert free.api_key is None
        assert free.max_retries == 0
        assert keyed.base_url == "http://localhost:8080/v1/"
        assert keyed.api_key == "secret"

    def test_free_rejects_api_key(self):
        with pytest.raises(ConfigError, match="keyed"):
            ClientConfig.free(api_key="secret")

        assert ClientConfig.free(api_key=None) == ClientConfig()

    @pytest.mark.parametrize("overrides", [
        {"base_url": ""},
        {"timeout": 0},
        {"max_retries": -1},
        {"retry_delay": -0.1},
        {"backoff_factor": 0.5},
    ])
    def test_validation(self, overrides):
        with pytest.raises(ConfigError):
            ClientConfig(**overrides)

    def test_immutable(self):
        config = ClientConfig()

        with pytest.raises(AttributeError):
            config.timeout = 1

    def test_with_overrides(self):
        config = ClientConfig.free().with_overrides(max_retries=0)

        assert config.max_retries == 0
        assert config.base_url == API_URL


class TestLoadConfig:
    """Test load_config."""

    def test_defaults_without_sources(self, no_dotenv):
        assert load_config(env_file=no_dotenv) == ClientConfig()

    def test_yaml_file(self, config_file, no_dotenv):
        path = config_file({"coinpaprika": {"timeout": 30, "max_retries": 5,
                                            "user_agent": "my-app"}})

        config = load_config(path, env_file=no_dotenv)

        assert config.timeout == 30.0
        assert config.max_retries == 5
        assert config.user_agent == "my-app"
        assert config.base_url == API_URL

    def test_yaml_api_key_selects_pro_url(self, config_file, no_dotenv):
        path = config_file({"coinpaprika": {"api_key": "secret"}})

        config = load_config(path, env_file=no_dotenv)

        assert config.api_key == "secret"
        assert config.base_url == API_URL_PRO

    def test_explicit_base_url_kept_with_key(self, config_file, no_dotenv):
        path = config_file({"coinpaprika": {"api_key": "secret",
                                            "base_url": "http://localhost:8080/v1/"}})

        config = load_config(path, env_file=no_dotenv)

        assert config.base_url == "http://localhost:8080/v1/"

    def test_other_sections_ignored(self, config_file, no_dotenv):
        path = config_file({"logging": {"level": "DEBUG"}})

        assert load_config(path, env_file=no_dotenv) == ClientConfig()

    def test_unknown_key(self, config_file, no_dotenv):
        path = config_file({"coinpaprika": {"timeout": 3, "colour": "blue"}})

        with pytest.raises(ConfigError, match="colour"):
            load_config(path, env_file=no_dotenv)

    def test_invalid_value(self, config_file, no_dotenv):
        path = config_file({"coinpaprika": {"max_retries": "many"}})

        with pytest.raises(ConfigError, match="max_retries"):
            load_config(path, env_file=no_dotenv)

    def test_section_not_a_mapping(self, config_file, no_dotenv):
        path = config_file({"coinpaprika": ["timeout", 3]})

        with pytest.raises(ConfigError):
            load_config(path, env_file=no_dotenv)

    def test_malformed_yaml(self, tmp_path, no_dotenv):
        path = tmp_path / "broken.yaml"
        path.write_text("coinpaprika: [unclosed\n")

        with pytest.raises(ConfigError):
            load_config(path, env_file=no_dotenv)

    def test_missing_file(self, tmp_path, no_dotenv):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml", env_file=no_dotenv)

    def test_environment_overrides(self, config_file, no_dotenv, monkeypatch):
        """Test environment variable overrides."""
        path = config_file({"coinpaprika": {"timeout": 30, "max_retries": 5}})
        monkeypatch.setenv("COINPAPRIKA_TIMEOUT", "2.5")
        monkeypatch.setenv("COINPAPRIKA_API_KEY", "env-key")

        config = load_config(path, env_file=no_dotenv)

        assert config.timeout == 2.5
        assert config.max_retries == 5
        assert config.api_key == "env-key"
        assert config.base_url == API_URL_PRO

    def test_environment_ignored_when_disabled(self, no_dotenv, monkeypatch):
        monkeypatch.setenv("COINPAPRIKA_MAX_RETRIES", "9")

        config = load_config(env_file=no_dotenv, use_env=False)

        assert config.max_retries == 3

    def test_invalid_environment_value(self, no_dotenv, monkeypatch):
        monkeypatch.setenv("COINPAPRIKA_TIMEOUT", "soon")

        with pytest.raises(ConfigError, match="timeout"):
            load_config(env_file=no_dotenv)

    def test_dotenv_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("COINPAPRIKA_USER_AGENT=dotenv-agent\n")
        # registered so the value loaded from the file is removed afterwards
        monkeypatch.setenv("COINPAPRIKA_USER_AGENT", "")
        monkeypatch.delenv("COINPAPRIKA_USER_AGENT")

        config = load_config(env_file=env_file)

        assert config.user_agent == "dotenv-agent"
