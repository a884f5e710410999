import importlib

import pytest

import static_router.core.config as config_module


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module against a patched environment"""
    def _reload(**env):
        for key in ("ROUTER_HOST", "ROUTER_PORT", "LOG_LEVEL", "DIAGNOSTIC_SINK"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        # Keep a developer's .env out of the picture
        monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: False)
        return importlib.reload(config_module).Config

    yield _reload
    monkeypatch.undo()
    importlib.reload(config_module)


class TestConfigDefaults:
    def test_defaults(self, reload_config):
        Config = reload_config()
        assert Config.ROUTER_HOST == "127.0.0.1"
        assert Config.ROUTER_PORT == 3000
        assert Config.LOG_LEVEL == "INFO"
        assert Config.DIAGNOSTIC_SINK == "console"

    def test_base_url_default(self, reload_config):
        Config = reload_config()
        assert Config.base_url() == "http://127.0.0.1:3000/"


class TestConfigOverrides:
    def test_env_overrides(self, reload_config):
        Config = reload_config(ROUTER_HOST="0.0.0.0", ROUTER_PORT="8080", DIAGNOSTIC_SINK="Logging")
        assert Config.ROUTER_HOST == "0.0.0.0"
        assert Config.ROUTER_PORT == 8080
        assert Config.DIAGNOSTIC_SINK == "logging"

    def test_invalid_port(self, reload_config):
        with pytest.raises(ValueError, match="ROUTER_PORT"):
            reload_config(ROUTER_PORT="not-a-port")

    def test_base_url_explicit(self, reload_config):
        Config = reload_config()
        assert Config.base_url("localhost", 0) == "http://localhost:0/"
