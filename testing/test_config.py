"""Tests for environment-backed Telegraph configuration."""

from telepage.config import DEFAULT_API_ROOT, DEFAULT_UPLOAD_URL, TelegraphConfig

ENV_VARS = (
    "TELEGRAPH_ACCESS_TOKEN",
    "TELEGRAPH_API_ROOT",
    "TELEGRAPH_UPLOAD_URL",
    "TELEGRAPH_TIMEOUT",
)


class TestTelegraphConfig:
    def test_defaults(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

        config = TelegraphConfig()

        assert config.access_token is None
        assert not config.has_token
        assert config.api_root == DEFAULT_API_ROOT
        assert config.upload_url == DEFAULT_UPLOAD_URL
        assert config.timeout == 30.0

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TELEGRAPH_ACCESS_TOKEN", "abc")
        monkeypatch.setenv("TELEGRAPH_API_ROOT", "https://api.graph.org")
        monkeypatch.setenv("TELEGRAPH_UPLOAD_URL", "https://graph.org/upload")
        monkeypatch.setenv("TELEGRAPH_TIMEOUT", "7.5")

        config = TelegraphConfig()

        assert config.has_token
        assert config.api_root == "https://api.graph.org"
        assert config.upload_origin == "https://graph.org"
        assert config.timeout == 7.5

    def test_empty_token_is_none(self, monkeypatch):
        monkeypatch.setenv("TELEGRAPH_ACCESS_TOKEN", "")
        assert TelegraphConfig().access_token is None

    def test_upload_origin(self):
        config = TelegraphConfig(upload_url="https://telegra.ph/upload")
        assert config.upload_origin == "https://telegra.ph"
