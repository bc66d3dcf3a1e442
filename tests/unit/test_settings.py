"""
Unit tests for configuration loading.
"""

from student_records.configs import Settings
from student_records.configs.redis import RedisSettings
from student_records.configs.server import ServerSettings


def test_redis_defaults_point_at_local_server():
    settings = RedisSettings()

    assert settings.redis_url == "redis://127.0.0.1:6379/0"
    assert settings.key_prefix == "student:"


def test_redis_url_includes_password(monkeypatch):
    monkeypatch.setenv("REDIS_PASSWORD", "secret")
    monkeypatch.setenv("REDIS_HOST", "cache")
    monkeypatch.setenv("REDIS_DB", "2")

    assert RedisSettings().redis_url == "redis://:secret@cache:6379/2"


def test_redis_url_override_wins(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "rediss://example:6380/1")

    assert RedisSettings().redis_url == "rediss://example:6380/1"


def test_server_defaults():
    settings = ServerSettings()

    assert settings.port == 5000
    assert settings.cors_origins == ["*"]


def test_server_port_from_env(monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "8080")

    assert ServerSettings().port == 8080


def test_settings_aggregates_sections():
    settings = Settings()

    assert isinstance(settings.redis, RedisSettings)
    assert settings.upload.max_bytes > 0


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.log_level == "debug"
    assert not hasattr(settings, "environment")
