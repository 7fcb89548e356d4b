"""Tests for :mod:`dagstore.config`."""

from __future__ import annotations

import pytest

from dagstore import config


@pytest.fixture
def env_file(monkeypatch, tmp_path):
    """Point the loader at a scratch ``.env`` file."""

    for key in ("DAGSTORE_TEST_VALUE", "DAGSTORE_TEST_TEMP"):
        # registered so teardown removes whatever the loader exported
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    path = tmp_path / ".env"
    path.write_text("DAGSTORE_TEST_VALUE=from-file\n")
    monkeypatch.setattr(config, "ENV_FILE", path)
    config._load_environment.cache_clear()
    yield path
    config._load_environment.cache_clear()


def test_get_env_reads_from_dotenv(env_file):
    assert config.get_env("DAGSTORE_TEST_VALUE") == "from-file"


def test_get_env_prefers_process_environment(monkeypatch, env_file):
    monkeypatch.setenv("DAGSTORE_TEST_VALUE", "in-memory")

    assert config.get_env("DAGSTORE_TEST_VALUE") == "in-memory"


def test_get_env_can_reload_after_cache_clear(monkeypatch, env_file):
    """Clearing the cache allows the loader to pick up updated ``.env`` values."""

    key = "DAGSTORE_TEST_TEMP"
    env_file.write_text(f"{key}=first\n")
    config._load_environment.cache_clear()
    assert config.get_env(key) == "first"

    # Without a cache clear the file is not read again.
    env_file.write_text(f"{key}=second\n")
    monkeypatch.delenv(key)
    assert config.get_env(key) is None

    config._load_environment.cache_clear()
    assert config.get_env(key) == "second"


def test_get_env_returns_default_when_missing(monkeypatch, env_file):
    monkeypatch.delenv("DAGSTORE_DOES_NOT_EXIST", raising=False)

    assert config.get_env("DAGSTORE_DOES_NOT_EXIST", default="fallback") == "fallback"
