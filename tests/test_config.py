from pathlib import Path

from wiki_cache.config.cache import CacheSettings
from wiki_cache.config.loader import load_raw_config


def test_settings_prefer_config_file_values(tmp_path, monkeypatch):
    monkeypatch.setenv("WIKI_CACHE_ROOT", "/from/env")
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        """
[wikicache.cache]
root = "/from/toml"
persistent = false
write_interval = 60
flush_at_exit = "yes"
"""
    )

    settings = CacheSettings(load_raw_config(cfg))

    assert settings.CACHE_ROOT == "/from/toml"
    assert settings.PERSISTENT is False
    assert settings.WRITE_INTERVAL == 60.0
    assert settings.FLUSH_AT_EXIT is True


def test_settings_fall_back_to_environment(monkeypatch):
    monkeypatch.setenv("WIKI_CACHE_ROOT", "/from/env")
    monkeypatch.setenv("WIKI_CACHE_PERSISTENT", "0")
    monkeypatch.setenv("WIKI_CACHE_WRITE_INTERVAL", "5")

    settings = CacheSettings({})

    assert settings.CACHE_ROOT == "/from/env"
    assert settings.PERSISTENT is False
    assert settings.WRITE_INTERVAL == 5.0


def test_default_root_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.delenv("WIKI_CACHE_ROOT", raising=False)
    monkeypatch.delenv("WIKI_CACHE_WRITE_INTERVAL", raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))

    settings = CacheSettings()

    assert Path(settings.CACHE_ROOT) == tmp_path / "wiki"
    assert settings.WRITE_INTERVAL == 300.0


def test_missing_config_file_is_empty(tmp_path, monkeypatch):
    monkeypatch.setenv("WIKI_CACHE_CONFIG", str(tmp_path / "nope.toml"))

    assert load_raw_config() == {}
    assert load_raw_config(tmp_path / "also-missing.toml") == {}
