"""Tests for config.py: env loading and typed parsers."""

import pytest

from anki_connect import config


class TestLoadEnv:
    @pytest.fixture(autouse=True)
    def _clean_environ(self, monkeypatch):
        """Remove known keys from os.environ so file-parsing tests are isolated."""
        for key in config.KNOWN_ENV_KEYS:
            monkeypatch.delenv(key, raising=False)

    def test_basic_key_value(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("FOO=bar\nBAZ=qux\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"FOO": "bar", "BAZ": "qux"}

    def test_strips_whitespace(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("  KEY  =  value  \n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"KEY": "value"}

    def test_skips_comments_and_blank_lines(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\nA=1\n\n\nB=2\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"A": "1", "B": "2"}

    def test_value_with_equals_sign(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("ANKI_CONNECT_URL=http://host:8765/?a=b\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"ANKI_CONNECT_URL": "http://host:8765/?a=b"}

    def test_missing_file_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "ENV_PATH", str(tmp_path / "nonexistent"))
        assert config.load_env() == {}

    def test_environ_fallback(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "ENV_PATH", str(tmp_path / "nonexistent"))
        monkeypatch.setenv("ANKI_CONNECT_URL", "http://10.0.0.2:8765")
        assert config.load_env()["ANKI_CONNECT_URL"] == "http://10.0.0.2:8765"

    def test_environ_wins_over_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("ANKI_CONNECT_API_KEY=from-file\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        monkeypatch.setenv("ANKI_CONNECT_API_KEY", "from-environ")
        assert config.load_env()["ANKI_CONNECT_API_KEY"] == "from-environ"

    def test_unknown_keys_not_pulled_from_environ(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "ENV_PATH", str(tmp_path / "nonexistent"))
        monkeypatch.setenv("RANDOM_KEY", "should-not-appear")
        assert "RANDOM_KEY" not in config.load_env()


class TestEnvParsers:
    def test_env_int_valid(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"K": "42"})
        assert config._env_int("K", 10) == 42

    def test_env_int_missing_returns_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {})
        assert config._env_int("MISSING", 99) == 99

    def test_env_int_empty_returns_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"K": ""})
        assert config._env_int("K", 99) == 99

    def test_env_int_bad_value_returns_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"K": "not_a_number"})
        assert config._env_int("K", 30) == 30

    def test_env_bool_truthy(self, monkeypatch):
        for val in ("1", "true", "yes", "on", "True", "YES"):
            monkeypatch.setattr(config, "env", {"K": val})
            assert config._env_bool("K") is True

    def test_env_bool_falsy(self, monkeypatch):
        for val in ("0", "false", "no", "off", "anything"):
            monkeypatch.setattr(config, "env", {"K": val})
            assert config._env_bool("K") is False

    def test_env_bool_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {})
        assert config._env_bool("K", True) is True


class TestConstants:
    def test_defaults(self):
        assert config.DEFAULT_URL == "http://localhost:8765"
        assert config.DEFAULT_API_VERSION == 6

    def test_valid_formats(self):
        assert config.VALID_FORMATS == ("text", "json")

    def test_version_string(self):
        assert config.VERSION.count(".") == 2
