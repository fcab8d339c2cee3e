import pytest

from eduva.config import get_env, load_env


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("APP_ENV", "PORT", "DB_NAME"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_init_env_reads_test_file(tmp_path, clean_env):
    (tmp_path / ".env.test").write_text("APP_ENV=test\n")
    load_env("test", tmp_path)
    assert get_env("APP_ENV") == "test"


def test_specific_file_overrides_base(tmp_path, clean_env):
    (tmp_path / ".env").write_text("APP_ENV=dev\nPORT=8080\n")
    (tmp_path / ".env.test").write_text("APP_ENV=test\n")
    values = load_env("test", tmp_path)
    assert values == {"APP_ENV": "test", "PORT": "8080"}
    assert get_env("APP_ENV") == "test"
    assert get_env("PORT") == "8080"


def test_existing_environment_wins(tmp_path, clean_env):
    clean_env.setenv("APP_ENV", "prod")
    (tmp_path / ".env").write_text("APP_ENV=dev\n")
    load_env(None, tmp_path)
    assert get_env("APP_ENV") == "prod"


def test_missing_files_load_nothing(tmp_path, clean_env):
    assert load_env("test", tmp_path) == {}


def test_missing_key_returns_empty_string(clean_env):
    assert get_env("DB_NAME") == ""