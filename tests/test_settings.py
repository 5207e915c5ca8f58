"""
Configuration tests
"""

import os

import pytest

from readers_api.config.settings import DatabaseConfig, load_env_file


DB_VARS = ["DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME"]


@pytest.fixture
def clean_db_env(monkeypatch):
    for var in DB_VARS:
        # setenv first so monkeypatch also undoes values loaded from env files
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch


def test_database_config_from_env(clean_db_env):
    clean_db_env.setenv("DB_HOST", "db.internal")
    clean_db_env.setenv("DB_PORT", "5433")
    clean_db_env.setenv("DB_USER", "librarian")
    clean_db_env.setenv("DB_PASSWORD", "secret-pass")
    clean_db_env.setenv("DB_NAME", "readers")

    config = DatabaseConfig.from_env()

    assert config.connect_kwargs() == {
        "host": "db.internal",
        "port": 5433,
        "user": "librarian",
        "password": "secret-pass",
        "database": "readers",
    }
    assert config.connect_kwargs(database="postgres")["database"] == "postgres"


def test_database_config_defaults(clean_db_env):
    config = DatabaseConfig.from_env()

    assert config.host == "localhost"
    assert config.port == 5432
    assert config.database is None


def test_password_is_hidden_from_repr():
    config = DatabaseConfig(password="secret-pass")

    assert "secret-pass" not in repr(config)


def test_load_test_env_file_from_working_directory(clean_db_env, tmp_path):
    (tmp_path / ".env.test").write_text("DB_NAME=readers_test\nDB_PORT=6543\n")
    clean_db_env.chdir(tmp_path)

    env_path = load_env_file("test")

    assert env_path.resolve() == (tmp_path / ".env.test").resolve()
    assert os.environ["DB_NAME"] == "readers_test"
    assert DatabaseConfig.from_env().port == 6543


def test_missing_env_file_keeps_process_environment(clean_db_env, tmp_path):
    clean_db_env.setenv("DB_NAME", "from_process")
    clean_db_env.chdir(tmp_path)

    load_env_file("default")

    assert os.environ["DB_NAME"] == "from_process"


def test_unknown_env_target_is_rejected():
    with pytest.raises(ValueError, match="Unknown environment target"):
        load_env_file("staging")


def test_explicit_env_file_wins_over_target(clean_db_env, tmp_path):
    (tmp_path / ".env").write_text("DB_NAME=from_default\n")
    explicit = tmp_path / "deploy" / "readers.env"
    explicit.parent.mkdir()
    explicit.write_text("DB_NAME=from_explicit\n")
    clean_db_env.chdir(tmp_path)

    env_path = load_env_file("default", env_file=str(explicit))

    assert env_path == explicit
    assert os.environ["DB_NAME"] == "from_explicit"
