import pytest

from anikwento.config import ConfigStore, EnvFileNotFoundError, Settings, load_settings


def _store(write_env, content: str) -> ConfigStore:
    store = ConfigStore(mirror_env=False)
    store.load(write_env(content))
    return store


def test_defaults_when_keys_absent(write_env) -> None:
    s = Settings.from_store(_store(write_env, "UNRELATED=1\n"))

    assert s.db_name == "anikwento"
    assert s.db_path == "data/anikwento.db"
    assert s.log_dir == "logs"
    assert s.app_env == "production"
    assert s.app_debug is False


def test_db_name_falls_back_to_railway_key(write_env) -> None:
    s = Settings.from_store(_store(write_env, "MYSQLDATABASE=railway\n"))

    assert s.db_name == "railway"
    assert s.db_path == "data/railway.db"


def test_db_name_prefers_db_name_over_railway(write_env) -> None:
    s = Settings.from_store(_store(write_env, "MYSQLDATABASE=railway\nDB_NAME=local\n"))
    assert s.db_name == "local"


@pytest.mark.parametrize("raw, expected", [("true", True), ("1", True), (" Yes ", True), ("false", False), ("0", False), ("", False)])
def test_app_debug_parsing(write_env, raw, expected) -> None:
    s = Settings.from_store(_store(write_env, f"APP_DEBUG={raw}\n"))
    assert s.app_debug is expected


def test_load_settings_creates_dirs(write_env, tmp_path) -> None:
    db_path = tmp_path / "db" / "app.db"
    log_dir = tmp_path / "logs"
    env_file = write_env(f"DB_PATH={db_path}\nLOG_DIR='{log_dir}'\nAPP_NAME=\"Anikwento Dev\"\n")

    s = load_settings(env_file, store=ConfigStore(mirror_env=False))

    assert s.db_path == str(db_path)
    assert s.app_name == "Anikwento Dev"
    assert db_path.parent.is_dir()
    assert log_dir.is_dir()
    assert s.asdict()["log_dir"] == str(log_dir)


def test_load_settings_missing_env_file(tmp_path) -> None:
    with pytest.raises(EnvFileNotFoundError):
        load_settings(tmp_path / ".env", store=ConfigStore(mirror_env=False))
