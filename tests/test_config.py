from pathlib import Path

import pytest

from inputid.exceptions import ConfigurationError
from inputid.utils.config import Config, find_config_file, load_config


def test_config_defaults_when_no_file() -> None:
    config = Config()

    assert config.data == {}
    assert config.separator is None
    assert config.fallback is None
    assert config.force_uniqueness is None
    assert config.logging == {}


def test_config_file_in_working_directory_is_found(tmp_path: Path) -> None:
    (tmp_path / "inputid.yml").write_text(
        "ids:\n  separator: '-'\n  fallback: field\n  force_uniqueness: false\n",
        encoding="utf-8",
    )

    assert find_config_file() == tmp_path / "inputid.yml"
    config = Config()
    assert config.separator == "-"
    assert config.fallback == "field"
    assert config.force_uniqueness is False


def test_config_path_from_environment(tmp_path: Path, monkeypatch) -> None:
    config_path = tmp_path / "elsewhere.yaml"
    config_path.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("INPUTID_CONFIG_PATH", str(config_path))

    assert find_config_file() == config_path
    assert Config().logging == {"level": "DEBUG"}


def test_env_overrides_take_precedence(monkeypatch) -> None:
    monkeypatch.setenv("INPUTID_SEPARATOR", "")
    monkeypatch.setenv("INPUTID_FALLBACK", " item ")
    monkeypatch.setenv("INPUTID_FORCE_UNIQUENESS", "on")
    monkeypatch.setenv("INPUTID_LOG_LEVEL", "warning")

    config = Config(data={"ids": {"separator": "-", "fallback": "field"}, "logging": {"level": "DEBUG"}})

    assert config.separator == ""
    assert config.fallback == "item"
    assert config.force_uniqueness is True
    assert config.logging["level"] == "warning"


def test_non_boolean_uniqueness_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("INPUTID_FORCE_UNIQUENESS", "maybe")

    assert Config(data={"ids": {"force_uniqueness": True}}).force_uniqueness is True


def test_from_file_requires_existing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Config.from_file(tmp_path / "missing.yml")


def test_from_file_loads_dotenv_next_to_config(tmp_path: Path) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (config_dir / "inputid.yml").write_text("ids:\n  separator: '-'\n", encoding="utf-8")
    (config_dir / ".env").write_text("INPUTID_FALLBACK=fromenv\n", encoding="utf-8")

    config = Config.from_file(config_dir / "inputid.yml")

    assert config.separator == "-"
    assert config.fallback == "fromenv"


def test_non_mapping_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "inputid.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_malformed_yaml_is_a_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "inputid.yml"
    path.write_text("ids: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not valid YAML"):
        load_config(path)


def test_empty_file_gives_empty_mapping(tmp_path: Path) -> None:
    path = tmp_path / "inputid.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == {}
