import json
from pathlib import Path

import pytest

from comandante.config import CONFIG_ENV_VAR, ShellConfig, load_config


def test_defaults_without_path(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_config() == ShellConfig()


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "absent.json") == ShellConfig()


def test_file_values_override_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "comandante.json"
    path.write_text(json.dumps({"prompt": "$ ", "log_level": "DEBUG", "color": "red"}), encoding="utf-8")

    with caplog.at_level("WARNING"):
        config = load_config(path)

    assert config.prompt == "$ "
    assert config.log_level == "DEBUG"
    assert config.banner == ShellConfig().banner
    assert "ignoring unknown config keys: color" in caplog.text


def test_env_var_names_config_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"register_builtins": False}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().register_builtins is False


@pytest.mark.parametrize("payload", ["[1, 2]", '{"register_builtins": "yes"}'])
def test_invalid_config_rejected(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"log_level": "BOGUS"}, "unknown log level"),
        ({"log_level": 10}, "log_level must be a string"),
        ({"prompt": 5}, "prompt must be a string"),
        ({"banner": None}, "banner must be a string"),
    ],
)
def test_invalid_field_values_rejected(tmp_path: Path, payload: dict, message: str) -> None:
    path = tmp_path / "fields.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        load_config(path)


def test_log_level_is_case_insensitive(tmp_path: Path) -> None:
    path = tmp_path / "level.json"
    path.write_text(json.dumps({"log_level": "debug"}), encoding="utf-8")

    assert load_config(path).log_level == "debug"
