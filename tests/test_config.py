import logging

import pytest

from logpattern import config as app_config
from logpattern.dynamic_config import CONFIG_KEYS, apply_config, get_config_value, load_yaml_config
from logpattern.logging_config import build_logging_config, setup_logging


@pytest.fixture
def yaml_file(tmp_path):
    path = tmp_path / "logpattern.yaml"
    path.write_text("wildcard: '<*>'\nsort_values: true\ncolor: false\n")
    return str(path)


def test_load_yaml_config(yaml_file):
    assert load_yaml_config(yaml_file) == {"wildcard": "<*>", "sort_values": True, "color": False}
    assert load_yaml_config(None) == {}
    assert load_yaml_config("does/not/exist.yaml") == {}


def test_get_config_value_priority(monkeypatch):
    monkeypatch.setenv("LOGPATTERN_TEST", "env")
    assert get_config_value("cli", "yaml", "LOGPATTERN_TEST", "default") == "cli"
    assert get_config_value(None, "yaml", "LOGPATTERN_TEST", "default") == "yaml"
    assert get_config_value(None, None, "LOGPATTERN_TEST", "default") == "env"
    monkeypatch.delenv("LOGPATTERN_TEST")
    assert get_config_value(None, None, "LOGPATTERN_TEST", "default") == "default"


def test_apply_config_from_yaml(yaml_file):
    apply_config(yaml_file)
    assert app_config.WILDCARD == "<*>"
    assert app_config.SORT_VARIABLE_VALUES is True
    assert app_config.ENABLE_COLOR is False
    assert app_config.YAML_CONFIG["wildcard"] == "<*>"


def test_apply_config_overrides_and_env(yaml_file, monkeypatch):
    monkeypatch.setenv("LOGPATTERN_HIGHLIGHT_COLOR", "yellow")
    monkeypatch.setenv("LOGPATTERN_COLOR", "yes")
    apply_config(yaml_file, wildcard="#")
    assert app_config.WILDCARD == "#"
    assert app_config.HIGHLIGHT_COLOR == "yellow"
    # YAML wins over env
    assert app_config.ENABLE_COLOR is False


def test_apply_config_defaults_untouched(monkeypatch):
    for _, env_var, _ in CONFIG_KEYS.values():
        monkeypatch.delenv(env_var, raising=False)
    apply_config()
    assert app_config.WILDCARD == "*"
    assert app_config.LOG_FILE is None


def test_apply_config_rejects_empty_wildcard():
    with pytest.raises(ValueError):
        apply_config(wildcard="")


def test_logging_config_with_file(tmp_path):
    log_file = str(tmp_path / "logpattern.log")
    cfg = build_logging_config(level="DEBUG", log_file=log_file)
    assert cfg["loggers"]["logpattern"]["level"] == "DEBUG"
    assert cfg["loggers"]["logpattern"]["handlers"] == ["default", "file"]
    assert cfg["handlers"]["file"]["filename"] == log_file


def test_setup_logging_sets_level():
    setup_logging(level="WARNING")
    assert logging.getLogger("logpattern").level == logging.WARNING
    setup_logging()
    assert logging.getLogger("logpattern").level == logging.INFO


def test_failed_apply_config_leaves_config_unchanged(yaml_file):
    with pytest.raises(ValueError):
        apply_config(yaml_file, wildcard="")

    assert app_config.WILDCARD == "*"
    assert app_config.SORT_VARIABLE_VALUES is False
    assert app_config.YAML_CONFIG == {}


def test_apply_config_sets_log_level():
    apply_config(log_level="DEBUG")
    assert logging.getLogger("logpattern").level == logging.DEBUG
    apply_config(log_level="info")
    assert logging.getLogger("logpattern").level == logging.INFO


def test_apply_config_adds_log_file(tmp_path):
    log_file = tmp_path / "logpattern.log"
    apply_config(log_file=str(log_file))
    logging.getLogger("logpattern.format").warning("written to file")

    assert "written to file" in log_file.read_text()
    app_config.LOG_FILE = None
    setup_logging()
