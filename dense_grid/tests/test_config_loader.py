import json
import logging

import pytest

from dense_grid.src.core import grid2d, grid3d
from dense_grid.src.utils import config_loader
from dense_grid.src.utils.config_loader import load_config, load_grid_config
from dense_grid.src.utils.logger import get_logger


def test_packaged_defaults():
    assert config_loader.META_CONFIG["strict_bounds"] is True
    assert config_loader.runtime_config() == {
        "strict_bounds": True,
        "print_delimiter": "",
        "print_pad": 0,
        "log_level": "WARNING",
    }


def test_load_yaml_and_json(tmp_path):
    yaml_path = tmp_path / "grid.yaml"
    yaml_path.write_text("strict_bounds: false\nprint_pad: 2\n", encoding="utf-8")
    assert load_config(str(yaml_path)) == {"strict_bounds": False, "print_pad": 2}

    json_path = tmp_path / "grid.json"
    json_path.write_text(json.dumps({"print_delimiter": ","}), encoding="utf-8")
    assert load_config(str(json_path)) == {"print_delimiter": ","}


def test_unsupported_format(tmp_path):
    path = tmp_path / "grid.ini"
    path.write_text("[grid]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_missing_config_is_empty(tmp_path):
    assert load_grid_config(tmp_path / "missing.yaml") == {}


def test_setters_update_runtime_config(monkeypatch):
    monkeypatch.setattr(config_loader, "META_CONFIG", {})
    monkeypatch.setattr(config_loader, "STRICT_BOUNDS", True)
    monkeypatch.setattr(config_loader, "PRINT_DELIMITER", "")
    monkeypatch.setattr(config_loader, "PRINT_PAD", 0)
    monkeypatch.setattr(config_loader, "LOG_LEVEL", "WARNING")

    config_loader.set_strict_bounds(False)
    config_loader.set_print_defaults(pad=3)

    assert config_loader.runtime_config() == {
        "strict_bounds": False,
        "print_delimiter": "",
        "print_pad": 3,
        "log_level": "WARNING",
    }
    assert config_loader.META_CONFIG == {"strict_bounds": False, "print_pad": 3}


def test_set_log_level_reaches_module_loggers():
    previous = config_loader.LOG_LEVEL
    assert not grid2d.logger.isEnabledFor(logging.DEBUG)
    try:
        config_loader.set_log_level("debug")
        assert config_loader.LOG_LEVEL == "DEBUG"
        assert grid2d.logger.isEnabledFor(logging.DEBUG)
        assert grid3d.logger.isEnabledFor(logging.DEBUG)
    finally:
        config_loader.set_log_level(previous)
    assert not grid2d.logger.isEnabledFor(logging.DEBUG)


def test_get_logger_attaches_file_handler_once(tmp_path):
    log_file = tmp_path / "logs" / "grid.log"
    logger = get_logger("dense_grid.tests.file_logger", str(log_file))
    again = get_logger("dense_grid.tests.file_logger", str(log_file))
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.NOTSET
    logger.warning("hello")
    logger.handlers[0].flush()
    assert "WARNING - hello" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
