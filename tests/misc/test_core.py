# -*- coding: utf-8 -*-
"""tests for configuration and logging setup."""
import logging

import pytest

from hexdump import core


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_default_config(workdir):
    config = core.load_config()
    assert config.getint("dump", "chunk_size") == 4096
    assert config.getboolean("dump", "strict_length") is False
    assert config.get("logging", "level") == "WARNING"


def test_cwd_config_overrides_home(workdir):
    (workdir / "home" / ".hexdump_config").write_text("[dump]\nchunk_size=512\nstrict_length=1\n")
    (workdir / "hexdump.cfg").write_text("[dump]\nchunk_size=1024\n")
    config = core.load_config()
    assert config.getint("dump", "chunk_size") == 1024
    assert config.getboolean("dump", "strict_length") is True


def test_no_cfgfile(workdir):
    (workdir / "hexdump.cfg").write_text("[dump]\nchunk_size=1024\n")
    config = core.load_config(no_cfgfile=True)
    assert config.getint("dump", "chunk_size") == 4096


@pytest.mark.parametrize("value", ["0", "-1", "many", "1000000000000"])
def test_invalid_chunk_size_falls_back(workdir, value, caplog):
    (workdir / "hexdump.cfg").write_text("[dump]\nchunk_size={}\n".format(value))
    config = core.load_config()
    with caplog.at_level(logging.WARNING, logger="HexDump"):
        assert core.get_chunk_size(config) == 4096
    assert "invalid chunk_size" in caplog.text


def test_config_logging_level_from_config(workdir):
    (workdir / "hexdump.cfg").write_text("[logging]\nlevel=INFO\n")
    logger = core.config_logging(config=core.load_config())
    assert logger.name == "HexDump"
    assert logger.level == logging.INFO


def test_config_logging_setting_overrides_config(workdir):
    logger = core.config_logging({"level": "DEBUG", "file": None}, core.load_config())
    assert logger.level == logging.DEBUG


def test_config_logging_keeps_one_handler(workdir):
    core.config_logging({"level": "ERROR"})
    logger = core.config_logging({"level": "ERROR"})
    own = [h for h in logger.handlers if getattr(h, "_hexdump_handler", False)]
    assert len(own) == 1
    assert own[0].level == logging.ERROR


def test_config_logging_file(workdir):
    log_file = workdir / "out.log"
    core.config_logging({"level": "INFO", "file": str(log_file)})
    logging.getLogger("HexDump.lib").info("hello from the library")
    assert "hello from the library" in log_file.read_text()
    core.config_logging({"level": "WARNING"})
