"""Loguru sink setup"""
from loguru import logger
import utils.log_config as log_config
from utils.log_config import setup_logging

def test_setup_logging_writes_rotating_file(tmp_path, monkeypatch):
    monkeypatch.setattr(log_config, "_configured", False)
    try:
        assert setup_logging("INFO", tmp_path) is logger
        logger.info("hello from the forecaster")
        logger.complete()
        assert (tmp_path / "app.log").exists()
    finally:
        logger.remove()

def test_setup_logging_is_idempotent(tmp_path, monkeypatch):
    monkeypatch.setattr(log_config, "_configured", False)
    try:
        setup_logging("INFO", tmp_path / "first")
        setup_logging("INFO", tmp_path / "second")
        assert (tmp_path / "first").exists()
        assert not (tmp_path / "second").exists()
    finally:
        logger.remove()
