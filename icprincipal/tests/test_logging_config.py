"""
Tests for structured logging setup.
"""

import json
import logging

from icprincipal.logging_config import get_logger, setup_logging


def test_json_logs_carry_principal(capsys):
    setup_logging(level="DEBUG", fmt="json")
    get_logger("icprincipal.test", principal="2vxsx-fae").info("hello")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    rec = json.loads(line)
    assert rec["message"] == "hello"
    assert rec["level"] == "INFO"
    assert rec["logger"] == "icprincipal.test"
    assert rec["principal"] == "2vxsx-fae"


def test_plain_logger_gets_default_principal(capsys):
    setup_logging(level="INFO", fmt="text")
    logging.getLogger("icprincipal.plain").warning("careful")

    err = capsys.readouterr().err
    assert "careful" in err
    assert "[principal=N/A]" in err


def test_env_controls_level(monkeypatch):
    monkeypatch.setenv("ICPRINCIPAL_LOG_LEVEL", "warning")
    setup_logging()
    assert logging.getLogger().level == logging.WARNING


def test_setup_replaces_handlers():
    setup_logging(fmt="text")
    setup_logging(fmt="text")
    assert len(logging.getLogger().handlers) == 1
