"""Tests for structlog configuration."""

import json
import logging

import pytest
import structlog

from fxmoney import Bank, Currency, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging() output and filtering."""

    def test_json_output(self, capsys):
        configure_logging(level="INFO", format_json=True)
        get_logger("fxmoney.test").info("hello", answer=42)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"
        assert record["logger"] == "fxmoney.test"
        assert "timestamp" in record

    def test_without_timestamp(self, capsys):
        configure_logging(format_json=True, include_timestamp=False)
        get_logger("fxmoney.test").warning("no_time")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert "timestamp" not in record

    def test_level_filters_debug(self, capsys):
        configure_logging(level="INFO", format_json=True)
        Bank().add_rate(Currency.FRANC, Currency.DOLLAR, 2)
        assert "rate_registered" not in capsys.readouterr().out

    def test_debug_level_shows_bank_events(self, capsys):
        configure_logging(level="debug", format_json=True)
        Bank().add_rate(Currency.FRANC, Currency.DOLLAR, 2)

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "rate_registered"
        assert record["logger"] == "fxmoney.bank"
        assert record["from_currency"] == "CHF"

    def test_console_output(self, capsys):
        configure_logging(format_json=False)
        get_logger("fxmoney.test").info("console_event")
        assert "console_event" in capsys.readouterr().out

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="VERBOSE"):
            configure_logging(level="VERBOSE")
