"""
Tests for configuration loading and structured logging
"""

import io
import json
import logging
import pytest

from retail_banking import config as config_module
from retail_banking.config import BankingConfig, get_config, reload_config
from retail_banking.logging_config import (
    JSONFormatter, setup_logging, get_logger, log_action
)


@pytest.fixture
def captured_logger():
    """Dedicated logger writing JSON lines to a buffer"""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())

    logger = logging.getLogger("retail_banking_tests.capture")
    logger.handlers = [handler]
    logger.setLevel(logging.INFO)
    logger.propagate = False

    yield logger, stream

    logger.handlers = []


class TestBankingConfig:
    """Test configuration defaults and environment overrides"""

    def test_defaults(self):
        config = BankingConfig()

        assert config.bank_name == "Community Savings Bank"
        assert config.bank_code == "CSB001"
        assert config.account_number_start == 100000
        assert config.customer_id_prefix == "CUST"
        assert config.transaction_id_start == 1000
        assert config.default_overdraft_protection is True
        assert config.log_format == "json"
        assert config.api_port == 8090

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RETAIL_BANKING_BANK_NAME", "River Credit Union")
        monkeypatch.setenv("RETAIL_BANKING_ACCOUNT_NUMBER_START", "700000")
        monkeypatch.setenv("RETAIL_BANKING_DEFAULT_OVERDRAFT_PROTECTION", "false")

        config = BankingConfig()

        assert config.bank_name == "River Credit Union"
        assert config.account_number_start == 700000
        assert config.default_overdraft_protection is False

    def test_reload_config_replaces_global(self, monkeypatch):
        original = get_config()
        monkeypatch.setenv("RETAIL_BANKING_BANK_CODE", "RCU042")

        try:
            reloaded = reload_config()

            assert reloaded.bank_code == "RCU042"
            assert get_config() is reloaded
        finally:
            config_module.config = original


class TestJSONFormatter:
    """Test the JSON log line layout"""

    def test_structured_fields(self, captured_logger):
        logger, stream = captured_logger

        log_action(
            logger, "info", "Deposit posted",
            action="deposit", resource="account:100001",
            correlation_id="req-1", extra={"amount": "25.00"}
        )

        entry = json.loads(stream.getvalue().strip())
        assert entry["level"] == "INFO"
        assert entry["logger"] == "retail_banking_tests.capture"
        assert entry["message"] == "Deposit posted"
        assert entry["action"] == "deposit"
        assert entry["resource"] == "account:100001"
        assert entry["correlation_id"] == "req-1"
        assert entry["extra"] == {"amount": "25.00"}
        assert "timestamp" in entry

    def test_missing_fields_are_omitted(self, captured_logger):
        logger, stream = captured_logger

        logger.warning("plain message")

        entry = json.loads(stream.getvalue().strip())
        assert entry["message"] == "plain message"
        assert "action" not in entry
        assert "extra" not in entry

    def test_exception_is_included(self, captured_logger):
        logger, stream = captured_logger

        try:
            raise ValueError("boom")
        except ValueError:
            logger.exception("failed")

        entry = json.loads(stream.getvalue().strip())
        assert "ValueError: boom" in entry["exception"]

    def test_log_action_respects_level(self, captured_logger):
        logger, stream = captured_logger

        log_action(logger, "debug", "hidden", action="noop")

        assert stream.getvalue() == ""


class TestSetupLogging:
    """Test logger setup"""

    def test_setup_is_idempotent(self):
        logger = setup_logging("DEBUG", logger_name="retail_banking_tests.setup")
        setup_logging("WARNING", logger_name="retail_banking_tests.setup")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert not logger.propagate
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_text_format(self):
        logger = setup_logging("INFO", "text", logger_name="retail_banking_tests.text")

        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_get_logger(self):
        assert get_logger("retail_banking.service").name == "retail_banking.service"
        assert get_logger().name == "retail_banking"
