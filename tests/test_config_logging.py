"""Tests for config and logging."""

import json
import logging
import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

import atm_model
from atm_model.config import AtmModelConfig, GeneratorConfig, OutputConfig, ValidationConfig
from atm_model.exceptions import ConfigurationError
from atm_model.logging import JsonFormatter, get_logger, setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_level = logging.getLogger("atm_model").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("atm_model").setLevel(package_level)


class TestValidationConfig:
    """Tests for ValidationConfig."""

    def test_default_values(self) -> None:
        config = ValidationConfig()

        assert config.strict is True
        assert config.pin_length == 4

    def test_invalid_pin_length(self) -> None:
        with pytest.raises(ConfigurationError, match="pin_length"):
            ValidationConfig(pin_length=0)


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_default_values(self) -> None:
        config = GeneratorConfig()

        assert config.seed is None
        assert config.locale == "en_US"


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        config = OutputConfig()

        assert config.pretty_json is True
        assert config.max_records is None

    def test_invalid_max_records(self) -> None:
        with pytest.raises(ConfigurationError, match="max_records"):
            OutputConfig(max_records=-1)


class TestAtmModelConfig:
    """Tests for AtmModelConfig."""

    def test_default_values(self) -> None:
        config = AtmModelConfig()

        assert isinstance(config.validation, ValidationConfig)
        assert isinstance(config.generator, GeneratorConfig)
        assert isinstance(config.output, OutputConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = AtmModelConfig.from_env()

        assert config.validation.strict is True
        assert config.validation.pin_length == 4
        assert config.generator.seed is None
        assert config.generator.locale == "en_US"
        assert config.output.pretty_json is True
        assert config.output.max_records is None
        assert config.log_level == "INFO"

    def test_from_env_custom(self) -> None:
        env = {
            "ATM_STRICT": "false",
            "ATM_PIN_LENGTH": "6",
            "SEED": "42",
            "FAKER_LOCALE": "en_GB",
            "PRETTY_JSON": "0",
            "MAX_RECORDS": "10",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = AtmModelConfig.from_env()

        assert config.validation.strict is False
        assert config.validation.pin_length == 6
        assert config.generator.seed == 42
        assert config.generator.locale == "en_GB"
        assert config.output.pretty_json is False
        assert config.output.max_records == 10
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    @pytest.mark.parametrize(
        "env, match",
        [
            ({"ATM_STRICT": "maybe"}, "ATM_STRICT"),
            ({"ATM_PIN_LENGTH": "four"}, "ATM_PIN_LENGTH"),
            ({"ATM_PIN_LENGTH": "-1"}, "pin_length"),
            ({"SEED": "abc"}, "SEED"),
            ({"MAX_RECORDS": "1.5"}, "MAX_RECORDS"),
            ({"MAX_RECORDS": "-3"}, "max_records"),
            ({"MAX_RECORDS": "0"}, "max_records"),
            ({"LOG_FORMAT": "xml"}, "LOG_FORMAT"),
        ],
    )
    def test_from_env_invalid(self, env: dict[str, str], match: str) -> None:
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ConfigurationError, match=match):
                AtmModelConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("atm_model").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_setup_logging_from_config(self) -> None:
        setup_logging_from_config(AtmModelConfig(log_level="WARNING", log_format="json"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs: object) -> logging.LogRecord:
        return logging.LogRecord(
            name="atm_model.test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="Registered customer %s",
            args=("jane@example.com",),
            exc_info=kwargs.get("exc_info"),  # type: ignore[arg-type]
        )

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "atm_model.test"
        assert data["message"] == "Registered customer jane@example.com"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ConfigurationError("bad config")
        except ConfigurationError:
            import sys

            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ConfigurationError: bad config" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"email": "jane@example.com"}

        data = json.loads(JsonFormatter().format(record))

        assert data["email"] == "jane@example.com"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("atm_model.store")

        assert logger.name == "atm_model.store"
        assert logger is logging.getLogger("atm_model.store")


class TestPackageInit:
    """Tests for package metadata."""

    def test_version_exported(self) -> None:
        assert atm_model.__version__ == "0.1.0"
