"""Configuration management for atm-model."""

from dataclasses import dataclass, field

from atm_model.exceptions import ConfigurationError


@dataclass
class ValidationConfig:
    """Validation rules applied by the customer registry."""

    strict: bool = True
    pin_length: int = 4

    def __post_init__(self) -> None:
        if self.pin_length < 1:
            raise ConfigurationError(f"pin_length must be positive, got {self.pin_length}")


@dataclass
class GeneratorConfig:
    """Sample data generation configuration."""

    seed: int | None = None
    locale: str = "en_US"


@dataclass
class OutputConfig:
    """Console output configuration."""

    pretty_json: bool = True
    max_records: int | None = None

    def __post_init__(self) -> None:
        if self.max_records is not None and self.max_records < 1:
            raise ConfigurationError(f"max_records must be positive, got {self.max_records}")


@dataclass
class AtmModelConfig:
    """Main configuration for atm-model."""

    validation: ValidationConfig = field(default_factory=ValidationConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AtmModelConfig":
        """Create config from environment variables."""
        import os

        validation = ValidationConfig(
            strict=_parse_bool("ATM_STRICT", os.getenv("ATM_STRICT", "true")),
            pin_length=_parse_int("ATM_PIN_LENGTH", os.getenv("ATM_PIN_LENGTH", "4")),
        )

        seed = os.getenv("SEED")
        generator = GeneratorConfig(
            seed=_parse_int("SEED", seed) if seed else None,
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )

        max_records = os.getenv("MAX_RECORDS")
        output = OutputConfig(
            pretty_json=_parse_bool("PRETTY_JSON", os.getenv("PRETTY_JSON", "true")),
            max_records=_parse_int("MAX_RECORDS", max_records) if max_records else None,
        )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            validation=validation,
            generator=generator,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")
