"""Configuration management for ypbank."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from ypbank.exceptions import ConfigurationError


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path | None = None  # None writes next to the input file


@dataclass
class SampleConfig:
    """Sample data generation configuration."""

    count: int = 5
    seed: int | None = None
    locale: str = "en_US"


@dataclass
class YPBankConfig:
    """Main configuration for ypbank."""

    output: OutputConfig = field(default_factory=OutputConfig)
    sample: SampleConfig = field(default_factory=SampleConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "YPBankConfig":
        """Create config from environment variables."""
        output_dir = os.getenv("YPBANK_OUTPUT_DIR")
        output = OutputConfig(output_dir=Path(output_dir) if output_dir else None)

        seed = os.getenv("SEED")
        sample = SampleConfig(
            count=_env_int("YPBANK_SAMPLE_COUNT", "5"),
            seed=_env_int("SEED", seed) if seed else None,
            locale=os.getenv("YPBANK_LOCALE", "en_US"),
        )

        return cls(
            output=output,
            sample=sample,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
