"""
Decoder configuration management.

This module loads and validates decoder settings from YAML files and
provides defaults for every value.

Usage:
    from erc20_decoder.config import DecoderConfig

    config = DecoderConfig.from_yaml("configs/decoder_config.yaml")
    print(config.decoder.strict)  # False
    print(config.logging.level)  # INFO
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .core.utils import LOG_LEVELS

logger = logging.getLogger(__name__)


@dataclass
class DecoderSettings:
    """Decoding behaviour."""

    annotate_tokens: bool = True  # Attach registry token identity to results
    strict: bool = False  # Abort on the first decode failure
    transfers_only: bool = False  # Drop contract creations and unknown calls


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    format: str | None = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level}. Must be one of {LOG_LEVELS}"
            )
        self.level = self.level.upper()


@dataclass
class DecoderConfig:
    """Complete decoder configuration."""

    decoder: DecoderSettings = field(default_factory=DecoderSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "DecoderConfig":
        """
        Build configuration from a dictionary of sections.

        Raises:
            ValueError: If a section or key is unknown or a value is invalid
        """
        unknown_sections = set(config_dict) - {"decoder", "logging"}
        if unknown_sections:
            raise ValueError(
                f"Unknown configuration sections: {sorted(unknown_sections)}"
            )

        try:
            return cls(
                decoder=DecoderSettings(**(config_dict.get("decoder") or {})),
                logging=LoggingSettings(**(config_dict.get("logging") or {})),
            )
        except TypeError as e:
            raise ValueError(f"Invalid configuration structure: {e}") from e

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "DecoderConfig":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            DecoderConfig instance with loaded values

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If YAML structure is invalid
            yaml.YAMLError: If YAML parsing fails
        """
        yaml_path = Path(yaml_path)

        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        logger.info(f"Loading decoder configuration from {yaml_path}")

        with open(yaml_path, "r") as f:
            config_dict = yaml.safe_load(f)

        if not config_dict:
            raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration must be a mapping: {yaml_path}")

        return cls.from_dict(config_dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
