# dto_codec/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from dto_codec.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "dto_codec.json"


class OutputConfig(BaseModel):
    """Text rendering configuration"""

    indent: int = Field(2, ge=0, le=16, description="Spaces per level for pretty output")
    ensure_ascii: bool = Field(False, description="Escape non-ASCII characters")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("INFO", description="Console log level")
    log_file: str | None = Field(None, description="Log file path")

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name"""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {v!r}")
        return level


class AppConfig(BaseModel):
    """Root application configuration model"""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        # Standard library imports
        import json

        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try the default file in the current directory
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return cls.model_validate(data)
            except (OSError, ValueError, ValidationError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
                return cls()

        logger.warning(f"Config file {config_path} not found. Using defaults.")
        return cls()

    def to_dict(self) -> JSONDict:
        return self.model_dump()
