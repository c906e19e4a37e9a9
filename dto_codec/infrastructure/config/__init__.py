# dto_codec/infrastructure/config/__init__.py

"""Configuration infrastructure for the DTO codec.

This module manages configuration loading, validation, and models.
"""

# Local imports
from dto_codec.infrastructure.config._loader import ConfigLoader
from dto_codec.infrastructure.config._loader import get_config
from dto_codec.infrastructure.config._loader import reset_config
from dto_codec.infrastructure.config._models import AppConfig
from dto_codec.infrastructure.config._models import LoggingConfig
from dto_codec.infrastructure.config._models import OutputConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "LoggingConfig",
    "OutputConfig",
    "get_config",
    "reset_config",
]
