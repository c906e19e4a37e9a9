# dto_codec/infrastructure/__init__.py

"""System infrastructure: configuration, logging and the JSON tree adapter."""

# Local imports
from dto_codec.infrastructure.config import ConfigLoader
from dto_codec.infrastructure.config import get_config

__all__ = ["ConfigLoader", "get_config"]
