# dto_codec/adapters/cli/__init__.py

"""CLI adapter for the DTO codec"""

# Local imports
from dto_codec.adapters.cli.main import build_example_issue
from dto_codec.adapters.cli.main import main
from dto_codec.adapters.cli.parser import create_argument_parser

__all__ = ["build_example_issue", "create_argument_parser", "main"]
