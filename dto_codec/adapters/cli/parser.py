# dto_codec/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from dto_codec.core.domain.github_issues import Issue
from dto_codec.core.domain.github_issues import Label
from dto_codec.core.domain.github_issues import User
from dto_codec.core.domain.record import Record

RECORD_TYPES: dict[str, type[Record]] = {"issue": Issue, "label": Label, "user": User}


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options

    Logging options default to None so that values from --config can fill
    them in once the config file is known.
    """
    parser = ArgumentParser(
        prog="dto-codec",
        description="Parse and serialize GitHub issue records as JSON",
    )

    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")

    # Logging options
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console logging level (default: from config, else INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write a debug log to this file (default: from config)",
    )
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Write a debug log to logs/dto_codec_[timestamp].log when no log file is set",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress console logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse", help="Parse a JSON file into a record and print it back"
    )
    parse_parser.add_argument("file", help="Path to the JSON document")
    parse_parser.add_argument(
        "--type",
        dest="record_type",
        choices=sorted(RECORD_TYPES),
        default="issue",
        help="Record type of the document (default: issue)",
    )
    parse_parser.add_argument(
        "--compact", action="store_true", help="Print compact JSON instead of indented"
    )

    example_parser = subparsers.add_parser("example", help="Print a sample serialized issue")
    example_parser.add_argument(
        "--compact", action="store_true", help="Print compact JSON instead of indented"
    )

    return parser
