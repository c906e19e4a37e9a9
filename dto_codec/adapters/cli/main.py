# dto_codec/adapters/cli/main.py

"""
DTO Codec - CLI Main Module

Reads a JSON document, parses it into a typed record and prints it back,
or prints a sample issue built in code.
"""

# Standard library imports
from argparse import Namespace
from logging import getLogger
from pathlib import Path

# Local imports
from dto_codec.adapters.cli.parser import RECORD_TYPES
from dto_codec.adapters.cli.parser import create_argument_parser
from dto_codec.application.codec import parse
from dto_codec.application.codec import serialize
from dto_codec.core.domain.github_issues import Issue
from dto_codec.core.domain.github_issues import Label
from dto_codec.core.domain.github_issues import User
from dto_codec.core.domain.record import Record
from dto_codec.core.types.results import is_err
from dto_codec.infrastructure.config import ConfigLoader
from dto_codec.infrastructure.config import get_config
from dto_codec.infrastructure.logging import setup_logging

logger = getLogger(__name__)

EXIT_OK = 0
EXIT_CODEC_FAILURE = 1
EXIT_IO_FAILURE = 2


def build_example_issue() -> Issue:
    """Sample issue with two labels and no assignees"""
    return Issue(
        number=1234,
        url="http://github.com/issue/1234",
        title="Example issue",
        creator=User(name="user1", url="http://github.com/user/user1"),
        assignees=[],
        labels=[
            Label(name="issue-label", color="e7e7e7"),
            Label(name="another-issue-label", color="ffffff"),
        ],
    )


def _resolve_logging(args: Namespace, config: ConfigLoader) -> tuple[str, str | None]:
    """Command-line logging options win over the loaded configuration"""
    logging_config = config.logging
    log_level = args.log_level or ("DEBUG" if logging_config.debug else logging_config.log_level)
    log_file = args.log_file or logging_config.log_file
    return log_level, log_file


def _print_record(record: Record, compact: bool, config: ConfigLoader) -> int:
    result = serialize(
        record,
        pretty=not compact,
        indent=config.output.indent,
        ensure_ascii=config.output.ensure_ascii,
    )
    if is_err(result):
        logger.error(f"Failed to serialize {type(record).__name__}: {result}")
        return EXIT_CODEC_FAILURE

    print(result.value)
    return EXIT_OK


def _run_parse(args: Namespace, config: ConfigLoader) -> int:
    try:
        text = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {args.file}: {e}")
        return EXIT_IO_FAILURE

    record_type = RECORD_TYPES[args.record_type]
    result = parse(record_type, text)
    if is_err(result):
        logger.error(f"Failed to parse {args.record_type} from {args.file}: {result}")
        return EXIT_CODEC_FAILURE

    record = result.value
    if isinstance(record, Issue):
        logger.info(f"Parsed issue {record.title}")
    else:
        logger.info(f"Parsed {args.record_type} from {args.file}")

    try:
        return _print_record(record, args.compact, config)
    finally:
        record.free()


def _run_example(args: Namespace, config: ConfigLoader) -> int:
    issue = build_example_issue()
    try:
        return _print_record(issue, args.compact, config)
    finally:
        issue.free()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = get_config(args.config)
    log_level, log_file = _resolve_logging(args, config)

    setup_logging(
        log_file=log_file,
        log_level=log_level,
        silent=args.silent,
        disable_file_logging=log_file is None and not args.log_to_file,
    )
    logger.debug(f"Running '{args.command}' with output indent={config.output.indent}")

    if args.command == "parse":
        return _run_parse(args, config)
    return _run_example(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
