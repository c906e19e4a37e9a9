# tests/adapters/cli/test_main_cli.py

"""Tests for the dto-codec command line"""

# Standard library imports
from json import dumps
from json import loads
from logging import DEBUG
from logging import ERROR
from logging import FileHandler
from logging import StreamHandler
from logging import WARNING
from logging import getLogger

# Third party imports
from pytest import fixture
from pytest import raises

# Local imports
from dto_codec.adapters.cli import build_example_issue
from dto_codec.adapters.cli import create_argument_parser
from dto_codec.adapters.cli import main
from dto_codec.adapters.cli.main import EXIT_CODEC_FAILURE
from dto_codec.adapters.cli.main import EXIT_IO_FAILURE
from dto_codec.adapters.cli.main import EXIT_OK

EXAMPLE_WIRE = {
    "number": 1234,
    "url": "http://github.com/issue/1234",
    "title": "Example issue",
    "user": {"login": "user1", "url": "http://github.com/user/user1"},
    "assignees": [],
    "labels": [
        {"name": "issue-label", "color": "e7e7e7"},
        {"name": "another-issue-label", "color": "ffffff"},
    ],
}


@fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run from an empty directory so no dto_codec.json is picked up"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestArgumentParser:
    def test_parse_defaults(self, in_tmp_dir):
        args = create_argument_parser().parse_args(["parse", "issue.json"])

        assert args.command == "parse"
        assert args.file == "issue.json"
        assert args.record_type == "issue"
        assert args.compact is False
        assert args.log_level is None
        assert args.log_file is None
        assert args.log_to_file is False
        assert args.silent is False

    def test_record_type_choices(self, in_tmp_dir):
        with raises(SystemExit):
            create_argument_parser().parse_args(["parse", "x.json", "--type", "repo"])

    def test_command_required(self, in_tmp_dir):
        with raises(SystemExit):
            create_argument_parser().parse_args([])

    def test_parser_does_not_load_config(self, in_tmp_dir):
        """Logging defaults are left for main to fill in from --config"""
        (in_tmp_dir / "dto_codec.json").write_text(
            dumps({"logging": {"debug": True}}), encoding="utf-8"
        )

        args = create_argument_parser().parse_args(["example"])

        assert args.log_level is None


class TestExampleCommand:
    def test_build_example_issue(self):
        issue = build_example_issue()

        assert issue.assignees_cnt == 0
        assert [label.color for label in issue.labels] == ["e7e7e7", "ffffff"]

    def test_prints_pretty_example(self, in_tmp_dir, capsys):
        assert main(["--silent", "example"]) == EXIT_OK

        out = capsys.readouterr().out
        assert out.startswith('{\n  "number": 1234,')
        assert loads(out) == EXAMPLE_WIRE

    def test_prints_compact_example(self, in_tmp_dir, capsys):
        assert main(["--silent", "example", "--compact"]) == EXIT_OK

        out = capsys.readouterr().out
        assert out == dumps(EXAMPLE_WIRE, separators=(",", ":")) + "\n"

    def test_config_indent(self, in_tmp_dir, capsys):
        config = in_tmp_dir / "custom.json"
        config.write_text(dumps({"output": {"indent": 4}}), encoding="utf-8")

        assert main(["--silent", "--config", str(config), "example"]) == EXIT_OK

        assert capsys.readouterr().out.startswith('{\n    "number": 1234,')


class TestParseCommand:
    """Test reading, parsing and echoing a document"""

    def test_parse_issue(self, in_tmp_dir, capsys, issue_wire):
        path = in_tmp_dir / "issue.json"
        path.write_text(dumps(issue_wire), encoding="utf-8")

        assert main(["--silent", "parse", str(path)]) == EXIT_OK

        assert loads(capsys.readouterr().out) == issue_wire

    def test_parse_user_compact(self, in_tmp_dir, capsys, user_wire):
        path = in_tmp_dir / "user.json"
        path.write_text(dumps(user_wire), encoding="utf-8")

        code = main(["--silent", "parse", str(path), "--type", "user", "--compact"])

        assert code == EXIT_OK
        assert capsys.readouterr().out == dumps(user_wire, separators=(",", ":")) + "\n"

    def test_codec_failure(self, in_tmp_dir, capsys, issue_wire):
        del issue_wire["assignees"][1]["url"]
        path = in_tmp_dir / "issue.json"
        path.write_text(dumps(issue_wire), encoding="utf-8")

        assert main(["--log-level", "ERROR", "parse", str(path)]) == EXIT_CODEC_FAILURE

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "missing_field at /assignees/1/url" in captured.err

    def test_malformed_file(self, in_tmp_dir, capsys):
        path = in_tmp_dir / "broken.json"
        path.write_text("{", encoding="utf-8")

        assert main(["--silent", "parse", str(path)]) == EXIT_CODEC_FAILURE
        assert capsys.readouterr().out == ""

    def test_missing_file(self, in_tmp_dir):
        assert main(["--silent", "parse", str(in_tmp_dir / "absent.json")]) == EXIT_IO_FAILURE

    def test_log_file(self, in_tmp_dir, issue_wire):
        path = in_tmp_dir / "issue.json"
        path.write_text(dumps(issue_wire), encoding="utf-8")
        log_file = in_tmp_dir / "run.log"

        assert main(["--silent", "--log-file", str(log_file), "parse", str(path)]) == EXIT_OK

        for handler in getLogger().handlers:
            handler.flush()
        assert "Parsed issue Found a bug" in log_file.read_text(encoding="utf-8")


def _console_level():
    (handler,) = [h for h in getLogger().handlers if type(h) is StreamHandler]
    return handler.level


def _close_file_handlers():
    for handler in getLogger().handlers:
        if isinstance(handler, FileHandler):
            handler.close()


class TestLoggingConfiguration:
    """Test how --config and the logging flags combine"""

    def test_config_file_logging_section_applies(self, in_tmp_dir, capsys):
        log_file = in_tmp_dir / "x.log"
        config = in_tmp_dir / "custom.json"
        config.write_text(
            dumps({"logging": {"debug": True, "log_file": str(log_file)}}), encoding="utf-8"
        )

        assert main(["--config", str(config), "example"]) == EXIT_OK

        assert _console_level() == DEBUG
        _close_file_handlers()
        assert "Logging to file" in log_file.read_text(encoding="utf-8")

    def test_config_log_level(self, in_tmp_dir, capsys):
        config = in_tmp_dir / "custom.json"
        config.write_text(dumps({"logging": {"log_level": "warning"}}), encoding="utf-8")

        assert main(["--config", str(config), "example"]) == EXIT_OK

        assert _console_level() == WARNING

    def test_default_config_file_logging_section(self, in_tmp_dir, capsys):
        (in_tmp_dir / "dto_codec.json").write_text(
            dumps({"logging": {"log_level": "ERROR"}}), encoding="utf-8"
        )

        assert main(["example"]) == EXIT_OK

        assert _console_level() == ERROR

    def test_flags_override_config(self, in_tmp_dir, capsys):
        config_log = in_tmp_dir / "config.log"
        flag_log = in_tmp_dir / "flag.log"
        config = in_tmp_dir / "custom.json"
        config.write_text(
            dumps({"logging": {"debug": True, "log_file": str(config_log)}}), encoding="utf-8"
        )

        argv = ["--config", str(config), "--log-level", "ERROR", "--log-file", str(flag_log)]
        code = main([*argv, "example"])

        assert code == EXIT_OK
        assert _console_level() == ERROR
        _close_file_handlers()
        assert flag_log.exists()
        assert not config_log.exists()

    def test_no_log_file_by_default(self, in_tmp_dir, capsys):
        assert main(["--silent", "example"]) == EXIT_OK

        assert not (in_tmp_dir / "logs").exists()

    def test_log_to_file_uses_default_path(self, in_tmp_dir, capsys):
        assert main(["--silent", "--log-to-file", "example"]) == EXIT_OK

        _close_file_handlers()
        (log_file,) = (in_tmp_dir / "logs").glob("dto_codec_*.log")
        assert "Logging to file" in log_file.read_text(encoding="utf-8")
