# dto_codec/adapters/api/_github_issues.py

"""Per-type codec functions for the GitHub issue records

Each record type gets the same five operations: init, free, parse,
serialize and serialize_pretty. They are thin, typed wrappers over the
generic entry points.
"""

# Local imports
from dto_codec.application.codec import free
from dto_codec.application.codec import init
from dto_codec.application.codec import parse
from dto_codec.application.codec import serialize
from dto_codec.application.codec import serialize_pretty
from dto_codec.core.domain.github_issues import Issue
from dto_codec.core.domain.github_issues import Label
from dto_codec.core.domain.github_issues import User
from dto_codec.core.types.results import Result

# ============================================================================
# User
# ============================================================================


def user_init(out: User) -> None:
    init(out)


def user_free(obj: User) -> None:
    free(obj)


def user_parse(json_text: str | bytes, out: User | None = None) -> Result[User]:
    """Parse a user. The caller should call user_free on the result when done."""
    return parse(User, json_text, out)


def user_serialize(obj: User) -> Result[str]:
    """Serialize a user to compact JSON"""
    return serialize(obj)


def user_serialize_pretty(obj: User) -> Result[str]:
    """Serialize a user to indented JSON"""
    return serialize_pretty(obj)


# ============================================================================
# Label
# ============================================================================


def label_init(out: Label) -> None:
    init(out)


def label_free(obj: Label) -> None:
    free(obj)


def label_parse(json_text: str | bytes, out: Label | None = None) -> Result[Label]:
    """Parse a label. The caller should call label_free on the result when done."""
    return parse(Label, json_text, out)


def label_serialize(obj: Label) -> Result[str]:
    """Serialize a label to compact JSON"""
    return serialize(obj)


def label_serialize_pretty(obj: Label) -> Result[str]:
    """Serialize a label to indented JSON"""
    return serialize_pretty(obj)


# ============================================================================
# Issue
# ============================================================================


def issue_init(out: Issue) -> None:
    init(out)


def issue_free(obj: Issue) -> None:
    free(obj)


def issue_parse(json_text: str | bytes, out: Issue | None = None) -> Result[Issue]:
    """Parse an issue. The caller should call issue_free on the result when done."""
    return parse(Issue, json_text, out)


def issue_serialize(obj: Issue) -> Result[str]:
    """Serialize an issue to compact JSON"""
    return serialize(obj)


def issue_serialize_pretty(obj: Issue) -> Result[str]:
    """Serialize an issue to indented JSON"""
    return serialize_pretty(obj)
