# dto_codec/core/domain/github_issues.py

"""GitHub issue records: User, Label and Issue"""

# Standard library imports
from typing import ClassVar

# Local imports
from dto_codec.core.domain.fields import FieldSpec
from dto_codec.core.domain.fields import array_of
from dto_codec.core.domain.fields import dynamic_string
from dto_codec.core.domain.fields import embedded
from dto_codec.core.domain.fields import fixed_string
from dto_codec.core.domain.fields import number
from dto_codec.core.domain.record import Record

# Hex color without the leading '#', e.g. "e7e7e7"
LABEL_COLOR_LENGTH = 6


class User(Record):
    """A GitHub account. The login travels on the wire as ``login``."""

    __slots__ = ("name", "url")

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = (
        dynamic_string("login", "name"),
        dynamic_string("url", "url"),
    )

    name: str | None
    url: str | None


class Label(Record):
    """An issue label with a fixed-width hex color"""

    __slots__ = ("name", "color")

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = (
        dynamic_string("name", "name"),
        fixed_string("color", "color", max_length=LABEL_COLOR_LENGTH),
    )

    name: str | None
    color: str


class Issue(Record):
    """A GitHub issue

    ``creator`` is embedded by value and appears on the wire as ``user``.
    The assignee and label counts are derived from the lists, so they can
    never disagree with the stored elements.
    """

    __slots__ = ("number", "url", "title", "creator", "assignees", "labels")

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = (
        number("number", "number", bits=32),
        dynamic_string("url", "url"),
        dynamic_string("title", "title"),
        embedded("user", "creator", User),
        array_of("assignees", "assignees", User),
        array_of("labels", "labels", Label),
    )

    number: int
    url: str | None
    title: str | None
    creator: User
    assignees: list[User]
    labels: list[Label]

    @property
    def assignees_cnt(self) -> int:
        return len(self.assignees)

    @property
    def labels_cnt(self) -> int:
        return len(self.labels)
