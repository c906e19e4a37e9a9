# tests/unit/core/domain/test_fields.py

"""Tests for field declarations"""

# Third party imports
from pytest import raises

# Local imports
from dto_codec.core.domain.enums import FieldKind
from dto_codec.core.domain.fields import fixed_string
from dto_codec.core.domain.fields import number
from dto_codec.core.domain.github_issues import Issue
from dto_codec.core.domain.github_issues import Label
from dto_codec.core.domain.github_issues import User


class TestFieldSpec:
    """Test FieldSpec helpers"""

    def test_number_range_for_32_bits(self):
        spec = number("number", "number", bits=32)

        assert spec.min_value == -2147483648
        assert spec.max_value == 2147483647

    def test_number_range_for_8_bits(self):
        spec = number("n", "n", bits=8)

        assert spec.min_value == -128
        assert spec.max_value == 127

    def test_number_needs_sign_bit(self):
        with raises(ValueError):
            number("n", "n", bits=1)

    def test_fixed_string_rejects_negative_capacity(self):
        with raises(ValueError):
            fixed_string("c", "c", max_length=-1)

    def test_field_specs_are_immutable(self):
        spec = number("n", "n")

        with raises(AttributeError):
            spec.bits = 64  # type: ignore[misc]


class TestWireContract:
    """Test the declared wire names of each record"""

    def test_user_login_maps_to_name(self):
        wire_to_attr = {spec.wire_name: spec.attr for spec in User.FIELDS}

        assert wire_to_attr == {"login": "name", "url": "url"}

    def test_label_fields(self):
        color = Label.FIELDS[1]

        assert color.kind is FieldKind.FIXED_STRING
        assert color.max_length == 6

    def test_issue_field_order_and_names(self):
        assert [spec.wire_name for spec in Issue.FIELDS] == [
            "number",
            "url",
            "title",
            "user",
            "assignees",
            "labels",
        ]
        assert [spec.attr for spec in Issue.FIELDS] == [
            "number",
            "url",
            "title",
            "creator",
            "assignees",
            "labels",
        ]

    def test_issue_nested_types(self):
        kinds = {spec.attr: (spec.kind, spec.record_type) for spec in Issue.FIELDS}

        assert kinds["creator"] == (FieldKind.OBJECT, User)
        assert kinds["assignees"] == (FieldKind.OBJECT_ARRAY, User)
        assert kinds["labels"] == (FieldKind.OBJECT_ARRAY, Label)
