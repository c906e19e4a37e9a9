# dto_codec/application/codec/_object.py

"""Object codec: one JSON object node to/from one record

Parsing walks the record's FIELDS in declared order, looks each wire key up
in the object and dispatches on the field kind. The first failure stops the
walk; the record is freed before the error leaves this module, so callers
never see a half-populated record. Serialization builds one object node with
a child per field, in the same order.
"""

# Standard library imports
from contextlib import contextmanager
from logging import getLogger
from typing import Iterator

# Local imports
from dto_codec.application.codec._array import parse_array
from dto_codec.application.codec._array import serialize_array
from dto_codec.application.codec._scalar import parse_dynamic_string
from dto_codec.application.codec._scalar import parse_fixed_string
from dto_codec.application.codec._scalar import parse_number
from dto_codec.application.codec._scalar import serialize_dynamic_string
from dto_codec.application.codec._scalar import serialize_fixed_string
from dto_codec.application.codec._scalar import serialize_number
from dto_codec.core.domain.enums import FieldKind
from dto_codec.core.domain.enums import NodeKind
from dto_codec.core.domain.errors import CodecError
from dto_codec.core.domain.errors import MissingFieldError
from dto_codec.core.domain.errors import TypeMismatchError
from dto_codec.core.domain.fields import FieldSpec
from dto_codec.core.domain.record import Record
from dto_codec.core.types.json import JSONDict
from dto_codec.core.types.json import JSONType
from dto_codec.infrastructure.json_tree import MISSING
from dto_codec.infrastructure.json_tree import add_item_to_object
from dto_codec.infrastructure.json_tree import create_object
from dto_codec.infrastructure.json_tree import get_object_item
from dto_codec.infrastructure.json_tree import node_kind

logger = getLogger(__name__)


@contextmanager
def rollback_on_failure[R: Record](record: R) -> Iterator[R]:
    """Free ``record`` if the block raises, then let the error propagate"""
    try:
        yield record
    except Exception:
        logger.debug(f"Rolling back partially parsed {type(record).__name__}")
        record.free()
        raise


def parse_object[R: Record](node: JSONType, record: R) -> R:
    """Parse an object node into ``record``

    The record is initialized first. On success every field is populated;
    on failure the record is back in its initialized state.

    Raises:
        TypeMismatchError: If the node is not an object, or a field has the wrong kind.
        MissingFieldError: If a declared wire key is absent.
        CapacityExceededError: If a value does not fit its field.
    """
    record.init()

    kind = node_kind(node)
    if kind is not NodeKind.OBJECT:
        raise TypeMismatchError(f"Expected object for {type(record).__name__}, got {kind.value}")

    with rollback_on_failure(record):
        for spec in record.FIELDS:
            try:
                item = get_object_item(node, spec.wire_name)  # type: ignore[arg-type]
                if item is MISSING:
                    raise MissingFieldError(f"Missing required field '{spec.wire_name}'")
                _parse_field(item, spec, record)
            except CodecError as e:
                e.at(spec.wire_name)
                raise

    return record


def _parse_field(item: JSONType, spec: FieldSpec, record: Record) -> None:
    match spec.kind:
        case FieldKind.NUMBER:
            setattr(record, spec.attr, parse_number(item, spec))
        case FieldKind.DYNAMIC_STRING:
            setattr(record, spec.attr, parse_dynamic_string(item))
        case FieldKind.FIXED_STRING:
            setattr(record, spec.attr, parse_fixed_string(item, spec.max_length))
        case FieldKind.OBJECT:
            # Embedded by value: parse into the record already in place
            parse_object(item, getattr(record, spec.attr))
        case FieldKind.OBJECT_ARRAY:
            setattr(record, spec.attr, parse_array(item, spec))


def serialize_object(record: object, record_type: type[Record] | None = None) -> JSONDict:
    """Build an object node from a record

    Args:
        record: The record to serialize
        record_type: Expected record class, checked when given

    Raises:
        TypeMismatchError: If ``record`` is not a record of the expected type.
        MissingFieldError: If a string field is unset.
        CapacityExceededError: If a value does not fit its field.
    """
    expected = record_type or Record
    if not isinstance(record, expected):
        raise TypeMismatchError(f"Expected {expected.__name__}, got {type(record).__name__}")

    obj = create_object()
    for spec in record.FIELDS:
        try:
            item = _serialize_field(getattr(record, spec.attr, None), spec)
        except CodecError as e:
            e.at(spec.wire_name)
            raise
        add_item_to_object(obj, spec.wire_name, item)

    return obj


def _serialize_field(value: object, spec: FieldSpec) -> JSONType:
    match spec.kind:
        case FieldKind.NUMBER:
            return serialize_number(value, spec)
        case FieldKind.DYNAMIC_STRING:
            return serialize_dynamic_string(value)
        case FieldKind.FIXED_STRING:
            return serialize_fixed_string(value, spec.max_length)
        case FieldKind.OBJECT:
            return serialize_object(value, spec.record_type)
        case FieldKind.OBJECT_ARRAY:
            return serialize_array(value, spec)
