# dto_codec/application/codec/_array.py

"""Array codec: one JSON array node to/from a list of records"""

# Local imports
from dto_codec.core.domain.enums import NodeKind
from dto_codec.core.domain.errors import CodecError
from dto_codec.core.domain.errors import TypeMismatchError
from dto_codec.core.domain.fields import FieldSpec
from dto_codec.core.domain.record import Record
from dto_codec.core.types.json import JSONList
from dto_codec.core.types.json import JSONType
from dto_codec.infrastructure.json_tree import add_item_to_array
from dto_codec.infrastructure.json_tree import create_array
from dto_codec.infrastructure.json_tree import get_array_item
from dto_codec.infrastructure.json_tree import get_array_size
from dto_codec.infrastructure.json_tree import node_kind


def parse_array(node: JSONType, spec: FieldSpec) -> list[Record]:
    """Parse an array node into a new list of ``spec.record_type``

    Elements are parsed in order and appended one at a time. If an element
    fails, the list built so far is dropped and never reaches the enclosing
    record; the failing element has already rolled itself back.

    Raises:
        TypeMismatchError: If the node is not an array.
        CodecError: The first element failure, with the index in its path.
    """
    # Local imports
    from dto_codec.application.codec._object import parse_object

    kind = node_kind(node)
    if kind is not NodeKind.ARRAY:
        raise TypeMismatchError(f"Expected array, got {kind.value}")

    assert spec.record_type is not None
    elements: list[Record] = []
    for index in range(get_array_size(node)):  # type: ignore[arg-type]
        try:
            item = get_array_item(node, index)  # type: ignore[arg-type]
            element = parse_object(item, spec.record_type())
        except CodecError as e:
            e.at(index)
            raise
        elements.append(element)

    return elements


def serialize_array(records: object, spec: FieldSpec) -> JSONList:
    """Build an array node with one serialized child per record, in order"""
    # Local imports
    from dto_codec.application.codec._object import serialize_object

    if not isinstance(records, (list, tuple)):
        raise TypeMismatchError(f"Expected a list of records, got {type(records).__name__}")

    array = create_array()
    for index, record in enumerate(records):
        try:
            item = serialize_object(record, spec.record_type)
        except CodecError as e:
            e.at(index)
            raise
        add_item_to_array(array, item)

    return array
