# dto_codec/application/codec/_scalar.py

"""Scalar codec: numbers, dynamic strings and fixed-capacity strings"""

# Standard library imports
from math import isinf

# Local imports
from dto_codec.core.domain.enums import NodeKind
from dto_codec.core.domain.errors import CapacityExceededError
from dto_codec.core.domain.errors import MissingFieldError
from dto_codec.core.domain.errors import TypeMismatchError
from dto_codec.core.domain.fields import FieldSpec
from dto_codec.core.types.json import JSONType
from dto_codec.infrastructure.json_tree import create_number
from dto_codec.infrastructure.json_tree import create_string
from dto_codec.infrastructure.json_tree import node_kind


def _check_range(value: int, spec: FieldSpec) -> int:
    if not spec.min_value <= value <= spec.max_value:
        raise CapacityExceededError(
            f"{value} does not fit in a {spec.bits}-bit signed integer "
            f"[{spec.min_value}, {spec.max_value}]"
        )
    return value


def _encoded_length(text: str) -> int:
    return len(text.encode("utf-8", errors="surrogatepass"))


# ============================================================================
# Parsing
# ============================================================================


def parse_number(node: JSONType, spec: FieldSpec) -> int:
    """Parse a number node into a signed integer of the field's width

    Integral floats such as ``12.0`` are accepted. Fractional values are a
    type mismatch and out-of-range values exceed the field's capacity;
    neither is ever truncated.
    """
    kind = node_kind(node)
    if kind is not NodeKind.NUMBER:
        raise TypeMismatchError(f"Expected number, got {kind.value}")

    if isinstance(node, float) and isinf(node):
        # Literals such as 1e400 overflow to inf while decoding
        raise CapacityExceededError(
            f"{node!r} does not fit in a {spec.bits}-bit signed integer "
            f"[{spec.min_value}, {spec.max_value}]"
        )

    if isinstance(node, float) and not node.is_integer():
        raise TypeMismatchError(f"Expected an integer, got {node!r}")

    return _check_range(int(node), spec)  # type: ignore[arg-type]


def parse_dynamic_string(node: JSONType) -> str:
    """Parse a string node into an owned string"""
    kind = node_kind(node)
    if kind is not NodeKind.STRING:
        raise TypeMismatchError(f"Expected string, got {kind.value}")
    return str(node)


def parse_fixed_string(node: JSONType, max_length: int) -> str:
    """Parse a string node into bounded storage

    Raises:
        TypeMismatchError: If the node is not a string.
        CapacityExceededError: If the UTF-8 text is longer than max_length.
    """
    kind = node_kind(node)
    if kind is not NodeKind.STRING:
        raise TypeMismatchError(f"Expected string, got {kind.value}")

    text = str(node)
    length = _encoded_length(text)
    if length > max_length:
        raise CapacityExceededError(
            f"String of {length} bytes exceeds capacity of {max_length}"
        )
    return text


# ============================================================================
# Serialization
# ============================================================================


def serialize_number(value: object, spec: FieldSpec) -> int:
    # bool subclasses int but is not a number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(f"Expected int, got {type(value).__name__}")
    return create_number(_check_range(value, spec))


def serialize_dynamic_string(value: object) -> str:
    if value is None:
        raise MissingFieldError("String field is not set")
    if not isinstance(value, str):
        raise TypeMismatchError(f"Expected str, got {type(value).__name__}")
    return create_string(value)


def serialize_fixed_string(value: object, max_length: int) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError(f"Expected str, got {type(value).__name__}")
    length = _encoded_length(value)
    if length > max_length:
        raise CapacityExceededError(
            f"String of {length} bytes exceeds capacity of {max_length}"
        )
    return create_string(value)
