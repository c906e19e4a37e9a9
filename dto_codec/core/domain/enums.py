# dto_codec/core/domain/enums.py

"""Domain enumerations for the DTO codec"""

# Standard library imports
from enum import Enum


class FieldKind(Enum):
    """How a record field is stored and which codec handles it"""

    NUMBER = "number"  # Signed integer of a declared bit width
    DYNAMIC_STRING = "dynamic_string"  # Owned, unbounded text; absent is None
    FIXED_STRING = "fixed_string"  # Bounded text; absent is ""
    OBJECT = "object"  # Embedded record owned by value
    OBJECT_ARRAY = "object_array"  # Owned list of records


class NodeKind(Enum):
    """Runtime kind of a JSON tree node"""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class ErrorKind(Enum):
    """Reason a parse or serialize operation failed"""

    MALFORMED_INPUT = "malformed_input"  # Text is not valid JSON
    MISSING_FIELD = "missing_field"  # Required key absent (or value absent on serialize)
    TYPE_MISMATCH = "type_mismatch"  # Node kind does not match the field kind
    CAPACITY_EXCEEDED = "capacity_exceeded"  # Value does not fit the declared storage
    ALLOCATION_FAILURE = "allocation_failure"  # Interpreter ran out of memory
