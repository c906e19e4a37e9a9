# dto_codec/core/domain/fields.py

"""Field declarations for record types

A record type declares its wire contract as an ordered tuple of FieldSpec.
Each spec pairs the JSON key (``wire_name``) with the in-memory attribute
(``attr``) explicitly, so renames such as ``login`` -> ``name`` are part of
the record's declaration rather than a naming convention.
"""

# Standard library imports
from dataclasses import dataclass
from typing import TYPE_CHECKING

# Local imports
from dto_codec.core.domain.enums import FieldKind

if TYPE_CHECKING:
    # Local imports
    from dto_codec.core.domain.record import Record


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One field of a record: wire key, attribute and storage kind"""

    wire_name: str
    attr: str
    kind: FieldKind
    record_type: "type[Record] | None" = None
    max_length: int = 0  # FIXED_STRING only, in UTF-8 bytes
    bits: int = 0  # NUMBER only, signed width

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def absent_value(self) -> object:
        """Value a freshly initialized record holds for this field"""
        match self.kind:
            case FieldKind.NUMBER:
                return 0
            case FieldKind.DYNAMIC_STRING:
                return None
            case FieldKind.FIXED_STRING:
                return ""
            case FieldKind.OBJECT_ARRAY:
                return []
            case FieldKind.OBJECT:
                assert self.record_type is not None
                return self.record_type()


def number(wire_name: str, attr: str, bits: int = 32) -> FieldSpec:
    """Signed integer field stored in ``bits`` bits"""
    if bits < 2:
        raise ValueError(f"Number field '{attr}' needs at least 2 bits, got {bits}")
    return FieldSpec(wire_name=wire_name, attr=attr, kind=FieldKind.NUMBER, bits=bits)


def dynamic_string(wire_name: str, attr: str) -> FieldSpec:
    return FieldSpec(wire_name=wire_name, attr=attr, kind=FieldKind.DYNAMIC_STRING)


def fixed_string(wire_name: str, attr: str, max_length: int) -> FieldSpec:
    """Bounded string field holding at most ``max_length`` UTF-8 bytes"""
    if max_length < 0:
        raise ValueError(f"Fixed string field '{attr}' has negative capacity {max_length}")
    return FieldSpec(
        wire_name=wire_name, attr=attr, kind=FieldKind.FIXED_STRING, max_length=max_length
    )


def embedded(wire_name: str, attr: str, record_type: "type[Record]") -> FieldSpec:
    """Nested record owned by value"""
    return FieldSpec(
        wire_name=wire_name, attr=attr, kind=FieldKind.OBJECT, record_type=record_type
    )


def array_of(wire_name: str, attr: str, record_type: "type[Record]") -> FieldSpec:
    """Owned, homogeneous list of nested records"""
    return FieldSpec(
        wire_name=wire_name, attr=attr, kind=FieldKind.OBJECT_ARRAY, record_type=record_type
    )
