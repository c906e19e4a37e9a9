# dto_codec/core/domain/record.py

"""Record base class and lifecycle management"""

# Standard library imports
from typing import ClassVar

# Local imports
from dto_codec.core.domain.enums import FieldKind
from dto_codec.core.domain.fields import FieldSpec


class Record:
    """Base class for codec records

    Subclasses list their attributes in ``__slots__`` and declare the wire
    contract in ``FIELDS``. Lifecycle:

    - ``init()`` puts every field in its absent state (0, None, "", [] or an
      initialized embedded record). It never releases anything.
    - ``free()`` releases every owned value, depth first, then calls
      ``init()``. Calling it twice is the same as calling it once.

    Records compare equal field by field, recursing into nested records and
    lists, so a parsed record can be checked against the one it came from.
    """

    __slots__ = ("__weakref__",)

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = ()

    def __init__(self, **values: object) -> None:
        self.init()
        for attr, value in values.items():
            if attr not in self.field_names():
                raise TypeError(f"{type(self).__name__} has no field '{attr}'")
            setattr(self, attr, value)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(spec.attr for spec in cls.FIELDS)

    def init(self) -> None:
        """Reset every field to its absent value"""
        for spec in self.FIELDS:
            if spec.kind is FieldKind.OBJECT:
                # Embedded records are owned by value: reset in place
                current = getattr(self, spec.attr, None)
                if spec.record_type is not None and isinstance(current, spec.record_type):
                    current.init()
                    continue
            setattr(self, spec.attr, spec.absent_value())

    def free(self) -> None:
        """Release nested records and arrays, then re-initialize"""
        for spec in self.FIELDS:
            if spec.kind is FieldKind.OBJECT:
                nested = getattr(self, spec.attr, None)
                if isinstance(nested, Record):
                    nested.free()
            elif spec.kind is FieldKind.OBJECT_ARRAY:
                for element in getattr(self, spec.attr, None) or ():
                    element.free()
        self.init()

    def is_initialized(self) -> bool:
        """Check whether every field holds its absent value"""
        return self == type(self)()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, attr) == getattr(other, attr) for attr in self.field_names())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{attr}={getattr(self, attr)!r}" for attr in self.field_names())
        return f"{type(self).__name__}({fields})"
