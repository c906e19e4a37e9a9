# dto_codec/application/codec/__init__.py

"""Record codec: scalar, object and array conversion plus text entry points"""

# Local imports
from dto_codec.application.codec._array import parse_array
from dto_codec.application.codec._array import serialize_array
from dto_codec.application.codec._entry_points import free
from dto_codec.application.codec._entry_points import init
from dto_codec.application.codec._entry_points import parse
from dto_codec.application.codec._entry_points import serialize
from dto_codec.application.codec._entry_points import serialize_pretty
from dto_codec.application.codec._object import parse_object
from dto_codec.application.codec._object import rollback_on_failure
from dto_codec.application.codec._object import serialize_object

__all__ = [
    "free",
    "init",
    "parse",
    "parse_array",
    "parse_object",
    "rollback_on_failure",
    "serialize",
    "serialize_array",
    "serialize_object",
    "serialize_pretty",
]
