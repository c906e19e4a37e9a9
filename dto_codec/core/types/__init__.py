# dto_codec/core/types/__init__.py

"""Type definitions for the DTO codec

This package contains the JSON type aliases and the result types returned
by the public entry points.
"""

# Local imports
from dto_codec.core.types.json import JSONDict
from dto_codec.core.types.json import JSONList
from dto_codec.core.types.json import JSONPrimitive
from dto_codec.core.types.json import JSONType
from dto_codec.core.types.results import Err
from dto_codec.core.types.results import Ok
from dto_codec.core.types.results import Result
from dto_codec.core.types.results import is_err
from dto_codec.core.types.results import is_ok

__all__ = [
    "Err",
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
