# dto_codec/core/domain/__init__.py

"""Core domain models: records, field declarations and codec errors"""

# Local imports
from dto_codec.core.domain.enums import ErrorKind
from dto_codec.core.domain.enums import FieldKind
from dto_codec.core.domain.enums import NodeKind
from dto_codec.core.domain.errors import AllocationFailureError
from dto_codec.core.domain.errors import CapacityExceededError
from dto_codec.core.domain.errors import CodecError
from dto_codec.core.domain.errors import MalformedInputError
from dto_codec.core.domain.errors import MissingFieldError
from dto_codec.core.domain.errors import TypeMismatchError
from dto_codec.core.domain.fields import FieldSpec
from dto_codec.core.domain.github_issues import Issue
from dto_codec.core.domain.github_issues import Label
from dto_codec.core.domain.github_issues import User
from dto_codec.core.domain.record import Record

__all__ = [
    "AllocationFailureError",
    "CapacityExceededError",
    "CodecError",
    "ErrorKind",
    "FieldKind",
    "FieldSpec",
    "Issue",
    "Label",
    "MalformedInputError",
    "MissingFieldError",
    "NodeKind",
    "Record",
    "TypeMismatchError",
    "User",
]
