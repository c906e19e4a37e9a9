# dto_codec/core/domain/errors.py

"""Codec exception hierarchy

Each concrete error maps to exactly one ErrorKind. Errors are raised at the
point of detection and propagate unchanged through the object and array
codecs; only the top-level entry points turn them into result values.
"""

# Local imports
from dto_codec.core.domain.enums import ErrorKind


class CodecError(Exception):
    """Base class for every failure raised by the codec"""

    kind: ErrorKind = ErrorKind.TYPE_MISMATCH

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def at(self, segment: str | int) -> "CodecError":
        """Prefix the error path with the enclosing key or index

        Called while the error unwinds through nested codecs, so the final
        path reads from the root down (e.g. ``/assignees/1/url``).
        """
        self.path = f"/{segment}{self.path}"
        return self

    def __str__(self) -> str:
        if self.path:
            return f"{self.kind.value} at {self.path}: {self.message}"
        return f"{self.kind.value}: {self.message}"


class MalformedInputError(CodecError):
    kind = ErrorKind.MALFORMED_INPUT


class MissingFieldError(CodecError):
    kind = ErrorKind.MISSING_FIELD


class TypeMismatchError(CodecError):
    kind = ErrorKind.TYPE_MISMATCH


class CapacityExceededError(CodecError):
    kind = ErrorKind.CAPACITY_EXCEEDED


class AllocationFailureError(CodecError):
    kind = ErrorKind.ALLOCATION_FAILURE


ERRORS_BY_KIND: dict[ErrorKind, type[CodecError]] = {
    ErrorKind.MALFORMED_INPUT: MalformedInputError,
    ErrorKind.MISSING_FIELD: MissingFieldError,
    ErrorKind.TYPE_MISMATCH: TypeMismatchError,
    ErrorKind.CAPACITY_EXCEEDED: CapacityExceededError,
    ErrorKind.ALLOCATION_FAILURE: AllocationFailureError,
}


def error_for_kind(kind: ErrorKind, message: str, path: str = "") -> CodecError:
    """Build the concrete error class for a failure kind"""
    return ERRORS_BY_KIND[kind](message, path)
