# dto_codec/core/types/results.py

"""Result types returned by the codec entry points

Every public parse/serialize call returns ``Ok`` or ``Err`` instead of a
success flag plus output parameter. ``Err`` carries the failure kind and
the path of the field that failed, and holds no reference to the input or
to any partially built value.
"""

# Standard library imports
from typing import Callable
from typing import Literal
from typing import NoReturn
from typing import TypeIs

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from dto_codec.core.domain.enums import ErrorKind
from dto_codec.core.domain.errors import CodecError
from dto_codec.core.domain.errors import error_for_kind


class Ok[T](BaseModel):
    """Success result."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: Literal[True] = True
    value: T

    def unwrap(self) -> T:
        return self.value

    def map[U](self, func: Callable[[T], U]) -> "Ok[U]":
        """Map function over success value."""
        return Ok(value=func(self.value))


class Err(BaseModel):
    """Failure result with a tagged reason."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    kind: ErrorKind
    error: str
    path: str = Field(default="", description="Pointer to the failing field, '' for the root")

    @classmethod
    def from_exception(cls, exc: CodecError) -> "Err":
        return cls(kind=exc.kind, error=exc.message, path=exc.path)

    def unwrap(self) -> NoReturn:
        """Raise the failure as the matching CodecError"""
        raise error_for_kind(self.kind, self.error, self.path)

    def map[U](self, func: Callable[[object], U]) -> "Err":
        """Map has no effect on errors."""
        return self

    def __str__(self) -> str:
        if self.path:
            return f"{self.kind.value} at {self.path}: {self.error}"
        return f"{self.kind.value}: {self.error}"


type Result[T] = Ok[T] | Err


def is_ok[T](result: Result[T]) -> TypeIs[Ok[T]]:
    """Type guard for successful results."""
    return result.ok


def is_err[T](result: Result[T]) -> TypeIs[Err]:
    """Type guard for failed results."""
    return not result.ok


__all__ = ["Ok", "Err", "Result", "is_ok", "is_err"]
