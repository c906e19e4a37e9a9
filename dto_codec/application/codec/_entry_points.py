# dto_codec/application/codec/_entry_points.py

"""Top-level codec entry points: text in, record out, and back

These wrap the object codec with tree construction and rendering. Errors
raised anywhere below are turned into ``Err`` here; the output record is
freed on every failure path and only full successes return a value.
"""

# Standard library imports
from logging import getLogger

# Local imports
from dto_codec.application.codec._object import parse_object
from dto_codec.application.codec._object import serialize_object
from dto_codec.core.domain.enums import ErrorKind
from dto_codec.core.domain.errors import CodecError
from dto_codec.core.domain.record import Record
from dto_codec.core.types.results import Err
from dto_codec.core.types.results import Ok
from dto_codec.core.types.results import Result
from dto_codec.infrastructure.json_tree import parse_tree
from dto_codec.infrastructure.json_tree import render

logger = getLogger(__name__)


def init(record: Record) -> None:
    """Reset every field of ``record`` to its absent value"""
    record.init()


def free(record: Record) -> None:
    """Release everything ``record`` owns and re-initialize it"""
    record.free()


def parse[R: Record](
    record_type: type[R], text: str | bytes, out: R | None = None
) -> Result[R]:
    """Parse JSON text into a record

    Args:
        record_type: Record class to parse into
        text: JSON document
        out: Existing record to reuse; a new one is created if None

    Returns:
        Ok holding the populated record, or Err with the failure kind and path.
        On Err, ``out`` (if given) is left initialized.
    """
    record = out if out is not None else record_type()
    if not isinstance(record, record_type):
        raise TypeError(f"out must be a {record_type.__name__}, got {type(record).__name__}")

    record.init()
    try:
        tree = parse_tree(text)
        parse_object(tree, record)
    except CodecError as e:
        record.free()
        logger.debug(f"Failed to parse {record_type.__name__}: {e}")
        return Err.from_exception(e)
    except MemoryError:
        record.free()
        logger.debug(f"Ran out of memory parsing {record_type.__name__}")
        return Err(kind=ErrorKind.ALLOCATION_FAILURE, error="Out of memory while parsing")

    return Ok(value=record)


def serialize(
    record: Record,
    pretty: bool = False,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> Result[str]:
    """Serialize a record to JSON text

    Args:
        record: Record to serialize
        pretty: If True, render indented text; compact otherwise
        indent: Spaces per level for pretty output (default 2)
        ensure_ascii: Escape non-ASCII characters instead of emitting them as-is

    Returns:
        Ok holding the text, or Err with the failure kind and path.
    """
    try:
        tree = serialize_object(record)
        text = render(tree, pretty=pretty, indent=indent, ensure_ascii=ensure_ascii)
    except CodecError as e:
        logger.debug(f"Failed to serialize {type(record).__name__}: {e}")
        return Err.from_exception(e)
    except MemoryError:
        logger.debug(f"Ran out of memory serializing {type(record).__name__}")
        return Err(kind=ErrorKind.ALLOCATION_FAILURE, error="Out of memory while serializing")

    return Ok(value=text)


def serialize_pretty(
    record: Record, indent: int = 2, ensure_ascii: bool = False
) -> Result[str]:
    """Serialize a record to indented JSON text"""
    return serialize(record, pretty=True, indent=indent, ensure_ascii=ensure_ascii)
