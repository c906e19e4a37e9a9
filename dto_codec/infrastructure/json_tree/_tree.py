# dto_codec/infrastructure/json_tree/_tree.py

"""JSON tree adapter over the standard library json module

The codec talks to JSON only through these functions: build a tree from
text, ask a node for its kind, look up object children and array elements,
create nodes, attach children and render a tree back to text. Nodes are
plain Python values (dict, list, str, int, float, bool, None).
"""

# Standard library imports
from enum import Enum
from enum import auto
import json
from logging import getLogger

# Local imports
from dto_codec.core.domain.enums import NodeKind
from dto_codec.core.domain.errors import MalformedInputError
from dto_codec.core.types.json import JSONDict
from dto_codec.core.types.json import JSONList
from dto_codec.core.types.json import JSONType

logger = getLogger(__name__)


class Missing(Enum):
    """Marker for an absent object member (distinct from JSON null)"""

    MISSING = auto()


MISSING = Missing.MISSING


def _first_key_wins(pairs: list[tuple[str, JSONType]]) -> JSONDict:
    """Object hook keeping the first occurrence of a duplicated key"""
    obj: JSONDict = {}
    for key, value in pairs:
        if key not in obj:
            obj[key] = value
    return obj


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


# ============================================================================
# Parsing
# ============================================================================


def parse_tree(text: str | bytes | bytearray) -> JSONType:
    """Build a JSON tree from text

    Raises:
        MalformedInputError: If the text is not a single valid JSON value.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise MalformedInputError(f"Expected JSON text, got {type(text).__name__}")

    try:
        return json.loads(
            text, object_pairs_hook=_first_key_wins, parse_constant=_reject_constant
        )
    except RecursionError:
        raise MalformedInputError("JSON nesting is too deep") from None
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.debug(f"Rejected malformed JSON input: {e}")
        raise MalformedInputError(str(e)) from None


# ============================================================================
# Node inspection
# ============================================================================


def node_kind(node: JSONType) -> NodeKind:
    """Return the runtime kind of a tree node

    bool MUST be checked before int: bool subclasses int in Python, and a
    JSON ``true`` is not a number.
    """
    if isinstance(node, bool):
        return NodeKind.BOOLEAN
    if isinstance(node, dict):
        return NodeKind.OBJECT
    if isinstance(node, list):
        return NodeKind.ARRAY
    if isinstance(node, str):
        return NodeKind.STRING
    if isinstance(node, (int, float)):
        return NodeKind.NUMBER
    if node is None:
        return NodeKind.NULL
    raise TypeError(f"Unsupported JSON node type: {type(node)!r}")


def get_object_item(node: JSONDict, key: str) -> JSONType | Missing:
    """Get an object member by exact key, or MISSING if absent"""
    return node.get(key, MISSING)


def get_array_size(node: JSONList) -> int:
    return len(node)


def get_array_item(node: JSONList, index: int) -> JSONType:
    return node[index]


# ============================================================================
# Node construction
# ============================================================================


def create_number(value: int) -> int:
    return int(value)


def create_string(value: str) -> str:
    return str(value)


def create_object() -> JSONDict:
    return {}


def create_array() -> JSONList:
    return []


def add_item_to_object(node: JSONDict, key: str, item: JSONType) -> None:
    node[key] = item


def add_item_to_array(node: JSONList, item: JSONType) -> None:
    node.append(item)


# ============================================================================
# Rendering
# ============================================================================


def render(
    node: JSONType, pretty: bool = False, indent: int = 2, ensure_ascii: bool = False
) -> str:
    """Render a tree to compact or indented text

    Args:
        node: Root of the tree
        pretty: If True, indent nested values by ``indent`` spaces
        indent: Spaces per nesting level for pretty output
        ensure_ascii: If True, escape every non-ASCII character
    """
    if pretty:
        return json.dumps(node, indent=indent, ensure_ascii=ensure_ascii, allow_nan=False)
    return json.dumps(node, separators=(",", ":"), ensure_ascii=ensure_ascii, allow_nan=False)
