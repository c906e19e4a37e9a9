# dto_codec/infrastructure/json_tree/__init__.py

"""JSON tree collaborator used by the codec.

Wraps the standard library json module behind the small set of tree
operations the codec needs.
"""

# Local imports
from dto_codec.infrastructure.json_tree._tree import MISSING
from dto_codec.infrastructure.json_tree._tree import Missing
from dto_codec.infrastructure.json_tree._tree import add_item_to_array
from dto_codec.infrastructure.json_tree._tree import add_item_to_object
from dto_codec.infrastructure.json_tree._tree import create_array
from dto_codec.infrastructure.json_tree._tree import create_number
from dto_codec.infrastructure.json_tree._tree import create_object
from dto_codec.infrastructure.json_tree._tree import create_string
from dto_codec.infrastructure.json_tree._tree import get_array_item
from dto_codec.infrastructure.json_tree._tree import get_array_size
from dto_codec.infrastructure.json_tree._tree import get_object_item
from dto_codec.infrastructure.json_tree._tree import node_kind
from dto_codec.infrastructure.json_tree._tree import parse_tree
from dto_codec.infrastructure.json_tree._tree import render

__all__ = [
    "MISSING",
    "Missing",
    "add_item_to_array",
    "add_item_to_object",
    "create_array",
    "create_number",
    "create_object",
    "create_string",
    "get_array_item",
    "get_array_size",
    "get_object_item",
    "node_kind",
    "parse_tree",
    "render",
]
