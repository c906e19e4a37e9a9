# dto_codec/core/types/json.py

"""JSON type definitions for the tree handled by the codec."""

# JSON Type Usage Guide:
# - JSONDict: an object node (keys are always strings)
# - JSONList: an array node
# - JSONType: any node, when the kind is only known at runtime
# - The codec never needs booleans or null, but the tree can still hold them

# Modern type statements for JSON types (Python 3.13)
type JSONPrimitive = str | int | float | bool | None

# Recursive type definition - Python 3.13 handles this cleanly without quotes!
type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
