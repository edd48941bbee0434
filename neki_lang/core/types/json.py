# neki_lang/core/types/json.py

"""JSON type definitions for the relaxed-JSON value model."""

# JSON Type Usage Guide:
# - JSONDict: an object node; Python dicts keep insertion order, which is the
#   source order of the keys and is observable in generated patches
# - JSONList: an array node
# - JSONType: any node of a parsed document
# - float covers Infinity and NaN produced by signed number literals

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
