"""
Maps documented type names to Zig type expressions.
"""

import re

from structgen.config import TypeConfig
from structgen.errors import UnmappedTypeError

ARRAY_PREFIX = "[]"
INTEGER_OR_STRING = "integer_or_string"
JSON_VALUE = "std.json.Value"

_ARRAY_OF_RE = re.compile(r"Array of\s+(\w+)")
_OR_RE = re.compile(r"\bor\b")


def _replace_array_of(type_name: str) -> str:
    """'Array of Array of X' -> '[][]X'."""
    return _ARRAY_OF_RE.sub(ARRAY_PREFIX + r"\1", type_name)


def map_type(type_name: str, config: TypeConfig) -> str:
    """Translate one documented type, raising UnmappedTypeError when it can't be.

    Errors always name the documented string, even when the failing part is
    the element type of an array.
    """
    return _map(type_name, type_name, config)


def _map(name: str, documented: str, config: TypeConfig) -> str:
    name = _replace_array_of(name)
    if name.startswith(ARRAY_PREFIX):
        return ARRAY_PREFIX + _map(name[len(ARRAY_PREFIX):], documented, config)

    if name == "Integer":
        if config.integer_repr is None:
            raise UnmappedTypeError(documented, "It's a Integer, choose one integer type")
        return config.integer_repr
    if name == "Float":
        if config.float_repr is None:
            raise UnmappedTypeError(documented, "It's a Float, choose one float type")
        return config.float_repr
    if name == "Boolean":
        return "bool"
    if name == "True":
        return "bool" if config.true_as_bool else "@TypeOf(true)"
    if name == "String":
        return "[]u8"

    # Checked before the generic union rule below.
    if name == "Integer or String":
        return INTEGER_OR_STRING
    if _OR_RE.search(name):
        if config.prefer_json_value_for_unions:
            return JSON_VALUE
        raise UnmappedTypeError(documented, f"Type name includes 'or' not yet supported: '{documented}'")

    return name
