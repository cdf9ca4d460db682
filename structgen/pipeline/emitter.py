"""
Renders accepted struct records as Zig declarations.

No validation happens here; only records that passed the builder and the
final filter reach the emitter.
"""

import logging

from structgen.config import TypeConfig
from structgen.errors import UnmappedTypeError
from structgen.pipeline.typemap import map_type
from structgen.state import FieldRecord, StructRecord

logger = logging.getLogger(__name__)

INDENT = "    "
OPTIONAL_PREFIX = "Optional."


def doc_comment(text: str, indent: str = "") -> str:
    """Prefix text with '/// ', continuing the comment across embedded newlines."""
    return indent + "/// " + text.replace("\n", "\n" + indent + "/// ")


def _placeholder(exc: UnmappedTypeError) -> str:
    message = exc.reason.replace("\\", "\\\\").replace('"', '\\"')
    return f'@compileError("{message}")'


def _field_type(record: StructRecord, fld: FieldRecord, config: TypeConfig, unmapped: list[dict]) -> str:
    try:
        return map_type(fld["type_name"], config)
    except UnmappedTypeError as exc:
        if config.strict:
            raise
        logger.warning("%s.%s: %s", record["type_name"], fld["name"], exc.reason)
        unmapped.append({
            "struct": record["type_name"],
            "field": fld["name"],
            "type_name": exc.type_name,
            "reason": exc.reason,
        })
        return _placeholder(exc)


def emit_field(record: StructRecord, fld: FieldRecord, config: TypeConfig, unmapped: list[dict]) -> str:
    optional = fld["description"].startswith(OPTIONAL_PREFIX)
    type_expr = _field_type(record, fld, config, unmapped)
    lines = doc_comment(fld["description"], INDENT) + "\n"
    if optional:
        lines += f"{INDENT}{fld['name']}: ?{type_expr} = null,\n"
    else:
        lines += f"{INDENT}{fld['name']}: {type_expr},\n"
    return lines


def emit_struct(record: StructRecord, config: TypeConfig, unmapped: list[dict] | None = None) -> str:
    if unmapped is None:
        unmapped = []
    out = doc_comment(record["documentation"]) + "\n"
    out += f"pub const {record['type_name']} = struct {{\n"
    for fld in record["fields"]:
        out += emit_field(record, fld, config, unmapped)
    out += "};"
    return out


def emit_code(state: dict) -> dict:
    """Pipeline stage: render every accepted record, blank line between structs."""
    config: TypeConfig = state.get("config") or TypeConfig()
    unmapped: list[dict] = []

    blocks = [emit_struct(record, config, unmapped) for record in state["structs"]]
    code = "\n\n".join(blocks) + "\n" if blocks else ""

    logger.info("Emitted %d structs (%d unmapped field types)", len(blocks), len(unmapped))
    return {"code": code, "unmapped": unmapped}
