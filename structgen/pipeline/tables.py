"""
Field table extraction: one FieldRecord per body row.
"""

from structgen.errors import MalformedTableError
from structgen.state import DocumentElement, FieldRecord

_COLUMNS = 3


def extract_fields(table: DocumentElement) -> list[FieldRecord]:
    """Read name/type/description from the first three cells of every row.

    Extra cells are ignored. A short row raises MalformedTableError so the
    caller can drop the whole record rather than keep a partial field list.
    """
    fields: list[FieldRecord] = []
    for row_num, cells in enumerate(table["rows"], start=1):
        if len(cells) < _COLUMNS:
            raise MalformedTableError(
                f"row {row_num} has {len(cells)} cells, expected {_COLUMNS}"
            )
        fields.append(FieldRecord(
            name=cells[0].strip(),
            type_name=cells[1].strip(),
            description=cells[2].strip(),
        ))
    return fields
