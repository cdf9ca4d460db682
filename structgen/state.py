"""
Shared TypedDicts for the extraction pipeline.
"""

from enum import Enum
from typing import TypedDict


class DocumentElement(TypedDict):
    kind: str                # heading, paragraph, table
    text: str
    level: int               # heading level if applicable
    headers: list[str]       # table header cells, empty for non-tables
    rows: list[list[str]]    # table body rows, empty for non-tables


class FieldRecord(TypedDict):
    name: str
    type_name: str
    description: str


class StructRecord(TypedDict):
    type_name: str
    documentation: str
    fields: list[FieldRecord]
    index: int               # position among candidates, first-seen order


class RejectReason(str, Enum):
    MALFORMED_TABLE = "malformed table"
    INCOMPLETE_RECORD = "incomplete record"
    BAD_TYPE_NAME = "bad type name"


class Rejection(TypedDict):
    index: int
    type_name: str
    reason: RejectReason
    detail: str


HEADING = "heading"
PARAGRAPH = "paragraph"
TABLE = "table"


def heading(text: str, level: int = 4) -> DocumentElement:
    return DocumentElement(kind=HEADING, text=text, level=level, headers=[], rows=[])


def paragraph(text: str) -> DocumentElement:
    return DocumentElement(kind=PARAGRAPH, text=text, level=0, headers=[], rows=[])


def table(headers: list[str], rows: list[list[str]]) -> DocumentElement:
    return DocumentElement(kind=TABLE, text="", level=0, headers=headers, rows=rows)
