"""
Groups document elements into struct records.

Each heading opens a candidate record; the paragraphs after it become its
documentation and the single table after it becomes its fields. A candidate
is staged until the next heading (or end of input) closes it, and only then
appended to the output if it is complete. Malformed tables reject the staged
candidate on the spot.
"""

import logging
from dataclasses import dataclass, field

from structgen.errors import MalformedTableError
from structgen.pipeline.tables import extract_fields
from structgen.pipeline.validator import check_headers, missing_parts
from structgen.state import (
    HEADING,
    PARAGRAPH,
    TABLE,
    DocumentElement,
    FieldRecord,
    RejectReason,
    Rejection,
    StructRecord,
)

logger = logging.getLogger(__name__)


@dataclass
class _Staged:
    index: int
    type_name: str
    doc_parts: list[str] = field(default_factory=list)
    fields: list[FieldRecord] = field(default_factory=list)
    has_table: bool = False

    @property
    def has_doc(self) -> bool:
        return bool(self.doc_parts)

    def to_record(self) -> StructRecord:
        return StructRecord(
            type_name=self.type_name,
            documentation="\n".join(self.doc_parts),
            fields=list(self.fields),
            index=self.index,
        )


def _reject(staged: _Staged, reason: RejectReason, detail: str) -> Rejection:
    logger.warning("Discarding %d:%s (%s: %s)", staged.index, staged.type_name, reason.value, detail)
    return Rejection(index=staged.index, type_name=staged.type_name, reason=reason, detail=detail)


def build_structs(elements: list[DocumentElement]) -> tuple[list[StructRecord], list[Rejection], int]:
    """Scan elements in document order. Returns (accepted, rejected, candidate count)."""
    structs: list[StructRecord] = []
    rejected: list[Rejection] = []
    staged: _Staged | None = None
    candidates = 0

    def close(current: _Staged) -> None:
        missing = missing_parts(current.has_doc, current.has_table)
        if missing:
            rejected.append(_reject(current, RejectReason.INCOMPLETE_RECORD, "missing " + " and ".join(missing)))
        else:
            structs.append(current.to_record())

    for el in elements:
        kind = el["kind"]

        if kind == HEADING:
            if staged is not None:
                close(staged)
            staged = _Staged(index=candidates, type_name=el["text"].strip())
            candidates += 1

        elif staged is None:
            # Paragraphs and tables before the first heading belong to no record.
            continue

        elif kind == PARAGRAPH:
            # Blank paragraphs are not documentation.
            if el["text"].strip():
                staged.doc_parts.append(el["text"])

        elif kind == TABLE:
            if staged.has_table:
                rejected.append(_reject(staged, RejectReason.MALFORMED_TABLE, "more than one field table"))
                staged = None
                continue
            if not check_headers(el["headers"]):
                rejected.append(_reject(
                    staged, RejectReason.MALFORMED_TABLE, f"unexpected headers {el['headers']!r}",
                ))
                staged = None
                continue
            try:
                staged.fields = extract_fields(el)
            except MalformedTableError as exc:
                rejected.append(_reject(staged, RejectReason.MALFORMED_TABLE, str(exc)))
                staged = None
                continue
            staged.has_table = True

        else:
            logger.debug("Skipping element of kind %r", kind)

    if staged is not None:
        close(staged)

    return structs, rejected, candidates


def discover_structs(state: dict) -> dict:
    """Pipeline stage: group loaded elements into candidate struct records."""
    structs, rejected, candidates = build_structs(state["elements"])
    logger.info(
        "Built %d of %d candidate records (%d discarded)",
        len(structs), candidates, len(rejected),
    )
    return {"structs": structs, "rejected": rejected, "candidates": candidates}
