"""
Shape checks for field tables and candidate records.

All checks are pure. The builder applies the header and completeness checks
while scanning; filter_records is the final pass over its output.
"""

import logging
import re

from structgen.state import RejectReason, Rejection, StructRecord

logger = logging.getLogger(__name__)

EXPECTED_HEADERS = ("Field", "Type", "Description")

_TYPE_NAME_RE = re.compile(r"^[A-Z][a-z0-9]*([A-Z][a-z0-9]*)*$")


def check_headers(headers: list[str]) -> bool:
    """Exactly Field, Type, Description in that order, ignoring surrounding whitespace."""
    return tuple(h.strip() for h in headers) == EXPECTED_HEADERS


def missing_parts(has_doc: bool, has_table: bool) -> list[str]:
    missing = []
    if not has_doc:
        missing.append("documentation")
    if not has_table:
        missing.append("field table")
    return missing


def is_good_type_name(name: str) -> bool:
    """TitleCase words, letters and digits only, e.g. HelloWorld or Http2Response."""
    return _TYPE_NAME_RE.match(name) is not None


def filter_records(structs: list[StructRecord]) -> tuple[list[StructRecord], list[Rejection]]:
    """Split records into those fit for emission and rejections, keeping order."""
    good: list[StructRecord] = []
    rejected: list[Rejection] = []

    for record in structs:
        if not is_good_type_name(record["type_name"]):
            rejected.append(Rejection(
                index=record["index"],
                type_name=record["type_name"],
                reason=RejectReason.BAD_TYPE_NAME,
                detail="not a TitleCase identifier",
            ))
        elif not record["fields"]:
            rejected.append(Rejection(
                index=record["index"],
                type_name=record["type_name"],
                reason=RejectReason.INCOMPLETE_RECORD,
                detail="field table has no rows",
            ))
        else:
            good.append(record)

    if rejected:
        logger.info("Filtered %d records with bad names or no fields", len(rejected))
    return good, rejected


def validate(state: dict) -> dict:
    """Pipeline stage: final filtering of built records."""
    good, rejected = filter_records(state["structs"])
    return {
        "structs": good,
        "rejected": sorted(state.get("rejected", []) + rejected, key=lambda r: r["index"]),
    }
