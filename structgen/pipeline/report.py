"""
pipeline/report.py: diagnostics for discarded records and a run summary.
"""

import logging

logger = logging.getLogger(__name__)


def format_rejection(rejection: dict) -> str:
    return "{index}:{type_name} ({reason}: {detail})".format(
        index=rejection["index"],
        type_name=rejection["type_name"],
        reason=rejection["reason"].value,
        detail=rejection["detail"],
    )


def summarize(state: dict) -> dict:
    structs = state.get("structs", [])
    rejected = state.get("rejected", [])
    unmapped = state.get("unmapped", [])

    if rejected:
        logger.info(
            "Ignored %d bad records, they are %s",
            len(rejected), ", ".join(format_rejection(r) for r in rejected),
        )
    logger.info(
        "Generated %d types, they are %s",
        len(structs), ", ".join(s["type_name"] for s in structs),
    )
    if unmapped:
        logger.warning("%d field types left as @compileError placeholders", len(unmapped))

    return {"summary": {
        "accepted": len(structs),
        "rejected": len(rejected),
        "unmapped": len(unmapped),
    }}
