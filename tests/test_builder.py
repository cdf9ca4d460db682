"""Tests for grouping elements into struct records."""

from structgen.pipeline.builder import build_structs, discover_structs
from structgen.state import RejectReason, heading, paragraph, table

HEADERS = ["Field", "Type", "Description"]
ROWS = [["a", "String", "A."]]


def test_point_example(point_elements):
    structs, rejected, candidates = build_structs(point_elements)

    assert rejected == []
    assert candidates == 1
    assert structs == [{
        "type_name": "Point",
        "documentation": "A 2D point.",
        "fields": [
            {"name": "x", "type_name": "Integer", "description": "The x."},
            {"name": "y", "type_name": "Integer", "description": "The y."},
        ],
        "index": 0,
    }]


def test_missing_documentation_is_incomplete():
    structs, rejected, _ = build_structs([heading("Point"), table(HEADERS, ROWS)])

    assert structs == []
    assert len(rejected) == 1
    assert rejected[0]["reason"] is RejectReason.INCOMPLETE_RECORD
    assert rejected[0]["type_name"] == "Point"
    assert "documentation" in rejected[0]["detail"]


def test_missing_table_is_incomplete():
    structs, rejected, _ = build_structs([heading("Point"), paragraph("Doc."), heading("Next")])

    assert structs == []
    assert [(r["type_name"], r["reason"]) for r in rejected] == [
        ("Point", RejectReason.INCOMPLETE_RECORD),
        ("Next", RejectReason.INCOMPLETE_RECORD),
    ]
    assert "field table" in rejected[0]["detail"]


def test_wrong_headers_are_malformed():
    elements = [heading("Point"), paragraph("Doc."), table(["Name", "Kind", "Desc"], ROWS)]

    structs, rejected, _ = build_structs(elements)

    assert structs == []
    assert rejected[0]["reason"] is RejectReason.MALFORMED_TABLE


def test_short_row_discards_whole_record():
    elements = [
        heading("Point"), paragraph("Doc."),
        table(HEADERS, [["x", "Integer", "X."], ["y", "Integer"]]),
    ]

    structs, rejected, _ = build_structs(elements)

    assert structs == []
    assert rejected[0]["reason"] is RejectReason.MALFORMED_TABLE
    assert "row 2" in rejected[0]["detail"]


def test_second_table_is_malformed():
    elements = [heading("Point"), paragraph("Doc."), table(HEADERS, ROWS), table(HEADERS, ROWS)]

    structs, rejected, _ = build_structs(elements)

    assert structs == []
    assert rejected[0]["detail"] == "more than one field table"


def test_rejection_goes_idle_until_next_heading():
    elements = [
        heading("Broken"), paragraph("Doc."), table(["Name", "Kind", "Desc"], ROWS),
        paragraph("Stray text."), table(HEADERS, ROWS),
        heading("Good"), paragraph("Doc."), table(HEADERS, ROWS),
    ]

    structs, rejected, candidates = build_structs(elements)

    assert [s["type_name"] for s in structs] == ["Good"]
    assert [s["index"] for s in structs] == [1]
    assert len(rejected) == 1
    assert candidates == 2


def test_elements_before_first_heading_are_ignored():
    elements = [paragraph("Intro."), table(HEADERS, ROWS), heading("A"), paragraph("Doc."), table(HEADERS, ROWS)]

    structs, rejected, _ = build_structs(elements)

    assert [s["type_name"] for s in structs] == ["A"]
    assert rejected == []


def test_paragraphs_are_joined_and_newlines_kept():
    elements = [
        heading("A"), paragraph("First line\nsecond line."), paragraph("More."),
        table(HEADERS, ROWS),
    ]

    structs, _, _ = build_structs(elements)

    assert structs[0]["documentation"] == "First line\nsecond line.\nMore."


def test_heading_text_is_stripped():
    structs, _, _ = build_structs([heading("  Chat \n"), paragraph("Doc."), table(HEADERS, ROWS)])

    assert structs[0]["type_name"] == "Chat"


def test_every_candidate_has_one_outcome():
    elements = [
        heading("Available types"), paragraph("All types."),
        heading("A"), paragraph("Doc."), table(HEADERS, ROWS),
        heading("B"), table(HEADERS, ROWS),
        heading("C"), paragraph("Doc."), table(["x"], []),
        heading("D"), paragraph("Doc."), table(HEADERS, ROWS),
    ]

    structs, rejected, candidates = build_structs(elements)

    assert len(structs) + len(rejected) == candidates == 5
    assert [s["type_name"] for s in structs] == ["A", "D"]
    assert [r["type_name"] for r in rejected] == ["Available types", "B", "C"]


def test_discover_structs_stage(point_elements):
    result = discover_structs({"elements": point_elements})

    assert result["candidates"] == 1
    assert [s["type_name"] for s in result["structs"]] == ["Point"]
    assert result["rejected"] == []


def test_blank_paragraph_is_not_documentation():
    structs, rejected, _ = build_structs([heading("Point"), paragraph("   \n"), table(HEADERS, ROWS)])

    assert structs == []
    assert rejected[0]["reason"] is RejectReason.INCOMPLETE_RECORD
    assert "documentation" in rejected[0]["detail"]


def test_blank_paragraphs_are_dropped_from_documentation():
    elements = [heading("A"), paragraph(""), paragraph("Real doc."), paragraph("  "), table(HEADERS, ROWS)]

    structs, _, _ = build_structs(elements)

    assert structs[0]["documentation"] == "Real doc."
