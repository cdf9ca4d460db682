"""
HTML loading: BeautifulSoup for region selection, Docling for layout structure.

Everything document-specific happens here. The rest of the pipeline only
sees the flat DocumentElement list this stage returns.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Iterable

from bs4 import BeautifulSoup

from structgen.state import DocumentElement, heading, paragraph, table

logger = logging.getLogger(__name__)

DEFAULT_REGION = "dev_page_content"

_HEADING_LABELS = {"SECTION_HEADER", "TITLE"}
_PARAGRAPH_LABELS = {"TEXT", "PARAGRAPH"}
_TABLE_LABELS = {"TABLE"}


def select_region(html: str, region_id: str | None) -> str:
    """Return the markup of the element with the given id, or the whole page."""
    if not region_id:
        return html
    soup = BeautifulSoup(html, "lxml")
    region = soup.find(id=region_id)
    if region is None:
        raise ValueError(f"No element with id {region_id!r} in document")
    return f"<html><body>{region}</body></html>"


def _label_of(item: Any) -> str:
    label = item.label
    return (label.value if hasattr(label, "value") else str(label)).upper()


def _table_cells(item: Any) -> tuple[list[str], list[list[str]]]:
    """First grid row is the header row; the remaining rows are the body."""
    grid = [[(cell.text or "").strip() for cell in row] for row in item.data.grid]
    if not grid:
        return [], []
    return grid[0], grid[1:]


def elements_from_items(items: Iterable[tuple[Any, int]]) -> list[DocumentElement]:
    """Flatten docling's (item, level) pairs into DocumentElements."""
    elements: list[DocumentElement] = []
    skipped = 0

    for item, _depth in items:
        label = _label_of(item)

        if label in _TABLE_LABELS:
            headers, rows = _table_cells(item)
            elements.append(table(headers, rows))
            continue

        text = getattr(item, "text", None)
        if not text:
            skipped += 1
            continue

        if label in _HEADING_LABELS:
            elements.append(heading(text.strip(), getattr(item, "level", 1) or 1))
        elif label in _PARAGRAPH_LABELS:
            elements.append(paragraph(text))
        else:
            skipped += 1

    if skipped:
        logger.debug("Skipped %d items without a usable label", skipped)
    return elements


def load_document(state: dict) -> dict:
    """Convert an HTML page to structured elements, narrowed to one region."""
    html_path = state["html_path"]
    path = Path(html_path)
    if not path.exists():
        raise FileNotFoundError(f"HTML not found: {html_path}")

    from docling.datamodel.base_models import DocumentStream
    from docling.document_converter import DocumentConverter

    region_id = state.get("region", DEFAULT_REGION)
    html = select_region(path.read_text(encoding="utf-8"), region_id)
    if region_id:
        logger.info("Selected region #%s (%d chars)", region_id, len(html))

    logger.info("Converting with Docling: %s", html_path)
    source = DocumentStream(name=path.stem + ".html", stream=BytesIO(html.encode("utf-8")))
    doc = DocumentConverter().convert(source).document

    elements = elements_from_items(doc.iterate_items())
    logger.info("Loaded %d elements", len(elements))
    return {"elements": elements}
