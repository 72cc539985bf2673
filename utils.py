# utils.py
"""
Shared rendering helpers for report rows.
Every renderer takes fully materialized rows whose first row is the header.
"""

import csv
import io
import json
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from docx import Document

from logger import get_logger

LOGGER = get_logger(__name__)


def materialize_rows(rows: Iterable[Iterable[str]]) -> List[List[str]]:
    """Consume a lazy report into lists, so errors surface before anything is written."""
    return [list(row) for row in rows]


# ==========================
# Table Rendering
# ==========================

def _md_cell(value: str) -> str:
    return (value or "").replace("|", "\\|").replace("\n", "<br>")


def render_table_markdown(rows: List[List[str]]) -> str:
    """
    Render report rows as a Markdown table.

    Args:
        rows: Header row followed by data rows

    Returns:
        Markdown string for the table, or "" for an empty report
    """
    if not rows:
        return ""

    headers, body = rows[0], rows[1:]
    lines = []

    # Table headers and separator
    lines.append("| " + " | ".join(_md_cell(h) for h in headers) + " |")
    lines.append("| " + " | ".join(["---"] * len(headers)) + " |")

    # Table rows
    for row in body:
        # Pad or truncate row to match header count
        data = row[:len(headers)] + [""] * max(0, len(headers) - len(row))
        lines.append("| " + " | ".join(_md_cell(cell) for cell in data) + " |")

    return "\n".join(lines) + "\n"


def render_csv(rows: List[List[str]], delimiter: str = ",") -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
    writer.writerows(rows)
    return buf.getvalue()


def render_json(rows: List[List[str]]) -> str:
    """Render data rows as a JSON list of objects keyed by header name."""
    if not rows:
        return "[]\n"
    headers = rows[0]
    records = [dict(zip(headers, row)) for row in rows[1:]]
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


RENDERERS: Dict[str, Callable[[List[List[str]]], str]] = {
    "csv": render_csv,
    "markdown": render_table_markdown,
    "json": render_json,
}


# ==========================
# DOCX Output
# ==========================

def write_docx(
    rows: List[List[str]],
    path: Union[str, Path],
    *,
    table_style: Optional[str] = "Table Grid",
    title: Optional[str] = None,
) -> str:
    """Write the report as a table in a Word document; returns the written path."""
    doc = Document()
    if title:
        doc.add_heading(title, level=1)

    if rows:
        table = doc.add_table(rows=0, cols=len(rows[0]))
        if table_style:
            table.style = table_style
        for idx, row in enumerate(rows):
            cells = table.add_row().cells
            for cell, value in zip(cells, row):
                cell.text = value or ""
                if idx == 0:
                    for run in cell.paragraphs[0].runs:
                        run.bold = True

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(path))
    LOGGER.info("Wrote %d report rows to %s", max(0, len(rows) - 1), path)
    return str(path)
