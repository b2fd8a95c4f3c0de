"""Markdown table rendering and in-place replacement of a template's table region.

Two ways to build a table from source records (dicts keyed by source column):
  - template-driven: the template's target headers, filled through a column mapping
  - manual: a chosen list of source columns, optionally renamed
"""

import logging
from typing import Any

from report_templater.tables.schema import TableBlock, TableStructure

logger = logging.getLogger(__name__)


def format_cell(value: Any) -> str:
    """Render a value as a single-line cell that cannot change the row's width."""
    if value is None:
        return ""
    text = str(value).replace("\r\n", " ").replace("\n", " ").strip()
    return text.replace("|", "\\|")


def render_markdown(table: TableStructure) -> str:
    """Convert a validated TableStructure into a markdown table string."""
    lines = ["| " + " | ".join(table.column_headers) + " |"]
    lines.append("| " + " | ".join(["---"] * len(table.column_headers)) + " |")
    for row in table.data_rows:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines)


def render_table(
    target_headers: list[str],
    mapping: dict[str, str],
    rows: list[dict[str, Any]],
) -> str:
    """Render *rows* under the template's headers, pulling each cell through *mapping*.

    Unmapped targets produce empty cells.
    """
    data_rows = []
    for record in rows:
        cells = []
        for target in target_headers:
            source = mapping.get(target, "")
            cells.append(format_cell(record.get(source, "")) if source else "")
        data_rows.append(cells)

    headers = [format_cell(h) for h in target_headers]
    return render_markdown(TableStructure(column_headers=headers, data_rows=data_rows))


def render_manual_table(
    columns: list[str],
    rows: list[dict[str, Any]],
    renames: dict[str, str] | None = None,
) -> str:
    """Render the chosen source *columns* of *rows*, with optional header renames."""
    renames = renames or {}
    headers = [format_cell(renames.get(col) or col) for col in columns]
    data_rows = [[format_cell(record.get(col, "")) for col in columns] for record in rows]
    return render_markdown(TableStructure(column_headers=headers, data_rows=data_rows))


def replace_table(markdown: str, block: TableBlock, table_markdown: str) -> str:
    """Splice *table_markdown* over the block's [start_line, end_line) range."""
    lines = markdown.split("\n")
    if not 0 <= block.start_line <= block.end_line <= len(lines):
        raise ValueError(f"Table block {block.start_line}-{block.end_line} is outside a {len(lines)}-line document")
    lines[block.start_line : block.end_line] = table_markdown.split("\n")
    logger.info("Replaced table lines %d-%d", block.start_line, block.end_line)
    return "\n".join(lines)
