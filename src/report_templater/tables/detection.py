"""Locate the primary table of a markdown template and check its row widths.

Only the first well-formed table (pipe header immediately followed by a
separator of equal width) is reported; later tables are outside the
single-primary-table scope.  "No table" is a normal ``None`` result.
"""

import logging

from report_templater.tables.patterns import is_pipe_row, is_separator_row, is_table_line, split_cells
from report_templater.tables.schema import StructuralMismatch, TableBlock

logger = logging.getLogger(__name__)


def _as_lines(markdown: str | list[str]) -> list[str]:
    return markdown.split("\n") if isinstance(markdown, str) else list(markdown)


def _trim_empty_edges(cells: list[str]) -> list[str]:
    """Drop empty cells from both ends, keeping interior blanks."""
    start, end = 0, len(cells)
    while start < end and cells[start] == "":
        start += 1
    while end > start and cells[end - 1] == "":
        end -= 1
    return cells[start:end]


# ─── Table Start Detection ───────────────────────────────────────────────────


def is_table_header_at(lines: list[str], idx: int) -> bool:
    """Return True if lines[idx] is a pipe row followed by a separator of equal width."""
    if idx < 0 or idx + 1 >= len(lines):
        return False
    header, separator = lines[idx], lines[idx + 1]
    if not (is_pipe_row(header) and is_separator_row(separator)):
        return False
    return len(split_cells(header)) == len(split_cells(separator))


def find_table_end(lines: list[str], header_idx: int) -> int:
    """Return the index of the first line after the separator that is not a table row."""
    for j in range(header_idx + 2, len(lines)):
        if not is_table_line(lines[j]):
            return j
    return len(lines)


def find_table(markdown: str | list[str]) -> TableBlock | None:
    """Return the first table block in *markdown*, or None when there is none."""
    lines = _as_lines(markdown)
    for i in range(len(lines) - 1):
        if is_table_header_at(lines, i):
            block = TableBlock(
                headers=_trim_empty_edges(split_cells(lines[i])),
                start_line=i,
                end_line=find_table_end(lines, i),
            )
            logger.debug("Found table at lines %d-%d: %s", block.start_line, block.end_line, block.headers)
            return block
    logger.debug("No table found in %d lines", len(lines))
    return None


# ─── Structural Validation ───────────────────────────────────────────────────


def validate_table(markdown: str | list[str], block: TableBlock | None = None) -> list[StructuralMismatch]:
    """Return one finding per data row whose cell count differs from the header's.

    Locates the first table when *block* is not given.  An empty list means the
    table is consistent (or that there is no table to check).
    """
    lines = _as_lines(markdown)
    block = block or find_table(lines)
    if block is None:
        return []

    expected = len(split_cells(lines[block.start_line]))
    findings: list[StructuralMismatch] = []
    for i in range(block.start_line + 2, block.end_line):
        actual = len(split_cells(lines[i]))
        if actual != expected:
            findings.append(StructuralMismatch(line_number=i, expected=expected, actual=actual, line=lines[i]))

    if findings:
        logger.warning("Table at line %d has %d rows with a wrong cell count", block.start_line, len(findings))
    return findings
