"""Compiled regex patterns for markdown table structure.

Used by detection.py, formatting.py and the normalization passes.
"""

import re

# ─── Row Patterns ─────────────────────────────────────────────────────────────

# Pipe that is not escaped as "\|" -- the only real cell delimiter
CELL_SPLIT_RE = re.compile(r"(?<!\\)\|")

# Separator cell such as "---", ":---", "---:" or ":---:"
SEPARATOR_CELL_RE = re.compile(r"^:?-{3,}:?$")


def is_table_line(line: str) -> bool:
    """Return True for any line that belongs to a pipe table (starts with '|')."""
    return line.strip().startswith("|")


def is_pipe_row(line: str) -> bool:
    """Return True for a line both opened and closed by a pipe."""
    stripped = line.strip()
    return len(stripped) >= 2 and stripped.startswith("|") and stripped.endswith("|")


def split_cells(line: str) -> list[str]:
    """Split a pipe row into stripped cells, dropping the outer empty cells.

    '| a | b |' -> ['a', 'b'];  '| a | | c |' -> ['a', '', 'c']
    """
    cells = [cell.strip() for cell in CELL_SPLIT_RE.split(line.strip())]
    if cells and cells[0] == "":
        cells = cells[1:]
    if cells and cells[-1] == "":
        cells = cells[:-1]
    return cells


def is_separator_row(line: str) -> bool:
    """Return True for '| --- | :---: |' style separator rows."""
    if not is_pipe_row(line):
        return False
    cells = split_cells(line)
    return bool(cells) and all(SEPARATOR_CELL_RE.match(cell) for cell in cells)
