"""Pydantic models for tables found in, or rendered into, a markdown template."""

from pydantic import BaseModel, model_validator


class TableBlock(BaseModel):
    """Read-only view of a table region: header names plus a half-open line range.

    ``start_line`` is the header row index; ``end_line`` is the first line after
    the table (or the document length).
    """

    headers: list[str]
    start_line: int
    end_line: int


class StructuralMismatch(BaseModel):
    """A table row whose cell count differs from the header's.

    Reported to the caller, never repaired: there is no safe value to invent
    for a missing cell.
    """

    line_number: int
    expected: int
    actual: int
    line: str = ""


class TableStructure(BaseModel):
    """Column headers and data rows to be rendered as a markdown table.

    The model_validator guarantees that every data_row has exactly
    len(column_headers) cells, so a rendered table always has equal
    header, separator and row widths.
    """

    column_headers: list[str]
    data_rows: list[list[str]]

    @model_validator(mode="after")
    def validate_row_widths(self) -> "TableStructure":
        """Ensure every data row has exactly len(column_headers) cells."""
        n_cols = len(self.column_headers)
        for i, row in enumerate(self.data_rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching column_headers)")
        return self
