"""Markdown table location, structural checks, column mapping, and rendering.

Submodules:
  patterns    -- compiled regex patterns for table rows and separators
  schema      -- TableBlock / StructuralMismatch / TableStructure pydantic models
  detection   -- first-table location and row-width validation
  columns     -- heuristic target -> source column mapping
  formatting  -- markdown table rendering and in-place region replacement
"""
