"""Report template reconstruction and normalization.

Subpackages:
  layout         -- positioned glyph runs -> ordered lines per page
  tables         -- table location, structural checks, column mapping, rendering
  normalization  -- deterministic repair passes over generated markdown
  placeholders   -- {{Name}} extraction, section grouping, template filling
  oracle         -- client boundary for the external structuring model
"""
