"""Layout extraction: positioned glyph runs to ordered page text.

Submodules:
  schema   -- GlyphRun / TextLine / PageLayout pydantic models
  extract  -- sorting, dynamic line grouping, page concatenation
"""
