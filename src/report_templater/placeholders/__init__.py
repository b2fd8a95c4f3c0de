"""{{Name}} placeholder extraction, section grouping, and template filling.

Submodules:
  extract  -- placeholder discovery and grouping by enclosing heading
  fill     -- prefill from key/value data, "No data" marking, final substitution
"""
