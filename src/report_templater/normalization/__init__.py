"""Deterministic repair passes for generated markdown templates.

Submodules:
  patterns           -- compiled regex patterns (static and vocabulary-built)
  classifiers        -- line kind helpers and code-block tracking
  redundant_headers  -- pass 1: remove echoed table headers
  section_headings   -- pass 2: split section headings and sub-labels
  key_values         -- pass 3: bold 'Label: Value' labels
  pipeline           -- ordered composition of the passes
"""
