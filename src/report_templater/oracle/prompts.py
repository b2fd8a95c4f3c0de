"""Prompt text for the structuring model."""

SYSTEM_PROMPT = "You are a precise document structuring assistant. You output only Markdown."

# Upper bound on extracted text sent in one request
MAX_INPUT_CHARS = 60000

ANALYZE_PROMPT = """\
You receive plain text extracted from a printed report (one "--- Page N ---"
marker per page; single spaces inside a line may separate table columns).
Convert it into a clean, reusable Markdown template.

Rules:
  1. Keep every content block in the original order.  Do not merge, reorder or skip blocks.
  2. Title lines become level-1 headings; the company name in the title is {{{{CompanyName}}}}.
  3. Report metadata uses placeholders only:
       **Report No**: {{{{ReportNo}}}}
       **Report date**: {{{{ReportDate}}}}
       **Page**: {{{{CurrentPage}}}} of {{{{TotalPages}}}}
  4. Each numbered section becomes a level-2 heading, e.g. "## Section 1-Identification".
  5. In Section 1, every product- or company-specific value is a placeholder
     (**Product Name**: {{{{ProductName}}}}, **Address**: {{{{Address}}}}, ...).
     From Section 2 on, copy the document text unless it is product-specific.
  6. Every "Label: Value" line is written as "**Label**: Value".
  7. Every table is a pipe table: header row, then a "| --- |" separator with
     the same number of cells, then one row per line with the same number of
     cells.  Keep the original column names and order.
  8. Placeholder names are CamelCase identifiers inside double braces.

Return ONLY the Markdown text.  Do not wrap it in code fences and do not add explanations.

=== INPUT TEXT ===
{raw_text}
"""


def build_analyze_prompt(raw_text: str) -> str:
    """Fill the analysis prompt with (truncated) extracted text."""
    return ANALYZE_PROMPT.format(raw_text=raw_text[:MAX_INPUT_CHARS])
